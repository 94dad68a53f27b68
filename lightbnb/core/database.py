"""
Database configuration and session management.

Provides the SQLAlchemy async engine (the process-wide connection pool),
the session factory, and session helpers used by the data-access functions.
"""

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from lightbnb.core.config import settings
from lightbnb.models.base import Base


def get_async_engine(database_url: str | None = None) -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    For PostgreSQL the driver's default queue pool is used as-is.

    For SQLite (tests and local tooling):
    - Uses StaticPool so an in-memory database survives across sessions
    - Enables check_same_thread=False for async compatibility
    - Turns on foreign keys and case-sensitive LIKE to match PostgreSQL

    Args:
        database_url: Override for settings.sqlalchemy_database_url

    Returns:
        Configured AsyncEngine instance
    """
    url = database_url or settings.sqlalchemy_database_url
    is_sqlite = url.startswith("sqlite")

    engine_kwargs = {
        "echo": False,  # Set to True for SQL query logging (debug only)
        "connect_args": {"check_same_thread": False} if is_sqlite else {},
    }

    if is_sqlite:
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA case_sensitive_like=ON")
            cursor.close()

    return engine


# Global async engine instance
# Created once at import and reused by every operation
engine = get_async_engine()


async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def init_db() -> None:
    """
    Create the schema tables.

    The production schema is managed outside this package; create_all only
    runs when ENABLE_DB_CREATE_ALL is set (local development, demo seeding).
    """
    # Import models so metadata is populated before create_all()
    from lightbnb import models  # noqa: F401

    if os.getenv("ENABLE_DB_CREATE_ALL", "").lower() not in {"1", "true", "yes"}:
        return

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """
    Dispose of the connection pool.

    Call at process shutdown to cleanly close all database connections.
    """
    await engine.dispose()


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """
    Provide a session that commits on success and rolls back on error.

    Example:
        async with session_scope() as session:
            repo = UserRepository(session)
            user = await repo.add_user(new_user)
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
