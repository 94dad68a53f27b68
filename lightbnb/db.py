"""
Data-access functions called by the web layer.

Each function opens its own session from the shared pool, runs a single
repository operation, and commits. Errors from the store propagate
unchanged after the session is rolled back; nothing is retried.

Example:
    from lightbnb import db

    user = await db.get_user_with_email("victoriablackwell@outlook.com")
    properties = await db.get_all_properties({"city": "Vancouver"}, limit=20)
"""

from typing import Any, List, Mapping, Optional, Union

from lightbnb.core.database import engine, session_scope
from lightbnb.repositories.properties import PropertyRepository
from lightbnb.repositories.reservations import ReservationRepository
from lightbnb.repositories.users import UserRepository
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRecord,
    PropertySearchOptions,
    PropertyWithRating,
    ReservedProperty,
)
from lightbnb.schemas.user import UserCreate, UserRecord

__all__ = [
    "get_user_with_email",
    "get_user_with_id",
    "add_user",
    "get_all_reservations",
    "get_all_properties",
    "add_property",
    "engine",
]


# Users

async def get_user_with_email(email: str) -> Optional[UserRecord]:
    async with session_scope() as session:
        return await UserRepository(session).get_user_with_email(email)


async def get_user_with_id(user_id: Union[int, str]) -> Optional[UserRecord]:
    async with session_scope() as session:
        return await UserRepository(session).get_user_with_id(user_id)


async def add_user(user: Union[UserCreate, Mapping[str, Any]]) -> UserRecord:
    """Raises ValueError when the email is already registered."""
    async with session_scope() as session:
        return await UserRepository(session).add_user(user)


# Reservations

async def get_all_reservations(
    guest_id: Union[int, str],
    limit: Optional[int] = None,
) -> Optional[List[ReservedProperty]]:
    """Returns None, not [], when the guest has no completed stay."""
    async with session_scope() as session:
        return await ReservationRepository(session).get_all_reservations(guest_id, limit)


# Properties

async def get_all_properties(
    options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
    limit: Optional[int] = None,
) -> List[PropertyWithRating]:
    async with session_scope() as session:
        return await PropertyRepository(session).get_all_properties(options, limit)


async def add_property(new_property: Union[PropertyCreate, Mapping[str, Any]]) -> PropertyRecord:
    # In-memory only; no session needed
    return await PropertyRepository(None).add_property(new_property)
