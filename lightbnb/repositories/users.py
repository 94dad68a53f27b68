"""
User repository for lookup and registration.

Provides data access for the users table with email uniqueness checking.
"""

import logging
from typing import Any, Mapping, Optional, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate, UserRecord, parse_user_id

logger = logging.getLogger(__name__)

DUPLICATE_USER_MESSAGE = "User with this email already exists"


class UserRepository:
    """
    Repository for user data access.

    Attributes:
        session: SQLAlchemy async session for database operations
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_user_with_email(self, email: str) -> Optional[UserRecord]:
        """
        Retrieve a user by email.

        The email is compared for equality, never as a LIKE pattern.

        Args:
            email: Email address to look up

        Returns:
            UserRecord if found, None otherwise

        Example:
            >>> user = await repo.get_user_with_email("victoriablackwell@outlook.com")
            >>> print(user.id if user else "Not found")
            3
        """
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        user = result.scalar_one_or_none()
        return UserRecord.model_validate(user) if user is not None else None

    async def get_user_with_id(self, user_id: Union[int, str]) -> Optional[UserRecord]:
        """
        Retrieve a user by primary key.

        Args:
            user_id: User id; numeric strings such as "3" are accepted

        Returns:
            UserRecord if found, None otherwise

        Raises:
            ValueError: If user_id is not an integral number, such as "abc" or 3.7
        """
        stmt = select(User).where(User.id == parse_user_id(user_id))
        result = await self.session.execute(stmt)
        user = result.scalar_one_or_none()
        return UserRecord.model_validate(user) if user is not None else None

    async def add_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> UserRecord:
        """
        Register a new user.

        Args:
            user: Name, email and hashed password

        Returns:
            The inserted user with its store-assigned id

        Raises:
            ValueError: If a user with this email already exists
            pydantic.ValidationError: If required fields are missing

        Note:
            The email check runs first to avoid a doomed insert. The unique
            constraint on users.email still decides concurrent registrations;
            losing that race raises the same ValueError. Rolling back is left
            to the session owner (session_scope).
        """
        new_user = user if isinstance(user, UserCreate) else UserCreate.model_validate(user)

        if await self.get_user_with_email(new_user.email) is not None:
            raise ValueError(DUPLICATE_USER_MESSAGE)

        row = User(
            name=new_user.name,
            email=new_user.email,
            password=new_user.password,
        )
        self.session.add(row)

        try:
            await self.session.flush()
        except IntegrityError as exc:
            logger.info(
                "Concurrent registration rejected by unique constraint",
                extra={"operation": "add_user"},
            )
            raise ValueError(DUPLICATE_USER_MESSAGE) from exc

        await self.session.refresh(row)
        logger.info("User created", extra={"operation": "add_user", "user_id": row.id})

        return UserRecord.model_validate(row)
