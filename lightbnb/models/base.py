"""
Base model and mixins for SQLAlchemy ORM.

The LightBnB schema uses integer serial keys assigned by the database,
so models only share the declarative base and serialization helpers.
"""

from typing import Any

from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base


# SQLAlchemy declarative base for all ORM models
Base = declarative_base()


class IntegerIDMixin:
    """
    Mixin that adds a store-assigned integer primary key.

    Attributes:
        id: SERIAL primary key
    """

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Store-assigned primary key"
    )


class ModelMixin:
    """
    Mixin providing common model utilities.

    Adds helper methods for serialization and representation.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary.

        Returns:
            Dictionary with all column values

        Note:
            Only includes columns, not relationships.
        """
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key in ["id", "name", "title", "city"]  # Key identifying fields
        )
        return f"{self.__class__.__name__}({attrs})"
