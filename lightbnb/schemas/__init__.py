"""
Pydantic records returned by the data-access layer and its input shapes.
"""

from lightbnb.schemas.user import UserCreate, UserRecord
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRecord,
    PropertySearchOptions,
    PropertyWithRating,
    ReservedProperty,
)

__all__ = [
    "UserCreate",
    "UserRecord",
    "PropertyCreate",
    "PropertyRecord",
    "PropertySearchOptions",
    "PropertyWithRating",
    "ReservedProperty",
]
