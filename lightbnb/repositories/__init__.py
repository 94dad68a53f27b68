"""
Repository layer for data access.

Provides data access abstractions following the Repository pattern,
isolating database access from the web layer.
"""

from lightbnb.repositories.users import UserRepository, DUPLICATE_USER_MESSAGE
from lightbnb.repositories.reservations import ReservationRepository
from lightbnb.repositories.properties import (
    InMemoryPropertyStore,
    PropertyRepository,
    property_store,
)
from lightbnb.repositories.property_search import PropertySearchQuery

__all__ = [
    "UserRepository",
    "DUPLICATE_USER_MESSAGE",
    "ReservationRepository",
    "PropertyRepository",
    "InMemoryPropertyStore",
    "property_store",
    "PropertySearchQuery",
]
