"""
SQLAlchemy ORM models for the LightBnB schema.

This module exports all database models and the declarative base.
Import models from this module to ensure they're registered with SQLAlchemy.
"""

from lightbnb.models.base import Base, IntegerIDMixin, ModelMixin
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation, PropertyReview

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "ModelMixin",
    # Models
    "User",
    "Property",
    "Reservation",
    "PropertyReview",
]
