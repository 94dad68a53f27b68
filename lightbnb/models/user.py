"""
User model for guests and property owners.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from lightbnb.models.base import Base, IntegerIDMixin, ModelMixin


class User(Base, IntegerIDMixin, ModelMixin):
    """
    Registered user. The same row can own properties and make reservations.

    Attributes:
        id: Integer primary key (from IntegerIDMixin)
        name: Display name
        email: Login email (unique)
        password: Opaque password hash, stored exactly as given

    Security considerations:
        - Never log or expose password
    """

    __tablename__ = "users"

    name = Column(
        String(255),
        nullable=False,
        doc="Display name"
    )

    email = Column(
        String(255),
        nullable=False,
        unique=True,
        doc="Login email, unique across users"
    )

    password = Column(
        String(255),
        nullable=False,
        doc="Hashed password (never store plaintext)"
    )

    properties = relationship("Property", back_populates="owner")
    reservations = relationship("Reservation", back_populates="guest")

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"
