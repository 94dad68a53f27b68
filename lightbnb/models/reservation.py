"""
Reservation and property review models.

Both are read-only from the data-access layer's point of view: reservations
drive the guest history listing and reviews only feed AVG(rating) joins.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, SmallInteger, Text, Index
from sqlalchemy.orm import relationship

from lightbnb.models.base import Base, IntegerIDMixin, ModelMixin


class Reservation(Base, IntegerIDMixin, ModelMixin):
    """
    A guest's booking of a property between two dates.

    Attributes:
        id: Integer primary key
        start_date: First night
        end_date: Checkout date; a reservation is completed once it is in the past
        property_id: Booked property
        guest_id: Booking user
    """

    __tablename__ = "reservations"

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    property_id = Column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False
    )

    guest_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property = relationship("Property", back_populates="reservations")
    guest = relationship("User", back_populates="reservations")

    __table_args__ = (
        Index("ix_reservations_guest_end", "guest_id", "end_date"),
    )


class PropertyReview(Base, IntegerIDMixin, ModelMixin):
    """
    A guest's rating of a stay.

    Attributes:
        rating: 1-5 score, averaged per property
        message: Free-form review text
    """

    __tablename__ = "property_reviews"

    guest_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property_id = Column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False
    )

    reservation_id = Column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=True
    )

    rating = Column(SmallInteger, nullable=False, default=0)
    message = Column(Text, nullable=True)

    property = relationship("Property", back_populates="reviews")

    __table_args__ = (
        Index("ix_property_reviews_property_id", "property_id"),
    )
