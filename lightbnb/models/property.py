"""
Property listing model.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, Index
from sqlalchemy.orm import relationship

from lightbnb.models.base import Base, IntegerIDMixin, ModelMixin


class Property(Base, IntegerIDMixin, ModelMixin):
    """
    A rentable property listed by an owner.

    Attributes:
        id: Integer primary key
        owner_id: Listing owner (users.id)
        cost_per_night: Nightly price in cents
        city: City used by the search substring filter

    The remaining columns are descriptive and only passed through.
    """

    __tablename__ = "properties"

    owner_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        doc="Owner of the listing"
    )

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    thumbnail_photo_url = Column(String(255), nullable=True)
    cover_photo_url = Column(String(255), nullable=True)

    cost_per_night = Column(
        Integer,
        nullable=False,
        default=0,
        doc="Nightly price in cents"
    )

    parking_spaces = Column(Integer, nullable=False, default=0)
    number_of_bathrooms = Column(Integer, nullable=False, default=0)
    number_of_bedrooms = Column(Integer, nullable=False, default=0)

    country = Column(String(255), nullable=True)
    street = Column(String(255), nullable=True)
    city = Column(String(255), nullable=True)
    province = Column(String(255), nullable=True)
    post_code = Column(String(255), nullable=True)

    active = Column(Boolean, nullable=False, default=True)

    owner = relationship("User", back_populates="properties")
    reservations = relationship("Reservation", back_populates="property")
    reviews = relationship("PropertyReview", back_populates="property")

    __table_args__ = (
        Index("ix_properties_owner_id", "owner_id"),
        Index("ix_properties_cost_per_night", "cost_per_night"),
    )
