from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PropertyBase(BaseModel):
    """
    Listing fields shared by creation input and returned records.

    cost_per_night is in cents, like the column it mirrors.
    """
    owner_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: int = Field(default=0, ge=0)
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)
    country: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    active: bool = True


class PropertyCreate(PropertyBase):
    pass


class PropertyRecord(PropertyBase):
    id: int

    class Config:
        from_attributes = True


class PropertyWithRating(PropertyRecord):
    average_rating: Optional[float] = None


class ReservedProperty(PropertyWithRating):
    """A property from a guest's history, tagged with the stay's start date."""
    start_date: date


class PropertySearchOptions(BaseModel):
    """
    Optional filters for the property search.

    Prices are in dollars and are converted to cents when the query is built.
    The price range only applies when both bounds are present.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = Field(default=None, ge=0)
    maximum_price_per_night: Optional[float] = Field(default=None, ge=0)
    minimum_rating: Optional[float] = Field(default=None, ge=0)

    @field_validator(
        "city",
        "owner_id",
        "minimum_price_per_night",
        "maximum_price_per_night",
        "minimum_rating",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v):
        """
        Treat blank form values as absent filters.

        Search forms submit every field, empty ones as "".
        """
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    @property
    def has_price_range(self) -> bool:
        return (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
        )
