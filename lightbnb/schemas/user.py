from typing import Union

from pydantic import BaseModel, Field, TypeAdapter

# Lax integer: 3, 3.0 and "3" pass; 3.7, "3.7" and "abc" are rejected
_user_id_adapter = TypeAdapter(int)


def parse_user_id(value: Union[int, str]) -> int:
    """
    Coerce a user or guest id to an integer without truncation.

    Raises:
        pydantic.ValidationError: A ValueError subclass, if the value is not
            an integral number
    """
    return _user_id_adapter.validate_python(value)


class UserCreate(BaseModel):
    """
    Input for user registration.

    Attributes:
        name: Display name
        email: Login email; must not belong to an existing user
        password: Already-hashed password, stored verbatim
    """
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)


class UserRecord(BaseModel):
    id: int
    name: str
    email: str
    password: str

    class Config:
        from_attributes = True
