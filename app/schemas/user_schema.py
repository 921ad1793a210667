from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserField(str, Enum):
    """Columns of the users table that can be looked up or updated by key."""

    NAME = "name"
    EMAIL = "email"
    NATIONAL_ID = "national_id"
    PASSWORD = "passwd"


# Columns stripped from lookups made with restrict=True
SENSITIVE_FIELDS: Tuple[UserField, ...] = (UserField.NATIONAL_ID, UserField.PASSWORD)


def object_key(field: Mapping[str, Any]) -> Tuple[UserField, Any]:
    """Split a single-key mapping such as ``{"email": "x@x.com"}``.

    Raises ValueError when the mapping does not hold exactly one key or the
    key is not a known user field.
    """
    if len(field) != 1:
        raise ValueError(f"Expected exactly one field, got {len(field)}.")
    key, value = next(iter(field.items()))
    try:
        return UserField(key), value
    except ValueError:
        raise ValueError(f"Unknown user field: {key!r}.") from None


class UserInput(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    email: Optional[EmailStr] = None
    national_id: Optional[str] = Field(None, min_length=11, max_length=11)
    passwd: Optional[str] = Field(None, min_length=6, max_length=16)

    @field_validator("email", mode="before")
    @classmethod
    def email_max_length(cls, value: Any) -> Any:
        if isinstance(value, str) and len(value) > 100:
            raise ValueError("email must have at most 100 characters")
        return value


class UserOut(BaseModel):
    id: int
    name: str
    email: EmailStr

    model_config = {
        "from_attributes": True
    }
