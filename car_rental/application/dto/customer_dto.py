"""
Customer DTO
============

Pydantic models validating customer and user requests.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreateRequest(BaseModel):
    """DTO for creating a customer."""
    first_name: str = Field(..., min_length=1)
    last_name: str = Field("", description="May be empty")
    user_id: Optional[int] = Field(None, description="Login account to link, if any")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {"first_name": "Dominik", "last_name": "Berger", "user_id": 2}
        },
    )


class CustomerEditRequest(BaseModel):
    """
    DTO for editing a customer.

    `user_id` is only applied when `set_user_id` is true, so a caller can
    unlink an account by sending an explicit null.
    """
    id: int
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    set_user_id: bool = False

    model_config = ConfigDict(str_strip_whitespace=True)


class UserCreateRequest(BaseModel):
    """DTO for creating a login account."""
    username: str = Field(..., min_length=1, max_length=255)
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=1, max_length=72)
