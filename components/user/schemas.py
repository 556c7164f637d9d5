"""Pydantic schemas for user data validation."""

from datetime import date
from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    """Base user schema."""
    login: str = Field(..., min_length=3, max_length=50)


class UserCreate(UserBase):
    """Schema for user registration."""
    password: str = Field(..., min_length=8)


class User(UserBase):
    """Schema for user response."""
    id: int
    registration_date: date
    is_admin: bool = False

    model_config = ConfigDict(from_attributes=True)


class UserWithToken(User):
    """User together with a freshly issued access token."""
    access_token: str
    token_type: str = "bearer"
