"""
Pydantic schemas for User entity.
"""
import re
from pydantic import EmailStr, Field, field_validator
from datetime import datetime
from app.schemas.common import CamelModel


class UserBase(CamelModel):
    """Base user schema."""
    username: str = Field(min_length=3, max_length=20, pattern=r"^[a-zA-Z0-9_]+$")
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr


class UserCreate(UserBase):
    """Schema for user creation."""
    password: str = Field(min_length=8, max_length=128)

    @field_validator("password")
    @classmethod
    def check_strength(cls, v):
        """Require a lowercase letter, an uppercase letter and a digit."""
        if not (re.search(r"[a-z]", v) and re.search(r"[A-Z]", v) and re.search(r"\d", v)):
            raise ValueError("Password must contain a lowercase letter, an uppercase letter and a number")
        return v


class UserResponse(UserBase):
    """Schema for user response."""
    id: str
    is_active: bool
    created_at: datetime


class UserLogin(CamelModel):
    """Schema for user login."""
    username: str
    password: str


class Token(CamelModel):
    """Schema for session token response."""
    access_token: str
    token_type: str = "bearer"
