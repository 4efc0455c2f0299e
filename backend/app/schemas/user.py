"""
User Pydantic schemas for request/response validation
"""
from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.app.core.config import PASSWORD_MIN_LENGTH


def _valid_email(v: str) -> str:
    v = (v or "").strip().lower()
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Please include a valid email")
    return v


class UserRegister(BaseModel):
    """Schema for user registration"""
    name: str = Field(default="", validate_default=True)
    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        return _valid_email(v)

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v or "") < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Please enter a password with {PASSWORD_MIN_LENGTH} or more characters"
            )
        return v


class UserLogin(BaseModel):
    """Schema for user login"""
    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        return _valid_email(v)

    @field_validator("password")
    @classmethod
    def password_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class UserResponse(BaseModel):
    """Schema for user response - never carries the password hash"""
    id: str
    name: str
    email: str
    avatarUrl: str = ""
    createdAt: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """Schema for token response"""
    token: str


def user_model_to_response(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name or "",
        email=user.email or "",
        avatarUrl=user.avatar_url or "",
        createdAt=user.created_at,
    )
