"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


MIN_PASSWORD_LENGTH = 6


def _check_email(value: Optional[str]) -> str:
    value = (value or "").strip()
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email", "Please include a valid email")
    return value.lower()


class TokenUser(BaseModel):
    """The ``user`` claim of an identity token."""

    id: str


class JWTPayload(BaseModel):
    """
    Decoded identity token payload.

    Tokens carry only the user id; everything else about the user is
    looked up when needed.
    """

    user: TokenUser
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class User(BaseModel):
    """A stored user, including the password hash. Never returned by the API."""

    id: str
    name: str
    email: str
    password: str = Field(..., description="bcrypt hash")
    avatar: Optional[str] = None
    date: datetime


class UserPublic(BaseModel):
    """A user as the API exposes it: everything except the password hash."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    email: str
    avatar: Optional[str] = None
    date: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            date=user.date,
        )


class RegisterRequest(BaseModel):
    """Registration form. All fields are checked and reported together."""

    name: Optional[str] = Field(default=None, validate_default=True)
    email: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_required(cls, value: Optional[str]) -> str:
        if not value or not value.strip():
            raise PydanticCustomError("required", "Name is required")
        return value.strip()

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: Optional[str]) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_length(cls, value: Optional[str]) -> str:
        if value is None or len(value) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                "password_length",
                "Please enter a password with {min_length} or more characters",
                {"min_length": MIN_PASSWORD_LENGTH},
            )
        return value


class LoginRequest(BaseModel):
    """Login form."""

    email: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: Optional[str]) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_present(cls, value: Optional[str]) -> str:
        if value is None:
            raise PydanticCustomError("required", "Password is required")
        return value


class TokenResponse(BaseModel):
    """Returned by registration and login."""

    token: str
