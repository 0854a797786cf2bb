"""
Authentication module.

Handles registration, login, identity tokens and password hashing.

Public API:
- IAuthService: Interface for auth operations
- issue_token / verify_token: Stateless identity tokens
- User, UserPublic, JWTPayload: Models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import JWTPayload, User, UserPublic, RegisterRequest, LoginRequest, TokenResponse
from .tokens import issue_token, verify_token
from .exceptions import (
    AuthTokenError,
    MissingTokenError,
    InvalidTokenError,
    ExpiredTokenError,
    UserNotFoundError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    TokenSigningError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Tokens
    "issue_token",
    "verify_token",
    # Models
    "JWTPayload",
    "User",
    "UserPublic",
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    # Exceptions
    "AuthTokenError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "UserAlreadyExistsError",
    "TokenSigningError",
]
