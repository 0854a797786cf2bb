"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers, which turn them into HTTP responses.

Token failures are deliberately undifferentiated towards the client:
invalid signature, expiry and a vanished user all answer
"Token is not valid". The ``code`` keeps them apart in the logs.
"""

from typing import Any

from shared.exceptions import (
    AuthenticationError,
    InternalError,
    ValidationError,
    field_error,
)


class AuthTokenError(AuthenticationError):
    """Base for every failure to resolve an identity from a request token."""

    public_message = "Token is not valid"

    def to_response(self) -> dict[str, Any]:
        return {"msg": self.public_message}


class MissingTokenError(AuthTokenError):
    """Raised when the request carries no token at all."""

    public_message = "No token, authorization denied"

    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthTokenError):
    """Raised when a token is malformed or its signature does not verify."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthTokenError):
    """Raised when a token's expiry has passed."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class UserNotFoundError(AuthTokenError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidCredentialsError(ValidationError):
    """
    Raised for an unknown email and for a wrong password alike.

    Both login branches raise this same error so a caller cannot tell
    which part of the credentials was wrong.
    """

    def __init__(self):
        super().__init__(
            [field_error("Invalid Credentials")],
            code="INVALID_CREDENTIALS",
        )


class UserAlreadyExistsError(ValidationError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            [field_error("User already exists")],
            code="USER_ALREADY_EXISTS",
            details={"email": email},
        )


class TokenSigningError(InternalError):
    """Raised when tokens cannot be signed or checked (no signing key)."""

    def __init__(self, message: str = "Token signing key is not configured"):
        super().__init__(message, code="TOKEN_SIGNING_ERROR")
