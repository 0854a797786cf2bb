"""
Base exception classes for the Agora backend.

Each module defines its own exceptions that inherit from these bases.
The API layer maps every base to one HTTP status and one response envelope,
so modules never build HTTP responses themselves.
"""

from typing import Optional, Any


class AgoraError(Exception):
    """
    Base exception for all Agora errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and internal APIs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_response(self) -> dict[str, Any]:
        """Client-facing JSON body."""
        return {"msg": self.message}


def field_error(
    msg: str,
    param: Optional[str] = None,
    location: str = "body",
) -> dict[str, str]:
    """Build one ``{"msg", "param", "location"}`` entry of an errors list."""
    error = {"msg": msg}
    if param is not None:
        error["param"] = param
        error["location"] = location
    return error


class ValidationError(AgoraError):
    """Input validation failed. Aggregates one or more field errors."""

    status_code = 400

    def __init__(
        self,
        errors: list[dict[str, str]],
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            "; ".join(error["msg"] for error in errors),
            code=code,
            details=details,
        )
        self.errors = errors

    def to_response(self) -> dict[str, Any]:
        return {"errors": [dict(error) for error in self.errors]}


class AuthenticationError(AgoraError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(AgoraError):
    """Authorization failed (caller does not own the resource)."""

    status_code = 401


class NotFoundError(AgoraError):
    """Resource not found."""

    status_code = 404


class ConflictError(AgoraError):
    """A business rule rejected a redundant state transition."""

    status_code = 400


class InternalError(AgoraError):
    """Unexpected server-side failure. Never shown verbatim to clients."""

    status_code = 500

    def to_response(self) -> dict[str, Any]:
        return {"msg": "Server Error"}
