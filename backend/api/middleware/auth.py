"""
Token authentication gate.

Reads the identity token from the ``x-auth-token`` header, verifies it and
hands the resolved identity to route handlers. This is the only place that
creates an AuthenticatedUser.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyHeader

from modules.auth.exceptions import MissingTokenError
from modules.auth.models import JWTPayload
from modules.auth.tokens import verify_token
from shared.models import AuthenticatedUser

TOKEN_HEADER = "x-auth-token"

# Header extractor; absence is reported by get_current_user, not FastAPI
token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


def get_user_from_payload(payload: JWTPayload) -> AuthenticatedUser:
    """
    Convert a verified token payload to the request identity.

    Args:
        payload: Decoded token payload

    Returns:
        AuthenticatedUser instance
    """
    return AuthenticatedUser(id=payload.user.id)


async def get_current_user(
    token: Optional[str] = Depends(token_header),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    A missing token is rejected without touching the token service.
    Verification failures propagate as AuthTokenError subclasses.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if not token:
        raise MissingTokenError()

    payload = verify_token(token)
    return get_user_from_payload(payload)

