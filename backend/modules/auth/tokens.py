"""
Identity token issuance and verification.

Tokens are HS256 JWTs carrying ``{"user": {"id": ...}}`` plus ``iat`` and
``exp``. They are stateless: nothing is stored server-side, and a token is
valid exactly when its signature checks out and it has not expired.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings

from .exceptions import ExpiredTokenError, InvalidTokenError, TokenSigningError
from .models import JWTPayload

logger = logging.getLogger(__name__)


def _signing_key(secret: Optional[str]) -> str:
    key = secret if secret is not None else get_settings().jwt_secret
    if not key:
        raise TokenSigningError()
    return key


def issue_token(
    user_id: str,
    *,
    secret: Optional[str] = None,
    expires_in: Optional[int] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Sign a token for ``user_id``.

    Args:
        user_id: ID of the user the token asserts
        secret: Signing key; defaults to ``Settings.jwt_secret``
        expires_in: Validity window in seconds; defaults to
            ``Settings.jwt_expiry_seconds``
        now: Issue time, for tests

    Returns:
        Encoded JWT string

    Raises:
        TokenSigningError: If no signing key is configured
    """
    settings = get_settings()
    key = _signing_key(secret)
    issued_at = now or datetime.now(timezone.utc)
    lifetime = expires_in if expires_in is not None else settings.jwt_expiry_seconds

    payload = {
        "user": {"id": user_id},
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + timedelta(seconds=lifetime)).timestamp()),
    }
    return jwt.encode(payload, key, algorithm=settings.jwt_algorithm)


def verify_token(token: str, *, secret: Optional[str] = None) -> JWTPayload:
    """
    Check a token's signature and expiry and return its payload.

    Raises:
        ExpiredTokenError: If the token has expired
        InvalidTokenError: If the token is malformed, badly signed,
            or lacks the user claim
        TokenSigningError: If no signing key is configured
    """
    key = _signing_key(secret)

    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[get_settings().jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
        return JWTPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except jwt.InvalidTokenError as e:
        logger.debug("Rejected token: %s", e)
        raise InvalidTokenError(str(e))
    except PydanticValidationError:
        raise InvalidTokenError("Token payload has no user id")
