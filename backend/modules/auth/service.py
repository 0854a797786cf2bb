"""
Authentication service implementation.

Registers users, checks credentials and issues identity tokens.
"""

import hashlib
import logging
from typing import Optional

from .interfaces import IAuthService
from .models import LoginRequest, RegisterRequest, TokenResponse, UserPublic
from .exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .passwords import hash_password, verify_password
from .repository import UserRepository
from .tokens import issue_token

logger = logging.getLogger(__name__)


def gravatar_url(email: str, size: int = 200) -> str:
    """Gravatar image for an email: PG-rated, mystery-man fallback."""
    digest = hashlib.md5(email.strip().lower().encode()).hexdigest()
    return f"//www.gravatar.com/avatar/{digest}?s={size}&r=pg&d=mm"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Passwords are bcrypt hashes in the ``users`` table; tokens are
    stateless JWTs from ``tokens.issue_token``.
    """

    def __init__(self, users: UserRepository):
        self._users = users
        self._dummy_hash: Optional[str] = None

    async def register(self, request: RegisterRequest) -> TokenResponse:
        """Register a new user and return a token for them."""
        # Existence check and insert are separate round trips; the UNIQUE
        # constraint on users.email settles any race between them.
        if self._users.get_by_email(request.email) is not None:
            raise UserAlreadyExistsError(request.email)

        user = self._users.create(
            {
                "name": request.name,
                "email": request.email,
                "avatar": gravatar_url(request.email),
                "password": hash_password(request.password),
            }
        )
        logger.info("Registered user %s", user.id)

        return TokenResponse(token=issue_token(user.id))

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Login with email + password."""
        user = self._users.get_by_email(request.email)
        if user is None:
            # same bcrypt cost as a wrong password
            verify_password(request.password, self._get_dummy_hash())
            raise InvalidCredentialsError()

        if not verify_password(request.password, user.password):
            raise InvalidCredentialsError()

        logger.info("Login: %s", user.id)
        return TokenResponse(token=issue_token(user.id))

    async def load_user(self, user_id: str) -> UserPublic:
        """Return the user for a resolved identity, minus the password."""
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserPublic.from_user(user)

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = hash_password("not-a-real-password")
        return self._dummy_hash
