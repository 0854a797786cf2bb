"""
Authentication module interface.

Other modules and the API layer depend on IAuthService, not the concrete
implementation. This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import LoginRequest, RegisterRequest, TokenResponse, UserPublic


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> TokenResponse:
        """
        Create a user and sign them in.

        Args:
            request: Validated registration form

        Returns:
            TokenResponse for the new user

        Raises:
            UserAlreadyExistsError: If the email is already registered
            TokenSigningError: If no signing key is configured
        """
        ...

    async def login(self, request: LoginRequest) -> TokenResponse:
        """
        Exchange email and password for a token.

        Raises:
            InvalidCredentialsError: For an unknown email or a wrong
                password, without saying which
        """
        ...

    async def load_user(self, user_id: str) -> UserPublic:
        """
        Get the user behind a resolved identity.

        Raises:
            UserNotFoundError: If the token outlived its user
        """
        ...
