"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Body
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import PostRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services and repositories are created lazily on first access and
    cached as singletons within the container. Use reset() to clear
    them for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "UserRepository | None" = None
        self._post_repository: "PostRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._post_service: "IPostService | None" = None

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def post_repository(self) -> "PostRepository":
        """Get the post repository instance."""
        if self._post_repository is None:
            from modules.posts.repository import PostRepository
            from shared.database import get_supabase_client
            self._post_repository = PostRepository(get_supabase_client())
        return self._post_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(users=self.user_repository)
        return self._auth_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(
                posts=self.post_repository,
                users=self.user_repository,
            )
        return self._post_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._post_repository = None
        self._auth_service = None
        self._post_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts


def body_or_empty(model: type[BaseModel]):
    """
    Build a dependency that parses the request body as ``model``.

    A request with no body is validated as ``{}``, so the client gets the
    same per-field errors as for an empty object instead of a single
    "Field required".
    """

    async def dependency(body: Optional[model] = Body(None)):
        if body is not None:
            return body
        try:
            return model.model_validate({})
        except PydanticValidationError as e:
            raise RequestValidationError(
                [{**error, "loc": ("body", *error["loc"])} for error in e.errors()]
            )

    return dependency
