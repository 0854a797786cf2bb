"""
Auth API endpoints.

- ``POST /api/users``: register, returns a token
- ``POST /api/auth``: login, returns a token
- ``GET /api/auth``: the current user (protected)
"""

from fastapi import APIRouter, Depends

from api.dependencies import body_or_empty, get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import LoginRequest, RegisterRequest, TokenResponse, UserPublic

router = APIRouter()
users_router = APIRouter()


@users_router.post("", response_model=TokenResponse)
async def register_user(
    request: RegisterRequest = Depends(body_or_empty(RegisterRequest)),
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Register a user and sign them in."""
    return await service.register(request)


@router.get("", response_model=UserPublic)
async def get_auth_user(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserPublic:
    """Return the user behind the request's token, without the password."""
    return await service.load_user(user.id)


@router.post("", response_model=TokenResponse)
async def login(
    request: LoginRequest = Depends(body_or_empty(LoginRequest)),
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Authenticate with email and password and get a token."""
    return await service.login(request)
