"""
Post API endpoints.

All routes require a token. Identity comes from the auth gate only.
"""

from fastapi import APIRouter, Depends

from api.dependencies import body_or_empty, get_post_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IPostService
from .models import (
    Comment,
    CreateCommentRequest,
    CreatePostRequest,
    Like,
    MessageResponse,
    Post,
)

router = APIRouter()


@router.post("", response_model=Post)
async def create_post(
    user: AuthenticatedUser = Depends(get_current_user),
    request: CreatePostRequest = Depends(body_or_empty(CreatePostRequest)),
    service: IPostService = Depends(get_post_service),
) -> Post:
    """Create a post."""
    return await service.create_post(user.id, request.text)


@router.get("", response_model=list[Post])
async def list_posts(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Post]:
    """All posts, most recent first."""
    return await service.list_posts()


@router.get("/{post_id}", response_model=Post)
async def get_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    return await service.get_post(post_id)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post. Only its author may do this."""
    await service.delete_post(post_id, user.id)
    return MessageResponse(msg="Post removed")


@router.put("/like/{post_id}", response_model=list[Like])
async def like_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Like]:
    return await service.like_post(post_id, user.id)


@router.put("/unlike/{post_id}", response_model=list[Like])
async def unlike_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Like]:
    return await service.unlike_post(post_id, user.id)


@router.post("/comment/{post_id}", response_model=list[Comment])
async def add_comment(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    request: CreateCommentRequest = Depends(body_or_empty(CreateCommentRequest)),
    service: IPostService = Depends(get_post_service),
) -> list[Comment]:
    return await service.add_comment(post_id, user.id, request.text)


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[Comment])
async def delete_comment(
    post_id: str,
    comment_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Comment]:
    """Delete a comment. Only the comment's author may do this."""
    return await service.delete_comment(post_id, comment_id, user.id)
