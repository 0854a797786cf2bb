"""
Posts module.

Posts with embedded likes and comments, and the ownership rules for
changing them.

Public API:
- IPostService: Interface for post operations
- Post, Like, Comment: Models
- Post exceptions: PostNotFoundError, AlreadyLikedError, etc.
"""

from .interfaces import IPostService
from .models import Post, Like, Comment, CreatePostRequest, CreateCommentRequest
from .exceptions import (
    PostNotFoundError,
    CommentNotFoundError,
    PostAccessDeniedError,
    CommentAccessDeniedError,
    AlreadyLikedError,
    NotLikedError,
)

__all__ = [
    # Interface
    "IPostService",
    # Models
    "Post",
    "Like",
    "Comment",
    "CreatePostRequest",
    "CreateCommentRequest",
    # Exceptions
    "PostNotFoundError",
    "CommentNotFoundError",
    "PostAccessDeniedError",
    "CommentAccessDeniedError",
    "AlreadyLikedError",
    "NotLikedError",
]
