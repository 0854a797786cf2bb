"""
Posts module exceptions.

Messages are client-facing; ids go into ``details`` for the logs.
"""

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
)


class PostNotFoundError(NotFoundError):
    """Raised when a post id is unknown or malformed."""

    def __init__(self, post_id: str):
        super().__init__(
            "Post not found",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class CommentNotFoundError(NotFoundError):
    """Raised when a post has no comment with the given id."""

    def __init__(self, post_id: str, comment_id: str):
        super().__init__(
            "Comment not found",
            code="COMMENT_NOT_FOUND",
            details={"post_id": post_id, "comment_id": comment_id},
        )


class PostAccessDeniedError(AuthorizationError):
    """Raised when someone other than the author deletes a post."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            "User not authorized",
            code="POST_ACCESS_DENIED",
            details={"post_id": post_id, "user_id": user_id},
        )


class CommentAccessDeniedError(AuthorizationError):
    """Raised when someone other than the comment author deletes a comment."""

    def __init__(self, comment_id: str, user_id: str):
        super().__init__(
            "User not authorized",
            code="COMMENT_ACCESS_DENIED",
            details={"comment_id": comment_id, "user_id": user_id},
        )


class AlreadyLikedError(ConflictError):
    """Raised when a user likes a post they already like."""

    def __init__(self, post_id: str):
        super().__init__(
            "Post already liked",
            code="ALREADY_LIKED",
            details={"post_id": post_id},
        )


class NotLikedError(ConflictError):
    """Raised when a user unlikes a post they do not like."""

    def __init__(self, post_id: str):
        super().__init__(
            "Post has not yet been liked",
            code="NOT_LIKED",
            details={"post_id": post_id},
        )
