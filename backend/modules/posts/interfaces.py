"""
Posts module interface.

The API layer depends on IPostService for all post operations. Every
method takes the caller's resolved identity; none accepts a user id from
the request body.
"""

from typing import Protocol, runtime_checkable

from .models import Comment, Like, Post


@runtime_checkable
class IPostService(Protocol):
    """Interface for post, like and comment operations."""

    async def create_post(self, user_id: str, text: str) -> Post:
        """
        Create a post authored by ``user_id``.

        Raises:
            UserNotFoundError: If the author no longer exists
        """
        ...

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        ...

    async def get_post(self, post_id: str) -> Post:
        """
        Get a post by ID.

        Raises:
            PostNotFoundError: If absent or the ID is malformed
        """
        ...

    async def delete_post(self, post_id: str, user_id: str) -> None:
        """
        Delete a post.

        Raises:
            PostNotFoundError: If absent or the ID is malformed
            PostAccessDeniedError: If ``user_id`` is not the author
        """
        ...

    async def like_post(self, post_id: str, user_id: str) -> list[Like]:
        """
        Add the user's like to the front of the post's likes.

        Returns:
            The post's likes after the change

        Raises:
            AlreadyLikedError: If the user already likes the post
        """
        ...

    async def unlike_post(self, post_id: str, user_id: str) -> list[Like]:
        """
        Remove the user's like.

        Raises:
            NotLikedError: If the user does not like the post
        """
        ...

    async def add_comment(self, post_id: str, user_id: str, text: str) -> list[Comment]:
        """
        Add a comment to the front of the post's comments.

        Returns:
            The post's comments after the change
        """
        ...

    async def delete_comment(
        self,
        post_id: str,
        comment_id: str,
        user_id: str,
    ) -> list[Comment]:
        """
        Delete a comment.

        Raises:
            CommentNotFoundError: If the post has no such comment
            CommentAccessDeniedError: If ``user_id`` did not write it
        """
        ...
