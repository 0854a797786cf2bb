"""
Post repository for database access.

Encapsulates the Supabase queries and data mapping for the ``posts`` table.
Likes and comments are ``jsonb`` arrays on the post row and are always
written back whole.
"""

from typing import Any, Optional

from shared.repository import BaseRepository, is_valid_id
from .models import Comment, Like, Post


class PostRepository(BaseRepository[Post]):
    """
    Repository for post data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    # -------------------------------------------------------------------------
    # Post CRUD operations
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> Post:
        """
        Create a new post record.

        Args:
            data: Dictionary with post fields (user_id, text, name, avatar).

        Returns:
            Created Post with generated ID and date.
        """
        result = self._db.table("posts").insert(
            {"likes": [], "comments": [], **data}
        ).execute()
        return self._map_to_post(result.data[0])

    def get_by_id(self, post_id: str) -> Optional[Post]:
        """
        Get a post by ID.

        Returns:
            The Post, or None if it does not exist or the ID is malformed.
        """
        if not is_valid_id(post_id):
            return None

        result = self._db.table("posts").select("*").eq("id", post_id).execute()
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def list_all(self) -> list[Post]:
        """All posts, newest first."""
        result = self._db.table("posts").select("*").order("date", desc=True).execute()
        return [self._map_to_post(row) for row in result.data]

    def delete(self, post_id: str) -> bool:
        """Delete a post together with its likes and comments."""
        self._db.table("posts").delete().eq("id", post_id).execute()
        return True

    # -------------------------------------------------------------------------
    # Embedded list operations
    # -------------------------------------------------------------------------

    def save_likes(self, post_id: str, likes: list[Like]) -> list[Like]:
        """Replace the post's likes array."""
        self._db.table("posts").update(
            {"likes": [like.model_dump(mode="json") for like in likes]}
        ).eq("id", post_id).execute()
        return likes

    def save_comments(self, post_id: str, comments: list[Comment]) -> list[Comment]:
        """Replace the post's comments array."""
        self._db.table("posts").update(
            {"comments": [comment.model_dump(mode="json") for comment in comments]}
        ).eq("id", post_id).execute()
        return comments

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        """Map database row to Post model."""
        return Post(
            id=str(data["id"]),
            user=str(data["user_id"]),
            text=data["text"],
            name=data.get("name"),
            avatar=data.get("avatar"),
            likes=[Like.model_validate(like) for like in data.get("likes") or []],
            comments=[
                Comment.model_validate(comment)
                for comment in data.get("comments") or []
            ],
            date=data["date"],
        )
