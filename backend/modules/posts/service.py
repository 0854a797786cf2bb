"""
Posts service implementation.

Every mutation is read, change, write back: there is no locking, so two
concurrent likes by the same user on the same post can both pass the
"already liked" check.
"""

import logging

from modules.auth.exceptions import UserNotFoundError
from modules.auth.repository import UserRepository

from .interfaces import IPostService
from .models import Comment, Like, Post
from .exceptions import (
    AlreadyLikedError,
    CommentAccessDeniedError,
    CommentNotFoundError,
    NotLikedError,
    PostAccessDeniedError,
    PostNotFoundError,
)
from .repository import PostRepository
from . import rules

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """Post service backed by PostRepository."""

    def __init__(self, posts: PostRepository, users: UserRepository):
        self._posts = posts
        self._users = users

    async def create_post(self, user_id: str, text: str) -> Post:
        """Create a post with a snapshot of the author's name and avatar."""
        author = self._users.get_by_id(user_id)
        if author is None:
            raise UserNotFoundError(user_id)

        return self._posts.create(
            {
                "user_id": user_id,
                "text": text,
                "name": author.name,
                "avatar": author.avatar,
            }
        )

    async def list_posts(self) -> list[Post]:
        return self._posts.list_all()

    async def get_post(self, post_id: str) -> Post:
        post = self._posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def delete_post(self, post_id: str, user_id: str) -> None:
        post = await self.get_post(post_id)

        if not rules.is_post_owner(post, user_id):
            raise PostAccessDeniedError(post_id, user_id)

        self._posts.delete(post_id)
        logger.info("Post %s removed by %s", post_id, user_id)

    async def like_post(self, post_id: str, user_id: str) -> list[Like]:
        post = await self.get_post(post_id)

        if rules.has_liked(post.likes, user_id):
            raise AlreadyLikedError(post_id)

        return self._posts.save_likes(post_id, rules.add_like(post.likes, user_id))

    async def unlike_post(self, post_id: str, user_id: str) -> list[Like]:
        post = await self.get_post(post_id)

        if not rules.has_liked(post.likes, user_id):
            raise NotLikedError(post_id)

        return self._posts.save_likes(post_id, rules.remove_like(post.likes, user_id))

    async def add_comment(self, post_id: str, user_id: str, text: str) -> list[Comment]:
        author = self._users.get_by_id(user_id)
        if author is None:
            raise UserNotFoundError(user_id)

        post = await self.get_post(post_id)

        comment = Comment(
            user=user_id,
            text=text,
            name=author.name,
            avatar=author.avatar,
        )
        return self._posts.save_comments(post_id, [comment, *post.comments])

    async def delete_comment(
        self,
        post_id: str,
        comment_id: str,
        user_id: str,
    ) -> list[Comment]:
        """
        Delete a comment the caller wrote.

        The permission check uses the requested comment, but the removal
        takes the caller's first comment on the post (see
        ``rules.remove_first_comment_by``).
        """
        post = await self.get_post(post_id)

        comment = rules.find_comment(post.comments, comment_id)
        if comment is None:
            raise CommentNotFoundError(post_id, comment_id)

        if not rules.is_comment_author(comment, user_id):
            raise CommentAccessDeniedError(comment_id, user_id)

        remaining = rules.remove_first_comment_by(post.comments, user_id)
        return self._posts.save_comments(post_id, remaining)
