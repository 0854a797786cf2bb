"""
Ownership and like/comment list rules.

Pure functions over posts and their embedded lists. The service decides
which error to raise; these only answer questions and build new lists,
never mutating their input.
"""

from typing import Optional

from .models import Comment, Like, Post


def is_post_owner(post: Post, user_id: str) -> bool:
    """Only the author may delete a post."""
    return post.user == user_id


def is_comment_author(comment: Comment, user_id: str) -> bool:
    """Only the comment's author may delete it; owning the post is not enough."""
    return comment.user == user_id


def find_like_index(likes: list[Like], user_id: str) -> int:
    """Index of the first like by ``user_id``, or -1."""
    for index, like in enumerate(likes):
        if like.user == user_id:
            return index
    return -1


def has_liked(likes: list[Like], user_id: str) -> bool:
    return find_like_index(likes, user_id) != -1


def add_like(likes: list[Like], user_id: str) -> list[Like]:
    """New list with a like by ``user_id`` in front."""
    return [Like(user=user_id), *likes]


def remove_like(likes: list[Like], user_id: str) -> list[Like]:
    """
    New list without the first like by ``user_id``.

    Exactly one entry goes even if the list somehow holds duplicates.
    The rest keep their order.
    """
    index = find_like_index(likes, user_id)
    if index == -1:
        return list(likes)
    return likes[:index] + likes[index + 1:]


def find_comment(comments: list[Comment], comment_id: str) -> Optional[Comment]:
    return next((c for c in comments if c.id == comment_id), None)


def remove_first_comment_by(comments: list[Comment], user_id: str) -> list[Comment]:
    """
    New list without the first comment authored by ``user_id``.

    This keys on the author, not on a comment id: when a user has several
    comments on a post, the one removed is the first in list order (the
    newest), whichever comment the caller asked for.
    """
    for index, comment in enumerate(comments):
        if comment.user == user_id:
            return comments[:index] + comments[index + 1:]
    return list(comments)
