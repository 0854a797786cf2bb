"""Tests for the pure ownership and like/comment list rules."""

from datetime import datetime, timezone

from modules.posts import rules
from modules.posts.models import Comment, Like, Post


def make_post(user: str = "owner", likes=None, comments=None) -> Post:
    return Post(
        id="post-1",
        user=user,
        text="hello",
        likes=likes or [],
        comments=comments or [],
        date=datetime.now(timezone.utc),
    )


class TestOwnership:
    def test_post_owner(self):
        post = make_post(user="owner")
        assert rules.is_post_owner(post, "owner")
        assert not rules.is_post_owner(post, "someone-else")

    def test_comment_author_not_post_owner(self):
        comment = Comment(user="commenter", text="hi")
        assert rules.is_comment_author(comment, "commenter")
        assert not rules.is_comment_author(comment, "owner")


class TestLikes:
    def test_add_like_prepends(self):
        likes = [Like(user="u1")]
        updated = rules.add_like(likes, "u2")
        assert [like.user for like in updated] == ["u2", "u1"]
        assert len(likes) == 1

    def test_find_like_index(self):
        likes = [Like(user="u1"), Like(user="u2")]
        assert rules.find_like_index(likes, "u2") == 1
        assert rules.find_like_index(likes, "u3") == -1

    def test_has_liked(self):
        likes = [Like(user="u1")]
        assert rules.has_liked(likes, "u1")
        assert not rules.has_liked(likes, "u2")

    def test_remove_like_keeps_order_of_rest(self):
        likes = [Like(user="u1"), Like(user="u2"), Like(user="u3")]
        updated = rules.remove_like(likes, "u2")
        assert [like.user for like in updated] == ["u1", "u3"]

    def test_remove_like_removes_only_first_duplicate(self):
        """Corrupt data with duplicate likes loses exactly one entry."""
        first, second = Like(user="u1"), Like(user="u1")
        updated = rules.remove_like([Like(user="u0"), first, second], "u1")
        assert [like.id for like in updated][1:] == [second.id]
        assert len(updated) == 2

    def test_remove_like_absent_is_copy(self):
        likes = [Like(user="u1")]
        updated = rules.remove_like(likes, "u2")
        assert updated == likes
        assert updated is not likes


class TestComments:
    def test_find_comment(self):
        c1, c2 = Comment(user="x", text="1"), Comment(user="y", text="2")
        assert rules.find_comment([c1, c2], c2.id) is c2
        assert rules.find_comment([c1, c2], "missing") is None

    def test_remove_first_comment_by_author(self):
        newer = Comment(user="x", text="newer")
        other = Comment(user="y", text="other")
        older = Comment(user="x", text="older")

        remaining = rules.remove_first_comment_by([newer, other, older], "x")

        assert [c.text for c in remaining] == ["other", "older"]

    def test_remove_first_comment_by_absent_author(self):
        comments = [Comment(user="y", text="other")]
        assert rules.remove_first_comment_by(comments, "x") == comments
