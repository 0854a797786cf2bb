"""
In-memory stand-ins for the Supabase repositories, plus token helpers.

The fakes keep the repositories' method signatures and their observable
behavior (malformed ids match nothing, emails are unique, posts list newest
first), so services and routes can be exercised end to end without a
database.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from modules.auth.exceptions import UserAlreadyExistsError
from modules.auth.models import User
from modules.auth.passwords import hash_password
from modules.auth.tokens import issue_token
from modules.posts.models import Comment, Like, Post
from shared.repository import is_valid_id

# Matches JWT_SECRET set in conftest.py
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def auth_headers_for(user_id: str) -> dict[str, str]:
    """Headers carrying a valid token for ``user_id``."""
    return {"x-auth-token": issue_token(user_id, secret=TEST_JWT_SECRET)}


def create_raw_token(
    payload: dict[str, Any],
    secret: str = TEST_JWT_SECRET,
    expired: bool = False,
) -> str:
    """Sign an arbitrary payload, adding iat/exp unless present."""
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    claims = {"iat": int(now.timestamp()), "exp": int(exp.timestamp()), **payload}
    return jwt.encode(claims, secret, algorithm="HS256")


class _Clock:
    """Strictly increasing timestamps so ordering by date is deterministic."""

    def __init__(self) -> None:
        self._ticks = 0

    def now(self) -> datetime:
        self._ticks += 1
        return _EPOCH + timedelta(seconds=self._ticks)


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._rows: dict[str, User] = {}
        self._clock = _Clock()

    def get_by_id(self, user_id: str) -> Optional[User]:
        if not is_valid_id(user_id):
            return None
        return self._rows.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._rows.values() if u.email == email), None)

    def create(self, data: dict[str, Any]) -> User:
        # mirrors the UNIQUE(email) constraint
        if any(u.email == data["email"] for u in self._rows.values()):
            raise UserAlreadyExistsError(data["email"])
        user = User(id=str(uuid.uuid4()), date=self._clock.now(), **data)
        self._rows[user.id] = user
        return user

    def add_user(self, name: str, email: str, password: str = "123456") -> User:
        """Test helper: store a user with a real bcrypt hash."""
        return self.create(
            {
                "name": name,
                "email": email,
                "password": hash_password(password),
                "avatar": f"//www.gravatar.com/avatar/{name.lower()}",
            }
        )

    def remove(self, user_id: str) -> None:
        self._rows.pop(user_id, None)

    def __len__(self) -> int:
        return len(self._rows)


class InMemoryPostRepository:
    def __init__(self) -> None:
        self._rows: dict[str, Post] = {}
        self._clock = _Clock()
        self.writes = 0

    def create(self, data: dict[str, Any]) -> Post:
        post = Post(
            id=str(uuid.uuid4()),
            user=data["user_id"],
            text=data["text"],
            name=data.get("name"),
            avatar=data.get("avatar"),
            date=self._clock.now(),
        )
        self._rows[post.id] = post
        self.writes += 1
        return post.model_copy(deep=True)

    def get_by_id(self, post_id: str) -> Optional[Post]:
        if not is_valid_id(post_id):
            return None
        post = self._rows.get(post_id)
        return post.model_copy(deep=True) if post else None

    def list_all(self) -> list[Post]:
        ordered = sorted(self._rows.values(), key=lambda p: p.date, reverse=True)
        return [p.model_copy(deep=True) for p in ordered]

    def delete(self, post_id: str) -> bool:
        self._rows.pop(post_id, None)
        self.writes += 1
        return True

    def save_likes(self, post_id: str, likes: list[Like]) -> list[Like]:
        self._rows[post_id] = self._rows[post_id].model_copy(update={"likes": list(likes)})
        self.writes += 1
        return likes

    def save_comments(self, post_id: str, comments: list[Comment]) -> list[Comment]:
        self._rows[post_id] = self._rows[post_id].model_copy(
            update={"comments": list(comments)}
        )
        self.writes += 1
        return comments

    def put(self, post: Post) -> Post:
        """Test helper: store a post exactly as given."""
        self._rows[post.id] = post
        return post
