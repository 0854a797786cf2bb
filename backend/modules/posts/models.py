"""
Posts module data models.

A post embeds its likes and comments as ordered lists, most recent first.
Author ``name`` and ``avatar`` on posts and comments are copies taken when
the item was created and are not updated afterwards.

Entity ids serialize as ``_id`` on the wire and are stored as ``id``.
"""

from datetime import datetime, timezone
from typing import Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Like(BaseModel):
    """One user's like on a post."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=_new_id, alias="_id")
    user: str = Field(..., description="ID of the user who liked the post")


class Comment(BaseModel):
    """A comment on a post, with a snapshot of its author."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=_new_id, alias="_id")
    user: str = Field(..., description="ID of the comment author")
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: datetime = Field(default_factory=_now)


class Post(BaseModel):
    """A post with its embedded likes and comments."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    user: str = Field(..., description="ID of the post author")
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    date: datetime


class CreatePostRequest(BaseModel):
    """Body of ``POST /api/posts``."""

    text: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("text")
    @classmethod
    def text_required(cls, value: Optional[str]) -> str:
        if not value:
            raise PydanticCustomError("required", "Text is required")
        return value


class CreateCommentRequest(CreatePostRequest):
    """Body of ``POST /api/posts/comment/{post_id}``."""


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after deleting a post."""

    msg: str
