"""Forum post models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel

CONTENT_MIN_LENGTH = 1
CONTENT_MAX_LENGTH = 1000


class ForumPostCreate(CamelModel):
    """Payload for a new post or reply. Server assigns everything but content."""

    id: Optional[int] = None
    hobby_id: Optional[int] = None
    user_id: Optional[str] = None
    content: str = Field(..., min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    created_at: Optional[datetime] = None


class ForumPost(CamelModel):
    """Stored post as returned after create or delete."""

    id: int
    hobby_id: int
    user_id: str
    content: str
    created_at: datetime


class ForumReply(CamelModel):
    """Post entry inside a thread, with its author."""

    id: int
    content: str
    created_at: datetime
    user_name: str
    user_id: str


class ForumThreadPost(ForumReply):
    """Top-level post with its direct replies, oldest first."""

    replies: list[ForumReply] = Field(default_factory=list)
