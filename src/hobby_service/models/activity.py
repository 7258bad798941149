"""Activity feed models."""

from datetime import datetime
from enum import Enum

from .base import CamelModel


class ActivityType(str, Enum):
    FORUM_POST = "ForumPost"
    HOBBY_FOLLOW = "HobbyFollow"


class ActivityItem(CamelModel):
    """Entry in the viewer's recent activity."""

    type: ActivityType
    id: int
    content: str
    hobby_id: int
    hobby_name: str
    created_at: datetime
