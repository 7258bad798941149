"""Pydantic models for API payloads."""

from .hobby import (
    Hobby,
    HobbyCreate,
    HobbyUpdate,
    HobbyCard,
    RecommendedHobby,
    CategorySummary,
    FollowResult,
)
from .pagination import Pagination, HobbyPage, RecommendationPage
from .forum import ForumPostCreate, ForumPost, ForumReply, ForumThreadPost
from .activity import ActivityItem, ActivityType
from .user import UserRead, Statistics, TopHobby, MessageResponse

__all__ = [
    "Hobby",
    "HobbyCreate",
    "HobbyUpdate",
    "HobbyCard",
    "RecommendedHobby",
    "CategorySummary",
    "FollowResult",
    "Pagination",
    "HobbyPage",
    "RecommendationPage",
    "ForumPostCreate",
    "ForumPost",
    "ForumReply",
    "ForumThreadPost",
    "ActivityItem",
    "ActivityType",
    "UserRead",
    "Statistics",
    "TopHobby",
    "MessageResponse",
]
