"""Repository modules for database operations."""

from .hobby_repo import HobbyRepository
from .follow_repo import FollowRepository
from .forum_repo import ForumRepository
from .user_repo import UserRepository

__all__ = [
    "HobbyRepository",
    "FollowRepository",
    "ForumRepository",
    "UserRepository",
]
