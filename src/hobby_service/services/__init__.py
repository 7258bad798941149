"""Business services."""

from .discovery import DiscoveryService
from .follows import FollowService
from .forum import ForumService
from .activity import ActivityService
from .catalog import CatalogService
from .users import UserService

__all__ = [
    "DiscoveryService",
    "FollowService",
    "ForumService",
    "ActivityService",
    "CatalogService",
    "UserService",
]
