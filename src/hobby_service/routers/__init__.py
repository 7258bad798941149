"""API routers."""

from .hobbies import router as hobbies_router
from .forum import router as forum_router
from .admin import router as admin_router
from .users import router as users_router

__all__ = [
    "hobbies_router",
    "forum_router",
    "admin_router",
    "users_router",
]
