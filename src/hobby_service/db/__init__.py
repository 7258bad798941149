"""Database connections and tables."""

from .postgres import Base, get_db, init_postgres, close_postgres, get_session_factory
from .models import User, Hobby, HobbyFollow, ForumPost

__all__ = [
    "Base",
    "get_db",
    "init_postgres",
    "close_postgres",
    "get_session_factory",
    "User",
    "Hobby",
    "HobbyFollow",
    "ForumPost",
]
