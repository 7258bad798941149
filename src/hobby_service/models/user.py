"""User and admin models."""

from typing import Optional

from pydantic import EmailStr, Field

from .base import CamelModel
from .hobby import CategorySummary


class UserRead(CamelModel):
    """User as exposed to the user themself and to admins."""

    id: str
    user_name: str
    email: Optional[EmailStr] = None
    roles: list[str] = Field(default_factory=list)


class TopHobby(CamelModel):
    id: int
    name: str
    followers_count: int


class Statistics(CamelModel):
    """Catalog-wide statistics for the admin dashboard."""

    total_hobbies: int
    total_followers: int
    top_hobbies: list[TopHobby] = Field(default_factory=list)
    categories: list[CategorySummary] = Field(default_factory=list)


class MessageResponse(CamelModel):
    message: str
