"""Hobby catalog models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class HobbyBase(CamelModel):
    """Base hobby attributes."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    type: Optional[str] = Field(None, max_length=50)  # category, empty = uncategorized
    link: Optional[str] = None
    image_url: Optional[str] = None


class HobbyCreate(HobbyBase):
    """Schema for creating a hobby."""

    pass


class HobbyUpdate(HobbyBase):
    """Schema for replacing a hobby's attributes."""

    pass


class Hobby(HobbyBase):
    """Complete hobby record."""

    id: int
    created_at: datetime


class HobbyCard(CamelModel):
    """Hobby as presented to a viewer."""

    id: int
    name: str
    description: str = ""
    link: Optional[str] = None
    type: Optional[str] = None
    image_url: Optional[str] = None
    followers_count: int = 0
    is_following: bool = False


class RecommendedHobby(HobbyCard):
    """Hobby card annotated with the viewer's category preference."""

    is_favorite_category: bool = False


class CategorySummary(CamelModel):
    """Category name with the number of hobbies in it."""

    name: str
    count: int


class FollowResult(CamelModel):
    """Outcome of a follow or unfollow action."""

    message: str
    followers_count: int
    is_following: bool
