"""Pagination models."""

import math

from pydantic import Field

from .base import CamelModel
from .hobby import HobbyCard, RecommendedHobby


class Pagination(CamelModel):
    """Page metadata returned with every paginated listing."""

    current_page: int
    total_pages: int
    total_count: int
    page_size: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(
        cls, page: int, page_size: int, total_count: int, min_pages: int = 0
    ) -> "Pagination":
        total_pages = max(math.ceil(total_count / page_size), min_pages)
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_count=total_count,
            page_size=page_size,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )


class HobbyPage(CamelModel):
    """A page of hobby cards."""

    hobbies: list[HobbyCard] = Field(default_factory=list)
    pagination: Pagination


class RecommendationPage(CamelModel):
    """A page of ranked recommendations."""

    hobbies: list[RecommendedHobby] = Field(default_factory=list)
    pagination: Pagination
    favorite_categories: list[str] = Field(default_factory=list)
    user_follows_count: int = 0
