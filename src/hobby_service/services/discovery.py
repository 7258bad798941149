"""Discovery engine: listing, random pick and recommendations."""

import logging
import random
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import NotFoundError
from ..models.hobby import CategorySummary, HobbyCard
from ..models.pagination import HobbyPage, Pagination, RecommendationPage
from ..repositories.follow_repo import FollowRepository
from ..repositories.hobby_repo import HobbyRepository
from .common import check_page
from .ranking import (
    RandomSource,
    favorite_categories,
    paginate,
    rank_by_preference,
    shuffled,
)

logger = logging.getLogger("hobby_discovery")


class DiscoveryService:
    """Presents hobbies a viewer does not follow yet."""

    def __init__(self, session: AsyncSession, rng: Optional[RandomSource] = None):
        self.session = session
        self.rng = rng if rng is not None else random.Random()

    async def _candidates(
        self, viewer_id: str, category: Optional[str], search: Optional[str]
    ) -> tuple[list[HobbyCard], bool]:
        """Unfollowed hobbies matching the filters.

        When nothing matches, the full unfiltered catalog is returned instead
        and the flag is True.
        """
        cards = await HobbyRepository.list_cards(
            self.session, category, search, exclude_followed_by=viewer_id
        )
        if cards:
            return cards, False

        logger.info(f"No discoverable hobby matched for {viewer_id}, using the full catalog")
        return await HobbyRepository.list_cards(self.session), True

    async def list_discoverable(
        self,
        viewer_id: str,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 12,
    ) -> HobbyPage:
        """Shuffled page of hobbies the viewer does not follow."""
        check_page(page, page_size)
        cards, _ = await self._candidates(viewer_id, category, search)

        ordered = shuffled(cards, self.rng)
        hobbies = [
            card.model_copy(update={"is_following": False})
            for card in paginate(ordered, page, page_size)
        ]
        return HobbyPage(
            hobbies=hobbies,
            pagination=Pagination.build(page, page_size, len(cards)),
        )

    async def pick_random(
        self,
        viewer_id: str,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> HobbyCard:
        """One uniformly random discoverable hobby."""
        cards, fallback = await self._candidates(viewer_id, category, search)
        if not cards:
            raise NotFoundError("No hobbies found.")

        card = self.rng.choice(cards)
        is_following = False
        if fallback:
            followed = await FollowRepository.followed_ids(self.session, viewer_id)
            is_following = card.id in followed
        return card.model_copy(update={"is_following": is_following})

    async def recommend(
        self,
        viewer_id: str,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 12,
    ) -> RecommendationPage:
        """Unfollowed hobbies ranked by the viewer's favorite categories."""
        check_page(page, page_size)

        followed_types = await HobbyRepository.followed_types(self.session, viewer_id)
        favorites = favorite_categories(followed_types)

        cards = await HobbyRepository.list_cards(
            self.session, category, search, exclude_followed_by=viewer_id
        )
        ranked = rank_by_preference(cards, favorites)

        return RecommendationPage(
            hobbies=paginate(ranked, page, page_size),
            pagination=Pagination.build(page, page_size, len(ranked), min_pages=1),
            favorite_categories=sorted(favorites),
            user_follows_count=len(followed_types),
        )

    async def list_followed(self, viewer_id: str) -> list[HobbyCard]:
        """Hobbies the viewer follows."""
        return await HobbyRepository.list_followed(self.session, viewer_id)

    async def browse(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 12,
    ) -> HobbyPage:
        """Anonymous catalog listing in name order."""
        check_page(page, page_size)
        total = await HobbyRepository.count(self.session, category, search)
        hobbies = await HobbyRepository.page_by_name(
            self.session, (page - 1) * page_size, page_size, category, search
        )
        return HobbyPage(
            hobbies=hobbies, pagination=Pagination.build(page, page_size, total)
        )

    async def get_hobby(self, viewer_id: str, hobby_id: int) -> HobbyCard:
        card = await HobbyRepository.get_card(self.session, hobby_id, viewer_id)
        if not card:
            raise NotFoundError("Hobby not found.")
        return card

    async def list_categories(self) -> list[CategorySummary]:
        return await HobbyRepository.list_categories(self.session)
