"""Hobby discovery, follow and activity endpoints."""

import random
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..db.postgres import get_db
from ..dependencies import Viewer, get_random, get_viewer
from ..models.activity import ActivityItem
from ..models.hobby import CategorySummary, FollowResult, HobbyCard
from ..models.pagination import HobbyPage, RecommendationPage
from ..services.activity import ActivityService
from ..services.discovery import DiscoveryService
from ..services.follows import FollowService

router = APIRouter(prefix="/hobbies", tags=["Hobbies"])

DEFAULT_PAGE_SIZE = get_settings().default_page_size


@router.get("/random", response_model=Union[HobbyCard, HobbyPage])
async def random_hobbies(
    single: bool = False,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, alias="pageSize"),
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
    rng: random.Random = Depends(get_random),
) -> Union[HobbyCard, HobbyPage]:
    """A random hobby, or a shuffled page of hobbies the viewer does not follow."""
    service = DiscoveryService(session, rng)
    if single:
        return await service.pick_random(viewer.id, category, search)
    return await service.list_discoverable(viewer.id, category, search, page, page_size)


@router.get("/recommendations", response_model=RecommendationPage)
async def recommendations(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, alias="pageSize"),
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> RecommendationPage:
    """Unfollowed hobbies ranked by the viewer's favorite categories."""
    return await DiscoveryService(session).recommend(
        viewer.id, category, search, page, page_size
    )


@router.get("/my", response_model=list[HobbyCard])
async def my_hobbies(
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> list[HobbyCard]:
    """Hobbies the viewer follows."""
    return await DiscoveryService(session).list_followed(viewer.id)


@router.get("/discover", response_model=HobbyPage)
async def discover(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, alias="pageSize"),
    session: AsyncSession = Depends(get_db),
) -> HobbyPage:
    """Browse the whole catalog by name. No login needed."""
    return await DiscoveryService(session).browse(category, search, page, page_size)


@router.get("/categories", response_model=list[CategorySummary])
async def categories(session: AsyncSession = Depends(get_db)) -> list[CategorySummary]:
    """Categories with hobby counts."""
    return await DiscoveryService(session).list_categories()


@router.get("/activity", response_model=list[ActivityItem])
async def activity(
    limit: int = Query(get_settings().default_activity_limit, ge=1),
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> list[ActivityItem]:
    """Recent forum posts and follows relevant to the viewer."""
    return await ActivityService(session).recent(viewer.id, limit)


@router.get("/{hobby_id}", response_model=HobbyCard)
async def get_hobby(
    hobby_id: int,
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> HobbyCard:
    """Get a hobby by ID."""
    return await DiscoveryService(session).get_hobby(viewer.id, hobby_id)


@router.post("/{hobby_id}/follow", response_model=FollowResult)
async def follow_hobby(
    hobby_id: int,
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> FollowResult:
    """Follow a hobby. Following twice is a no-op."""
    return await FollowService(session).follow(viewer.id, hobby_id)


@router.delete("/{hobby_id}/unfollow", response_model=FollowResult)
async def unfollow_hobby(
    hobby_id: int,
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> FollowResult:
    """Unfollow a hobby. Unfollowing a hobby not followed is a no-op."""
    return await FollowService(session).unfollow(viewer.id, hobby_id)
