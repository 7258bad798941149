"""Hobby forum endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.postgres import get_db
from ..dependencies import Viewer, get_viewer
from ..models.forum import ForumPost, ForumPostCreate, ForumThreadPost
from ..services.forum import ForumService

router = APIRouter(prefix="/hobbies", tags=["Forum"])


@router.get("/{hobby_id}/forum", response_model=list[ForumThreadPost])
async def list_thread(
    hobby_id: int,
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> list[ForumThreadPost]:
    """Top-level posts with their replies."""
    return await ForumService(session).list_thread(hobby_id)


@router.post("/{hobby_id}/forum", response_model=ForumPost)
async def create_post(
    hobby_id: int,
    data: ForumPostCreate,
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> ForumPost:
    """Create a top-level post."""
    return await ForumService(session).create_post(hobby_id, viewer.id, data.content)


@router.post("/{hobby_id}/forum/{post_id}/reply", response_model=ForumPost)
async def create_reply(
    hobby_id: int,
    post_id: int,
    data: ForumPostCreate,
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> ForumPost:
    """Reply to a post of the same hobby."""
    return await ForumService(session).create_reply(
        hobby_id, post_id, viewer.id, data.content
    )
