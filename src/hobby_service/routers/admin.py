"""Admin endpoints. Every route requires the admin role."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..db.postgres import get_db
from ..dependencies import require_admin
from ..models.forum import ForumPost
from ..models.hobby import Hobby, HobbyCard, HobbyCreate, HobbyUpdate
from ..models.user import Statistics, UserRead
from ..services.catalog import CatalogService
from ..services.forum import ForumService
from ..services.users import UserService

router = APIRouter(
    prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)]
)


@router.get("/hobbies", response_model=list[HobbyCard])
async def list_hobbies(
    search: Optional[str] = None,
    category: Optional[str] = None,
    session: AsyncSession = Depends(get_db),
) -> list[HobbyCard]:
    """All hobbies with follower counts."""
    return await CatalogService(session).list_hobbies(search, category)


@router.post("/hobbies", response_model=Hobby, status_code=201)
async def create_hobby(
    data: HobbyCreate, session: AsyncSession = Depends(get_db)
) -> Hobby:
    return await CatalogService(session).create_hobby(data)


@router.put("/hobbies/{hobby_id}", response_model=Hobby)
async def update_hobby(
    hobby_id: int, data: HobbyUpdate, session: AsyncSession = Depends(get_db)
) -> Hobby:
    return await CatalogService(session).update_hobby(hobby_id, data)


@router.delete("/hobbies/{hobby_id}", status_code=204)
async def delete_hobby(hobby_id: int, session: AsyncSession = Depends(get_db)) -> None:
    """Delete a hobby with its forum and follows."""
    await CatalogService(session).delete_hobby(hobby_id)


@router.delete("/hobbies/{hobby_id}/forum/{post_id}", response_model=ForumPost)
async def delete_post(
    hobby_id: int, post_id: int, session: AsyncSession = Depends(get_db)
) -> ForumPost:
    """Delete a forum post and its replies."""
    return await ForumService(session).delete_post(hobby_id, post_id)


@router.get("/users", response_model=list[UserRead])
async def list_users(session: AsyncSession = Depends(get_db)) -> list[UserRead]:
    return await UserService(session, get_settings().admin_role).list_users()


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(user_id: str, session: AsyncSession = Depends(get_db)) -> None:
    """Delete a user with their posts and follows."""
    await UserService(session, get_settings().admin_role).delete_user(user_id)


@router.get("/statistics", response_model=Statistics)
async def statistics(session: AsyncSession = Depends(get_db)) -> Statistics:
    return await CatalogService(session).statistics()
