"""Current user and account settings endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..db.postgres import get_db
from ..dependencies import Viewer, get_viewer
from ..models.user import MessageResponse, UserRead
from ..services.users import UserService

router = APIRouter(tags=["Users"])


@router.get("/users/current", response_model=UserRead)
async def current_user(viewer: Viewer = Depends(get_viewer)) -> UserRead:
    """The viewer with their roles."""
    return UserRead(
        id=viewer.id, user_name=viewer.user_name, email=viewer.email, roles=viewer.roles
    )


@router.delete("/settings/account", response_model=MessageResponse)
async def delete_account(
    viewer: Viewer = Depends(get_viewer),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete the viewer's own account."""
    await UserService(session, get_settings().admin_role).delete_account(viewer.id)
    return MessageResponse(message="Account deleted successfully.")
