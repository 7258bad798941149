"""FastAPI dependencies: sessions, viewer identity and randomness."""

import random
from dataclasses import dataclass, field

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .config import get_settings
from .db.postgres import get_db
from .errors import ForbiddenError, UnauthorizedError
from .repositories.user_repo import UserRepository


@dataclass
class Viewer:
    """Identity resolved for the current request."""

    id: str
    user_name: str
    email: str | None = None
    roles: list[str] = field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return get_settings().admin_role in self.roles


async def get_viewer(
    request: Request, session: AsyncSession = Depends(get_db)
) -> Viewer:
    """Resolve the viewer from the identity header set by the auth gateway."""
    user_id = request.headers.get(get_settings().auth_user_header)
    if not user_id:
        raise UnauthorizedError("Authentication required.")

    user = await UserRepository.get_by_id(session, user_id)
    if not user:
        raise UnauthorizedError("Unknown user.")

    return Viewer(
        id=user.id,
        user_name=user.user_name,
        email=user.email,
        roles=list(user.roles or []),
    )


async def require_admin(viewer: Viewer = Depends(get_viewer)) -> Viewer:
    if not viewer.is_admin:
        raise ForbiddenError("Admin role required.")
    return viewer


def get_random() -> random.Random:
    """Fresh random source per request."""
    return random.Random()
