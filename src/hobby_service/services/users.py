"""User account operations."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import User
from ..errors import NotFoundError, ValidationError
from ..models.user import UserRead
from ..repositories.follow_repo import FollowRepository
from ..repositories.forum_repo import ForumRepository
from ..repositories.user_repo import UserRepository
from .common import commit, constraint_error

logger = logging.getLogger("hobby_users")


def to_user_read(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        user_name=user.user_name,
        email=user.email,
        roles=list(user.roles or []),
    )


class UserService:
    """User listing and deletion with manual cascades."""

    def __init__(self, session: AsyncSession, admin_role: str = "Admin"):
        self.session = session
        self.admin_role = admin_role

    async def list_users(self) -> list[UserRead]:
        users = await UserRepository.list_all(self.session)
        return [to_user_read(user) for user in users]

    async def delete_user(self, user_id: str) -> None:
        """Delete a user, their posts (with replies to them) and follows."""
        user = await UserRepository.get_by_id(self.session, user_id, for_update=True)
        if not user:
            raise NotFoundError("User not found.")

        try:
            posts = await ForumRepository.delete_for_user(self.session, user_id)
            follows = await FollowRepository.delete_for_user(self.session, user_id)
            await UserRepository.delete(self.session, user_id)
        except IntegrityError as e:
            await self.session.rollback()
            raise constraint_error("delete user", e) from e
        await commit(self.session, "delete user")
        logger.info(f"Deleted user {user_id} with {posts} posts and {follows} follows")

    async def delete_account(self, user_id: str) -> None:
        """Self-service deletion; admin accounts are kept."""
        user = await UserRepository.get_by_id(self.session, user_id)
        if not user:
            raise NotFoundError("User not found.")
        if self.admin_role in (user.roles or []):
            logger.warning(f"Attempt to delete admin account: {user_id}")
            raise ValidationError("Admin accounts cannot be deleted.")
        await self.delete_user(user_id)
