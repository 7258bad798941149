"""Follow and unfollow actions."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import NotFoundError
from ..models.hobby import FollowResult
from ..repositories.follow_repo import FollowRepository
from ..repositories.hobby_repo import HobbyRepository
from .common import commit, constraint_error

logger = logging.getLogger("hobby_follows")


class FollowService:
    """Sole mutator of the follow graph on behalf of the viewer.

    Both actions lock the hobby row before checking membership, so
    concurrent requests for the same hobby apply one after another.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def follow(self, viewer_id: str, hobby_id: int) -> FollowResult:
        hobby = await HobbyRepository.get_by_id(self.session, hobby_id, for_update=True)
        if not hobby:
            raise NotFoundError("Hobby not found.")

        if not await FollowRepository.exists(self.session, viewer_id, hobby_id):
            FollowRepository.add(self.session, viewer_id, hobby_id)
            await commit(self.session, "follow hobby")
            logger.info(f"User {viewer_id} followed hobby {hobby_id}")

        count = await FollowRepository.count_followers(self.session, hobby_id)
        return FollowResult(
            message="Hobby followed successfully.",
            followers_count=count,
            is_following=True,
        )

    async def unfollow(self, viewer_id: str, hobby_id: int) -> FollowResult:
        hobby = await HobbyRepository.get_by_id(self.session, hobby_id, for_update=True)
        if not hobby:
            raise NotFoundError("Hobby not found.")

        try:
            removed = await FollowRepository.remove(self.session, viewer_id, hobby_id)
        except IntegrityError as e:
            await self.session.rollback()
            raise constraint_error("unfollow hobby", e) from e
        await commit(self.session, "unfollow hobby")
        if removed:
            logger.info(f"User {viewer_id} unfollowed hobby {hobby_id}")

        count = await FollowRepository.count_followers(self.session, hobby_id)
        return FollowResult(
            message="Hobby unfollowed successfully.",
            followers_count=count,
            is_following=False,
        )
