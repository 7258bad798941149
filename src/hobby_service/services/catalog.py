"""Catalog administration."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import NotFoundError, ValidationError
from ..models.hobby import Hobby, HobbyCard, HobbyCreate, HobbyUpdate
from ..models.user import Statistics, TopHobby
from ..repositories.follow_repo import FollowRepository
from ..repositories.forum_repo import ForumRepository
from ..repositories.hobby_repo import HobbyRepository
from .common import commit, constraint_error

logger = logging.getLogger("hobby_admin")


def _validate(data: HobbyCreate | HobbyUpdate) -> None:
    if not data.name or not data.name.strip():
        raise ValidationError("Hobby name is required")


class CatalogService:
    """Admin CRUD over hobbies, plus statistics."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_hobbies(
        self, search: Optional[str] = None, category: Optional[str] = None
    ) -> list[HobbyCard]:
        return await HobbyRepository.search_by_name(self.session, search, category)

    async def create_hobby(self, data: HobbyCreate) -> Hobby:
        _validate(data)
        try:
            row = await HobbyRepository.create(self.session, data)
        except IntegrityError as e:
            await self.session.rollback()
            raise constraint_error("create hobby", e) from e
        hobby = Hobby.model_validate(row)
        await commit(self.session, "create hobby")
        logger.info(f"Created hobby {hobby.id} ({hobby.name})")
        return hobby

    async def update_hobby(self, hobby_id: int, data: HobbyUpdate) -> Hobby:
        _validate(data)
        row = await HobbyRepository.get_by_id(self.session, hobby_id, for_update=True)
        if not row:
            raise NotFoundError("Hobby not found.")
        await HobbyRepository.update(row, data)
        await commit(self.session, "update hobby")
        logger.info(f"Updated hobby {hobby_id}")
        return Hobby.model_validate(row)

    async def delete_hobby(self, hobby_id: int) -> None:
        """Delete a hobby with its posts and follow rows."""
        row = await HobbyRepository.get_by_id(self.session, hobby_id, for_update=True)
        if not row:
            raise NotFoundError("Hobby not found.")

        try:
            posts = await ForumRepository.delete_for_hobby(self.session, hobby_id)
            follows = await FollowRepository.delete_for_hobby(self.session, hobby_id)
            await HobbyRepository.delete(self.session, hobby_id)
        except IntegrityError as e:
            await self.session.rollback()
            raise constraint_error("delete hobby", e) from e
        await commit(self.session, "delete hobby")
        logger.info(f"Deleted hobby {hobby_id} with {posts} posts and {follows} follows")

    async def statistics(self) -> Statistics:
        top = await HobbyRepository.top_by_followers(self.session, limit=5)
        return Statistics(
            total_hobbies=await HobbyRepository.count(self.session),
            total_followers=await FollowRepository.count_all(self.session),
            top_hobbies=[
                TopHobby(id=h.id, name=h.name, followers_count=h.followers_count)
                for h in top
            ],
            categories=await HobbyRepository.list_categories(self.session),
        )
