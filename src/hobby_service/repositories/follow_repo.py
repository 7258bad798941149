"""Follow graph repository."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import HobbyFollow


class FollowRepository:
    """Repository for user-hobby follow rows."""

    @staticmethod
    async def followed_ids(session: AsyncSession, user_id: str) -> set[int]:
        """IDs of all hobbies the user follows."""
        result = await session.execute(
            select(HobbyFollow.hobby_id).where(HobbyFollow.user_id == user_id)
        )
        return set(result.scalars().all())

    @staticmethod
    async def exists(session: AsyncSession, user_id: str, hobby_id: int) -> bool:
        result = await session.execute(
            select(HobbyFollow).where(
                HobbyFollow.user_id == user_id, HobbyFollow.hobby_id == hobby_id
            )
        )
        return result.first() is not None

    @staticmethod
    def add(session: AsyncSession, user_id: str, hobby_id: int) -> None:
        """Stage a follow row; it is written on the next flush or commit."""
        session.add(HobbyFollow(user_id=user_id, hobby_id=hobby_id))

    @staticmethod
    async def remove(session: AsyncSession, user_id: str, hobby_id: int) -> bool:
        result = await session.execute(
            delete(HobbyFollow).where(
                HobbyFollow.user_id == user_id, HobbyFollow.hobby_id == hobby_id
            )
        )
        return result.rowcount > 0

    @staticmethod
    async def count_followers(session: AsyncSession, hobby_id: int) -> int:
        result = await session.execute(
            select(func.count())
            .select_from(HobbyFollow)
            .where(HobbyFollow.hobby_id == hobby_id)
        )
        return result.scalar_one()

    @staticmethod
    async def count_all(session: AsyncSession) -> int:
        """Total number of follow rows across the catalog."""
        result = await session.execute(select(func.count()).select_from(HobbyFollow))
        return result.scalar_one()

    @staticmethod
    async def delete_for_user(session: AsyncSession, user_id: str) -> int:
        result = await session.execute(
            delete(HobbyFollow).where(HobbyFollow.user_id == user_id)
        )
        return result.rowcount

    @staticmethod
    async def delete_for_hobby(session: AsyncSession, hobby_id: int) -> int:
        result = await session.execute(
            delete(HobbyFollow).where(HobbyFollow.hobby_id == hobby_id)
        )
        return result.rowcount
