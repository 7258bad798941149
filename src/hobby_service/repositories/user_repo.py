"""User repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import User


class UserRepository:
    """Read access to identity records, plus deletion."""

    @staticmethod
    async def get_by_id(
        session: AsyncSession, user_id: str, for_update: bool = False
    ) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def list_all(session: AsyncSession) -> list[User]:
        result = await session.execute(select(User).order_by(User.user_name))
        return list(result.scalars().all())

    @staticmethod
    async def delete(session: AsyncSession, user_id: str) -> bool:
        result = await session.execute(delete(User).where(User.id == user_id))
        return result.rowcount > 0
