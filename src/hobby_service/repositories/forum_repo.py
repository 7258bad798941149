"""Forum post repository."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import ForumPost, Hobby, HobbyFollow, User


class ForumRepository:
    """Repository for forum post operations."""

    @staticmethod
    async def get(
        session: AsyncSession,
        post_id: int,
        hobby_id: Optional[int] = None,
        for_update: bool = False,
    ) -> Optional[ForumPost]:
        """Get a post by ID, optionally scoped to a hobby and locked."""
        stmt = select(ForumPost).where(ForumPost.id == post_id)
        if hobby_id is not None:
            stmt = stmt.where(ForumPost.hobby_id == hobby_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def create(
        session: AsyncSession,
        hobby_id: int,
        user_id: str,
        content: str,
        parent_post_id: Optional[int] = None,
    ) -> ForumPost:
        """Insert a post stamped with the current UTC time."""
        post = ForumPost(
            hobby_id=hobby_id,
            user_id=user_id,
            content=content,
            parent_post_id=parent_post_id,
            created_at=datetime.now(timezone.utc),
        )
        session.add(post)
        await session.flush()
        return post

    @staticmethod
    async def top_level_with_authors(
        session: AsyncSession, hobby_id: int
    ) -> list[tuple[ForumPost, str]]:
        """Top-level posts of a hobby with author names, newest first."""
        stmt = (
            select(ForumPost, User.user_name)
            .join(User, User.id == ForumPost.user_id)
            .where(ForumPost.hobby_id == hobby_id, ForumPost.parent_post_id.is_(None))
            .order_by(ForumPost.created_at.desc(), ForumPost.id.desc())
        )
        result = await session.execute(stmt)
        return [(post, user_name) for post, user_name in result.all()]

    @staticmethod
    async def replies_with_authors(
        session: AsyncSession, parent_ids: list[int]
    ) -> list[tuple[ForumPost, str]]:
        """Replies to the given posts with author names, oldest first."""
        if not parent_ids:
            return []
        stmt = (
            select(ForumPost, User.user_name)
            .join(User, User.id == ForumPost.user_id)
            .where(ForumPost.parent_post_id.in_(parent_ids))
            .order_by(ForumPost.created_at.asc(), ForumPost.id.asc())
        )
        result = await session.execute(stmt)
        return [(post, user_name) for post, user_name in result.all()]

    @staticmethod
    async def recent_for_viewer(
        session: AsyncSession, user_id: str, limit: int
    ) -> list[tuple[ForumPost, str]]:
        """Newest posts written by the user or made in hobbies they follow."""
        followed = select(HobbyFollow.hobby_id).where(HobbyFollow.user_id == user_id)
        stmt = (
            select(ForumPost, Hobby.name)
            .join(Hobby, Hobby.id == ForumPost.hobby_id)
            .where(or_(ForumPost.user_id == user_id, ForumPost.hobby_id.in_(followed)))
            .order_by(ForumPost.created_at.desc(), ForumPost.id.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return [(post, hobby_name) for post, hobby_name in result.all()]

    @staticmethod
    async def delete_replies(session: AsyncSession, parent_post_id: int) -> int:
        result = await session.execute(
            delete(ForumPost).where(ForumPost.parent_post_id == parent_post_id)
        )
        return result.rowcount

    @staticmethod
    async def delete(session: AsyncSession, post_id: int) -> int:
        result = await session.execute(delete(ForumPost).where(ForumPost.id == post_id))
        return result.rowcount

    @staticmethod
    async def delete_for_hobby(session: AsyncSession, hobby_id: int) -> int:
        """Delete every post of a hobby, replies before their parents."""
        replies = await session.execute(
            delete(ForumPost).where(
                ForumPost.hobby_id == hobby_id, ForumPost.parent_post_id.is_not(None)
            )
        )
        posts = await session.execute(
            delete(ForumPost).where(ForumPost.hobby_id == hobby_id)
        )
        return replies.rowcount + posts.rowcount

    @staticmethod
    async def delete_for_user(session: AsyncSession, user_id: str) -> int:
        """Delete a user's posts along with every reply made to them."""
        own_ids = select(ForumPost.id).where(ForumPost.user_id == user_id)
        own_ids_result = await session.execute(own_ids)
        ids = list(own_ids_result.scalars().all())
        if not ids:
            return 0

        replies = await session.execute(
            delete(ForumPost).where(ForumPost.parent_post_id.in_(ids))
        )
        # Replies are gone, so the remaining own posts have no children
        posts = await session.execute(
            delete(ForumPost).where(ForumPost.user_id == user_id)
        )
        return replies.rowcount + posts.rowcount
