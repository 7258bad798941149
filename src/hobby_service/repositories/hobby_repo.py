"""Hobby catalog repository."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Select, delete, exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import Hobby, HobbyFollow
from ..models.hobby import CategorySummary, HobbyCard, HobbyCreate, HobbyUpdate

ALL_CATEGORIES = "all"


def _followers_subquery():
    return (
        select(HobbyFollow.hobby_id, func.count().label("followers_count"))
        .group_by(HobbyFollow.hobby_id)
        .subquery()
    )


def _card_select() -> Select:
    """Hobby rows paired with their follower count."""
    followers = _followers_subquery()
    return select(
        Hobby, func.coalesce(followers.c.followers_count, 0).label("followers_count")
    ).outerjoin(followers, followers.c.hobby_id == Hobby.id)


def _to_card(hobby: Hobby, followers_count: int, is_following: bool = False) -> HobbyCard:
    return HobbyCard(
        id=hobby.id,
        name=hobby.name,
        description=hobby.description or "",
        link=hobby.link,
        type=hobby.type,
        image_url=hobby.image_url,
        followers_count=followers_count,
        is_following=is_following,
    )


def apply_filters(
    stmt: Select, category: Optional[str] = None, search: Optional[str] = None
) -> Select:
    """Restrict a hobby query by category and free-text search.

    Blank values and the ``all`` category sentinel leave the query untouched.
    Both comparisons are case-insensitive.
    """
    if category and category.strip() and category.lower() != ALL_CATEGORIES:
        stmt = stmt.where(
            Hobby.type.is_not(None), func.lower(Hobby.type) == category.lower()
        )

    if search and search.strip():
        needle = search.lower()
        stmt = stmt.where(
            or_(
                func.lower(Hobby.name).contains(needle, autoescape=True),
                func.lower(Hobby.description).contains(needle, autoescape=True),
            )
        )
    return stmt


def not_followed_by(user_id: str):
    """Predicate selecting hobbies the user does not follow."""
    return ~exists().where(
        HobbyFollow.hobby_id == Hobby.id, HobbyFollow.user_id == user_id
    )


class HobbyRepository:
    """Repository for hobby catalog operations."""

    @staticmethod
    async def get_by_id(
        session: AsyncSession, hobby_id: int, for_update: bool = False
    ) -> Optional[Hobby]:
        """Get a Hobby row by ID, optionally locking it."""
        stmt = select(Hobby).where(Hobby.id == hobby_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_card(
        session: AsyncSession, hobby_id: int, viewer_id: Optional[str] = None
    ) -> Optional[HobbyCard]:
        """Get a hobby card with follower count and the viewer's follow flag."""
        result = await session.execute(_card_select().where(Hobby.id == hobby_id))
        row = result.first()
        if not row:
            return None

        is_following = False
        if viewer_id is not None:
            followed = await session.execute(
                select(HobbyFollow).where(
                    HobbyFollow.hobby_id == hobby_id, HobbyFollow.user_id == viewer_id
                )
            )
            is_following = followed.first() is not None
        return _to_card(row[0], row[1], is_following)

    @staticmethod
    async def list_cards(
        session: AsyncSession,
        category: Optional[str] = None,
        search: Optional[str] = None,
        exclude_followed_by: Optional[str] = None,
        order_by_name: bool = False,
    ) -> list[HobbyCard]:
        """List hobby cards matching the filters.

        ``is_following`` is left False on every card; callers that need it
        compute it from the follow graph.
        """
        stmt = apply_filters(_card_select(), category, search)
        if exclude_followed_by is not None:
            stmt = stmt.where(not_followed_by(exclude_followed_by))
        if order_by_name:
            stmt = stmt.order_by(Hobby.name, Hobby.id)
        else:
            stmt = stmt.order_by(Hobby.id)

        result = await session.execute(stmt)
        return [_to_card(hobby, count) for hobby, count in result.all()]

    @staticmethod
    async def count(
        session: AsyncSession,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        stmt = apply_filters(select(func.count()).select_from(Hobby), category, search)
        result = await session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    async def page_by_name(
        session: AsyncSession,
        offset: int,
        limit: int,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[HobbyCard]:
        """One page of the catalog in name order."""
        stmt = (
            apply_filters(_card_select(), category, search)
            .order_by(Hobby.name, Hobby.id)
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return [_to_card(hobby, count) for hobby, count in result.all()]

    @staticmethod
    async def list_followed(session: AsyncSession, user_id: str) -> list[HobbyCard]:
        """All hobbies the user follows, by name."""
        stmt = (
            _card_select()
            .join(HobbyFollow, HobbyFollow.hobby_id == Hobby.id)
            .where(HobbyFollow.user_id == user_id)
            .order_by(Hobby.name, Hobby.id)
        )
        result = await session.execute(stmt)
        return [_to_card(hobby, count, True) for hobby, count in result.all()]

    @staticmethod
    async def followed_types(session: AsyncSession, user_id: str) -> list[Optional[str]]:
        """Type of every hobby the user follows, one entry per follow."""
        stmt = (
            select(Hobby.type)
            .join(HobbyFollow, HobbyFollow.hobby_id == Hobby.id)
            .where(HobbyFollow.user_id == user_id)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def list_categories(session: AsyncSession) -> list[CategorySummary]:
        """Non-empty categories with their hobby counts."""
        stmt = (
            select(Hobby.type, func.count())
            .where(Hobby.type.is_not(None), Hobby.type != "")
            .group_by(Hobby.type)
            .order_by(Hobby.type)
        )
        result = await session.execute(stmt)
        return [CategorySummary(name=name, count=count) for name, count in result.all()]

    @staticmethod
    async def search_by_name(
        session: AsyncSession,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[HobbyCard]:
        """Admin listing: name-only search plus category filter."""
        stmt = apply_filters(_card_select(), category)
        if search and search.strip():
            stmt = stmt.where(
                func.lower(Hobby.name).contains(search.lower(), autoescape=True)
            )
        result = await session.execute(stmt.order_by(Hobby.id))
        return [_to_card(hobby, count) for hobby, count in result.all()]

    @staticmethod
    async def top_by_followers(session: AsyncSession, limit: int = 5) -> list[HobbyCard]:
        """Most-followed hobbies, ties by name."""
        base = _card_select().subquery()
        stmt = (
            select(base)
            .order_by(base.c.followers_count.desc(), base.c.name)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return [
            HobbyCard(
                id=row.id,
                name=row.name,
                description=row.description or "",
                link=row.link,
                type=row.type,
                image_url=row.image_url,
                followers_count=row.followers_count,
            )
            for row in result.all()
        ]

    @staticmethod
    async def create(session: AsyncSession, data: HobbyCreate) -> Hobby:
        """Create a new Hobby row."""
        hobby = Hobby(
            name=data.name,
            description=data.description or "",
            type=data.type,
            link=data.link,
            image_url=data.image_url,
            created_at=datetime.now(timezone.utc),
        )
        session.add(hobby)
        await session.flush()
        return hobby

    @staticmethod
    async def update(hobby: Hobby, data: HobbyUpdate) -> Hobby:
        """Replace a Hobby's editable attributes."""
        hobby.name = data.name
        hobby.description = data.description or ""
        hobby.type = data.type
        hobby.link = data.link
        hobby.image_url = data.image_url
        return hobby

    @staticmethod
    async def delete(session: AsyncSession, hobby_id: int) -> bool:
        """Delete a Hobby row. Dependent rows must be gone already."""
        result = await session.execute(delete(Hobby).where(Hobby.id == hobby_id))
        return result.rowcount > 0
