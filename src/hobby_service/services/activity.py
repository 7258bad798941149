"""Activity feed: recent forum posts merged with follow events."""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import ValidationError
from ..models.activity import ActivityItem, ActivityType
from ..repositories.forum_repo import ForumRepository
from ..repositories.hobby_repo import HobbyRepository


def _as_utc(value: datetime) -> datetime:
    # Some drivers hand back naive datetimes for UTC columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ActivityService:
    """Read-only aggregation over forum posts and the follow graph."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def recent(self, viewer_id: str, limit: int = 5) -> list[ActivityItem]:
        """Up to ``limit`` newest items for the viewer.

        Follows carry no stored timestamp, so follow events are stamped with
        the time of the query.
        """
        if limit < 1:
            raise ValidationError("limit must be 1 or greater")

        posts = await ForumRepository.recent_for_viewer(self.session, viewer_id, limit)
        post_items = [
            ActivityItem(
                type=ActivityType.FORUM_POST,
                id=post.id,
                content=post.content,
                hobby_id=post.hobby_id,
                hobby_name=hobby_name,
                created_at=_as_utc(post.created_at),
            )
            for post, hobby_name in posts
        ]

        now = datetime.now(timezone.utc)
        followed = await HobbyRepository.list_followed(self.session, viewer_id)
        follow_items = [
            ActivityItem(
                type=ActivityType.HOBBY_FOLLOW,
                id=hobby.id,
                content=f"Followed hobby: {hobby.name}",
                hobby_id=hobby.id,
                hobby_name=hobby.name,
                created_at=now,
            )
            for hobby in followed[:limit]
        ]

        items = post_items + follow_items
        items.sort(key=lambda item: item.created_at, reverse=True)
        return items[:limit]
