"""Forum engine: two-level threads scoped to a hobby."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import ForumPost as ForumPostRow
from ..errors import NotFoundError, ValidationError
from ..models.forum import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    ForumPost,
    ForumReply,
    ForumThreadPost,
)
from ..repositories.forum_repo import ForumRepository
from ..repositories.hobby_repo import HobbyRepository
from .common import commit, constraint_error

logger = logging.getLogger("hobby_forum")


def validate_content(content: Optional[str]) -> str:
    if content is None:
        raise ValidationError("Content is required")
    if not CONTENT_MIN_LENGTH <= len(content) <= CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Content must be between {CONTENT_MIN_LENGTH} and "
            f"{CONTENT_MAX_LENGTH} characters"
        )
    return content


def _to_post(row: ForumPostRow) -> ForumPost:
    return ForumPost(
        id=row.id,
        hobby_id=row.hobby_id,
        user_id=row.user_id,
        content=row.content,
        created_at=row.created_at,
    )


def _to_reply(row: ForumPostRow, user_name: str) -> ForumReply:
    return ForumReply(
        id=row.id,
        content=row.content,
        created_at=row.created_at,
        user_name=user_name,
        user_id=row.user_id,
    )


class ForumService:
    """Threads of top-level posts and their direct replies."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _require_hobby(self, hobby_id: int) -> None:
        if not await HobbyRepository.get_by_id(self.session, hobby_id):
            raise NotFoundError("Hobby not found.")

    async def list_thread(self, hobby_id: int) -> list[ForumThreadPost]:
        """Top-level posts newest first, each with replies oldest first."""
        await self._require_hobby(hobby_id)

        posts = await ForumRepository.top_level_with_authors(self.session, hobby_id)
        replies = await ForumRepository.replies_with_authors(
            self.session, [post.id for post, _ in posts]
        )

        replies_by_parent: dict[int, list[ForumReply]] = {}
        for reply, user_name in replies:
            replies_by_parent.setdefault(reply.parent_post_id, []).append(
                _to_reply(reply, user_name)
            )

        return [
            ForumThreadPost(
                **_to_reply(post, user_name).model_dump(),
                replies=replies_by_parent.get(post.id, []),
            )
            for post, user_name in posts
        ]

    async def create_post(self, hobby_id: int, author_id: str, content: str) -> ForumPost:
        """Create a top-level post."""
        content = validate_content(content)
        await self._require_hobby(hobby_id)

        post = await self._insert(hobby_id, author_id, content, None)
        logger.info(f"User {author_id} posted {post.id} in hobby {hobby_id}")
        return post

    async def create_reply(
        self, hobby_id: int, parent_post_id: int, author_id: str, content: str
    ) -> ForumPost:
        """Reply to a post of the same hobby.

        Replying to a reply attaches the new post to that reply's top-level
        parent, so threads never grow a third level.
        """
        content = validate_content(content)
        await self._require_hobby(hobby_id)

        parent = await ForumRepository.get(
            self.session, parent_post_id, hobby_id=hobby_id, for_update=True
        )
        if not parent:
            raise NotFoundError("Parent post not found.")

        thread_id = parent.parent_post_id if parent.parent_post_id is not None else parent.id
        reply = await self._insert(hobby_id, author_id, content, thread_id)
        logger.info(f"User {author_id} replied {reply.id} to post {thread_id}")
        return reply

    async def _insert(
        self, hobby_id: int, author_id: str, content: str, parent_post_id: Optional[int]
    ) -> ForumPost:
        try:
            row = await ForumRepository.create(
                self.session, hobby_id, author_id, content, parent_post_id
            )
        except IntegrityError as e:
            await self.session.rollback()
            raise constraint_error("create post", e) from e
        post = _to_post(row)
        await commit(self.session, "create post")
        return post

    async def delete_post(self, hobby_id: int, post_id: int) -> ForumPost:
        """Delete a post together with its direct replies."""
        post = await ForumRepository.get(
            self.session, post_id, hobby_id=hobby_id, for_update=True
        )
        if not post:
            raise NotFoundError("Post not found.")
        deleted = _to_post(post)

        try:
            replies = await ForumRepository.delete_replies(self.session, post_id)
            await ForumRepository.delete(self.session, post_id)
        except IntegrityError as e:
            await self.session.rollback()
            raise constraint_error("delete post", e) from e
        await commit(self.session, "delete post")

        logger.info(f"Deleted post {post_id} of hobby {hobby_id} with {replies} replies")
        return deleted
