"""PostgreSQL models for the hobby catalog, follows and forum."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .postgres import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """Identity principal, maintained by the external identity provider."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_name: Mapped[str] = mapped_column(String(256), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(256))
    roles: Mapped[list] = mapped_column(JSON, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )


class Hobby(Base):
    """Catalog entry."""

    __tablename__ = "hobbies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    # Empty or NULL means uncategorized
    type: Mapped[Optional[str]] = mapped_column(String(50), index=True)
    link: Mapped[Optional[str]] = mapped_column(String(500))
    image_url: Mapped[Optional[str]] = mapped_column(String(500))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )


class HobbyFollow(Base):
    """Follow relation between a user and a hobby."""

    __tablename__ = "user_hobbies"

    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    hobby_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hobbies.id", ondelete="CASCADE"), primary_key=True,
        index=True,
    )


class ForumPost(Base):
    """Forum post; rows with a parent are replies."""

    __tablename__ = "forum_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.id", ondelete="CASCADE"), index=True,
        nullable=False,
    )
    hobby_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hobbies.id", ondelete="CASCADE"), index=True,
        nullable=False,
    )
    # Replies are removed explicitly before their parent
    parent_post_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("forum_posts.id", ondelete="RESTRICT"), index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )
