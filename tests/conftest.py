"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hobby_service.db.models import ForumPost, Hobby, HobbyFollow, User
from hobby_service.db.postgres import Base, get_db
from hobby_service.main import app

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite database with foreign keys enforced."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


class DataFactory:
    """Writes rows straight to the store and commits."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._posts = 0

    async def user(self, user_id: str, roles: Optional[list[str]] = None) -> User:
        user = User(
            id=user_id,
            user_name=f"{user_id}-name",
            email=f"{user_id}@example.com",
            roles=roles or [],
        )
        self.session.add(user)
        await self.session.commit()
        return user

    async def hobby(
        self, name: str, type: Optional[str] = None, description: str = ""
    ) -> Hobby:
        hobby = Hobby(name=name, type=type, description=description)
        self.session.add(hobby)
        await self.session.commit()
        return hobby

    async def follow(self, user_id: str, *hobbies: Hobby) -> None:
        for hobby in hobbies:
            self.session.add(HobbyFollow(user_id=user_id, hobby_id=hobby.id))
        await self.session.commit()

    async def post(
        self,
        hobby: Hobby,
        user_id: str,
        content: str = "hello",
        parent: Optional[ForumPost] = None,
        created_at: Optional[datetime] = None,
    ) -> ForumPost:
        """Post with strictly increasing timestamps unless one is given."""
        self._posts += 1
        post = ForumPost(
            hobby_id=hobby.id,
            user_id=user_id,
            content=content,
            parent_post_id=parent.id if parent else None,
            created_at=created_at or BASE_TIME + timedelta(minutes=self._posts),
        )
        self.session.add(post)
        await self.session.commit()
        return post


@pytest_asyncio.fixture
async def factory(session):
    return DataFactory(session)


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client bound to the app with the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
