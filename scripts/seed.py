"""Seed script for the starter hobby catalog and admin user."""

import asyncio
from datetime import datetime, timezone

from sqlalchemy import func, select

from hobby_service.config import get_settings
from hobby_service.db.models import Hobby, User
from hobby_service.db.postgres import close_postgres, get_session_factory, init_postgres

ADMIN_ID = "admin"

HOBBIES = [
    {"name": "Photography", "type": "Art", "description": "Capture the world through a lens.",
     "link": "https://en.wikipedia.org/wiki/Photography"},
    {"name": "Painting", "type": "Art", "description": "Express ideas with color on canvas.",
     "link": "https://en.wikipedia.org/wiki/Painting"},
    {"name": "Pottery", "type": "Art", "description": "Shape clay into useful and beautiful objects.",
     "link": "https://en.wikipedia.org/wiki/Pottery"},
    {"name": "Rock Climbing", "type": "Sports", "description": "Climb natural and artificial rock walls.",
     "link": "https://en.wikipedia.org/wiki/Rock_climbing"},
    {"name": "Running", "type": "Sports", "description": "Run for fitness, fun or competition.",
     "link": "https://en.wikipedia.org/wiki/Running"},
    {"name": "Swimming", "type": "Sports", "description": "Move through water for exercise and play.",
     "link": "https://en.wikipedia.org/wiki/Swimming"},
    {"name": "Programming", "type": "Tech", "description": "Build software and solve problems with code.",
     "link": "https://en.wikipedia.org/wiki/Computer_programming"},
    {"name": "Electronics", "type": "Tech", "description": "Design and build circuits and gadgets.",
     "link": "https://en.wikipedia.org/wiki/Electronics"},
    {"name": "3D Printing", "type": "Tech", "description": "Turn digital models into physical objects.",
     "link": "https://en.wikipedia.org/wiki/3D_printing"},
    {"name": "Baking", "type": "Cooking", "description": "Bake bread, cakes and pastries.",
     "link": "https://en.wikipedia.org/wiki/Baking"},
    {"name": "Fermentation", "type": "Cooking", "description": "Make kimchi, kombucha and sourdough.",
     "link": "https://en.wikipedia.org/wiki/Fermentation_in_food_processing"},
    {"name": "Gardening", "type": "Outdoors", "description": "Grow flowers, herbs and vegetables.",
     "link": "https://en.wikipedia.org/wiki/Gardening"},
    {"name": "Birdwatching", "type": "Outdoors", "description": "Observe and identify wild birds.",
     "link": "https://en.wikipedia.org/wiki/Birdwatching"},
    {"name": "Chess", "type": "Games", "description": "Play the classic game of strategy.",
     "link": "https://en.wikipedia.org/wiki/Chess"},
    {"name": "Guitar", "type": "Music", "description": "Learn chords, riffs and songs.",
     "link": "https://en.wikipedia.org/wiki/Guitar"},
]


async def seed_data():
    """Seed PostgreSQL with the admin user and starter hobbies."""
    settings = get_settings()
    await init_postgres()

    async with get_session_factory()() as session:
        admin = await session.get(User, ADMIN_ID)
        if admin is None:
            session.add(User(
                id=ADMIN_ID,
                user_name="admin",
                email="admin@example.com",
                roles=[settings.admin_role],
            ))
            print("👤 Created admin user")
        else:
            print("👤 Admin user already exists")

        count = (await session.execute(select(func.count()).select_from(Hobby))).scalar_one()
        if count == 0:
            now = datetime.now(timezone.utc)
            for h in HOBBIES:
                session.add(Hobby(**h, created_at=now))
            print(f"⭐ Created {len(HOBBIES)} hobbies")
        else:
            print(f"⭐ No seeding needed, {count} hobbies already exist")

        await session.commit()

    await close_postgres()
    print("\n✅ Seed data created successfully!")


if __name__ == "__main__":
    asyncio.run(seed_data())
