"""Tests for the discovery engine and follow actions."""

import random

import pytest

from hobby_service.errors import NotFoundError, ValidationError
from hobby_service.services.discovery import DiscoveryService
from hobby_service.services.follows import FollowService


@pytest.mark.asyncio
async def test_discoverable_excludes_followed(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess", "Games")
    go = await factory.hobby("Go", "Games")
    await factory.hobby("Baking", "Cooking")
    await factory.follow("viewer", chess, go)

    page = await DiscoveryService(session, random.Random(1)).list_discoverable("viewer")

    assert [h.name for h in page.hobbies] == ["Baking"]
    assert page.hobbies[0].is_following is False
    assert page.pagination.total_count == 1


@pytest.mark.asyncio
async def test_discoverable_falls_back_to_catalog_when_everything_followed(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess", "Games")
    baking = await factory.hobby("Baking", "Cooking")
    await factory.follow("viewer", chess, baking)

    page = await DiscoveryService(session, random.Random(1)).list_discoverable(
        "viewer", category="Tech"
    )

    assert sorted(h.name for h in page.hobbies) == ["Baking", "Chess"]
    assert all(h.is_following is False for h in page.hobbies)


@pytest.mark.asyncio
async def test_filters_excluding_unfollowed_fall_back_to_catalog(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess", "Games")
    await factory.hobby("Baking", "Cooking")
    await factory.follow("viewer", chess)

    service = DiscoveryService(session, random.Random(1))
    page = await service.list_discoverable("viewer", category="Games")

    assert sorted(h.name for h in page.hobbies) == ["Baking", "Chess"]
    assert page.pagination.total_count == 2

    picked = await service.pick_random("viewer", category="Games")
    assert picked.is_following is (picked.name == "Chess")


@pytest.mark.asyncio
async def test_empty_catalog(session, factory):
    await factory.user("viewer")
    service = DiscoveryService(session, random.Random(1))

    page = await service.list_discoverable("viewer")
    assert page.hobbies == []
    assert page.pagination.total_pages == 0
    assert page.pagination.has_next_page is False

    with pytest.raises(NotFoundError):
        await service.pick_random("viewer")


@pytest.mark.asyncio
async def test_category_and_search_filters(session, factory):
    await factory.user("viewer")
    await factory.hobby("Robotics", "Tech", "Build robots")
    await factory.hobby("Sketching", "Art", "Pencil drawing")
    await factory.hobby("Drone Racing", "TECH", "Fly fast drones")
    service = DiscoveryService(session, random.Random(1))

    tech = await service.list_discoverable("viewer", category="tech")
    assert sorted(h.name for h in tech.hobbies) == ["Drone Racing", "Robotics"]

    everything = await service.list_discoverable("viewer", category="ALL")
    assert everything.pagination.total_count == 3

    by_description = await service.list_discoverable("viewer", search="DRAWING")
    assert [h.name for h in by_description.hobbies] == ["Sketching"]


@pytest.mark.asyncio
async def test_pagination_metadata(session, factory):
    await factory.user("viewer")
    for name in ["A", "B", "C", "D", "E"]:
        await factory.hobby(name)

    page = await DiscoveryService(session, random.Random(1)).list_discoverable(
        "viewer", page=2, page_size=2
    )

    assert len(page.hobbies) == 2
    assert page.pagination.current_page == 2
    assert page.pagination.total_pages == 3
    assert page.pagination.total_count == 5
    assert page.pagination.page_size == 2
    assert page.pagination.has_next_page is True
    assert page.pagination.has_previous_page is True


@pytest.mark.asyncio
async def test_seeded_pages_partition_candidates(session, factory):
    await factory.user("viewer")
    for name in ["A", "B", "C", "D", "E"]:
        await factory.hobby(name)

    seen = []
    for page in (1, 2, 3):
        result = await DiscoveryService(session, random.Random(7)).list_discoverable(
            "viewer", page=page, page_size=2
        )
        seen.extend(h.name for h in result.hobbies)

    assert sorted(seen) == ["A", "B", "C", "D", "E"]


@pytest.mark.asyncio
async def test_invalid_page_rejected(session, factory):
    await factory.user("viewer")
    with pytest.raises(ValidationError):
        await DiscoveryService(session).list_discoverable("viewer", page=0)
    with pytest.raises(ValidationError):
        await DiscoveryService(session).recommend("viewer", page_size=0)


@pytest.mark.asyncio
async def test_pick_random_unfollowed(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess")
    await factory.hobby("Baking")
    await factory.follow("viewer", chess)

    for seed in range(5):
        hobby = await DiscoveryService(session, random.Random(seed)).pick_random("viewer")
        assert hobby.name == "Baking"
        assert hobby.is_following is False


@pytest.mark.asyncio
async def test_pick_random_fallback_marks_followed(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess")
    await factory.follow("viewer", chess)

    hobby = await DiscoveryService(session, random.Random(3)).pick_random("viewer")

    assert hobby.name == "Chess"
    assert hobby.is_following is True
    assert hobby.followers_count == 1


@pytest.mark.asyncio
async def test_recommend_example_ordering(session, factory):
    await factory.user("viewer")
    for i in range(5):
        await factory.user(f"fan{i}")

    a = await factory.hobby("A", "Tech")
    b = await factory.hobby("B", "Tech")
    c = await factory.hobby("C", "Art")
    t1 = await factory.hobby("Followed 1", "Tech")
    t2 = await factory.hobby("Followed 2", "tech")
    for i in range(5):
        await factory.follow(f"fan{i}", a)
    for i in range(2):
        await factory.follow(f"fan{i}", b, c)
    await factory.follow("viewer", t1, t2)

    result = await DiscoveryService(session).recommend("viewer")

    assert [h.name for h in result.hobbies] == ["A", "B", "C"]
    assert [h.followers_count for h in result.hobbies] == [5, 2, 2]
    assert [h.is_favorite_category for h in result.hobbies] == [True, True, False]
    assert result.favorite_categories == ["tech"]
    assert result.user_follows_count == 2
    assert result.pagination.total_count == 3


@pytest.mark.asyncio
async def test_recommend_is_deterministic(session, factory):
    await factory.user("viewer")
    await factory.hobby("Zumba", "Fitness")
    await factory.hobby("Aerobics", "Fitness")
    await factory.hobby("Yoga", "Fitness")

    first = await DiscoveryService(session).recommend("viewer")
    second = await DiscoveryService(session).recommend("viewer")

    assert [h.name for h in first.hobbies] == ["Aerobics", "Yoga", "Zumba"]
    assert [h.id for h in first.hobbies] == [h.id for h in second.hobbies]
    assert first.favorite_categories == []


@pytest.mark.asyncio
async def test_recommend_never_returns_followed(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess", "Games")
    await factory.hobby("Go", "Games")
    await factory.follow("viewer", chess)

    result = await DiscoveryService(session).recommend("viewer", page_size=1)

    assert [h.name for h in result.hobbies] == ["Go"]
    assert result.hobbies[0].is_favorite_category is True


@pytest.mark.asyncio
async def test_recommend_empty_result_reports_one_page(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess", "Games")
    await factory.follow("viewer", chess)

    result = await DiscoveryService(session).recommend("viewer")

    assert result.hobbies == []
    assert result.pagination.total_count == 0
    assert result.pagination.total_pages == 1
    assert result.pagination.has_next_page is False
    assert result.favorite_categories == ["games"]


@pytest.mark.asyncio
async def test_list_followed(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess")
    baking = await factory.hobby("Baking")
    await factory.hobby("Running")
    await factory.follow("viewer", chess, baking)

    followed = await DiscoveryService(session).list_followed("viewer")

    assert [h.name for h in followed] == ["Baking", "Chess"]
    assert all(h.is_following for h in followed)


@pytest.mark.asyncio
async def test_browse_and_categories(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess", "Games")
    await factory.hobby("Baking", "Cooking")
    await factory.hobby("Go", "Games")
    await factory.hobby("Misc")
    await factory.follow("viewer", chess)
    service = DiscoveryService(session)

    page = await service.browse(page_size=2)
    assert [h.name for h in page.hobbies] == ["Baking", "Chess"]
    assert page.pagination.total_count == 4
    assert page.hobbies[1].followers_count == 1

    games = await service.browse(category="games")
    assert [h.name for h in games.hobbies] == ["Chess", "Go"]

    categories = await service.list_categories()
    assert [(c.name, c.count) for c in categories] == [("Cooking", 1), ("Games", 2)]


@pytest.mark.asyncio
async def test_get_hobby(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess")
    await factory.follow("viewer", chess)
    service = DiscoveryService(session)

    card = await service.get_hobby("viewer", chess.id)
    assert card.is_following is True
    assert card.followers_count == 1

    with pytest.raises(NotFoundError):
        await service.get_hobby("viewer", 999)


@pytest.mark.asyncio
async def test_follow_is_idempotent(session, factory):
    await factory.user("viewer")
    chess = await factory.hobby("Chess")
    service = FollowService(session)

    once = await service.follow("viewer", chess.id)
    twice = await service.follow("viewer", chess.id)

    assert once.followers_count == 1
    assert twice.followers_count == 1
    assert twice.is_following is True


@pytest.mark.asyncio
async def test_unfollow_is_idempotent(session, factory):
    await factory.user("viewer")
    await factory.user("other")
    chess = await factory.hobby("Chess")
    await factory.follow("other", chess)
    service = FollowService(session)

    result = await service.unfollow("viewer", chess.id)
    assert result.followers_count == 1
    assert result.is_following is False

    await service.follow("viewer", chess.id)
    result = await service.unfollow("viewer", chess.id)
    assert result.followers_count == 1


@pytest.mark.asyncio
async def test_follow_missing_hobby(session, factory):
    await factory.user("viewer")
    service = FollowService(session)

    with pytest.raises(NotFoundError):
        await service.follow("viewer", 42)
    with pytest.raises(NotFoundError):
        await service.unfollow("viewer", 42)
