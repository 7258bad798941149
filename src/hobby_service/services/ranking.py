"""Selection and ranking rules for hobby discovery.

Everything here is a pure function over already-loaded hobby cards, so the
rules can be exercised without a database.
"""

from collections import Counter
from typing import Iterable, MutableSequence, Optional, Protocol, Sequence, TypeVar

from ..models.hobby import HobbyCard, RecommendedHobby

T = TypeVar("T")


class RandomSource(Protocol):
    """Source of randomness; ``random.Random`` satisfies it."""

    def shuffle(self, x: MutableSequence) -> None: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def normalize_category(category: Optional[str]) -> Optional[str]:
    """Lower-cased category, or None when uncategorized."""
    if category is None or category == "":
        return None
    return category.lower()


def favorite_categories(followed_types: Iterable[Optional[str]]) -> frozenset[str]:
    """Categories the viewer follows most.

    Every category tied for the highest follow count is a favorite.
    Uncategorized follows never count.
    """
    counts = Counter(
        category
        for category in map(normalize_category, followed_types)
        if category is not None
    )
    if not counts:
        return frozenset()
    top = max(counts.values())
    return frozenset(category for category, count in counts.items() if count == top)


def is_favorite(card: HobbyCard, favorites: frozenset[str]) -> bool:
    category = normalize_category(card.type)
    return category is not None and category in favorites


def rank_by_preference(
    cards: Iterable[HobbyCard], favorites: frozenset[str]
) -> list[RecommendedHobby]:
    """Order cards favorites first, then by followers desc, then by name."""
    ranked = [
        RecommendedHobby(
            **card.model_dump(exclude={"is_following"}),
            is_following=False,
            is_favorite_category=is_favorite(card, favorites),
        )
        for card in cards
    ]
    ranked.sort(
        key=lambda item: (not item.is_favorite_category, -item.followers_count, item.name)
    )
    return ranked


def shuffled(items: Sequence[T], rng: RandomSource) -> list[T]:
    """Shuffled copy of ``items``."""
    result = list(items)
    rng.shuffle(result)
    return result


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Slice one 1-based page out of ``items``."""
    start = (page - 1) * page_size
    return list(items[start:start + page_size])
