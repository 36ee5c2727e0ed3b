"""Weighted sampling without replacement over categorized pools."""

import random
from typing import Hashable, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

# Default draw weights per reward tier
TIER_WEIGHTS: dict[str, float] = {
    "common": 100,
    "uncommon": 50,
    "rare": 20,
    "epic": 10,
    "legendary": 2,
}


def pick_category(
    pool: Mapping[K, Sequence[T]],
    weights: Mapping[K, float],
    rng: random.Random,
) -> Optional[K]:
    """Pick a category by weight, considering only categories with items left.

    Returns None when every category is empty. Categories without a
    weight count as weight 0.
    """
    available = [category for category, items in pool.items() if items]
    if not available:
        return None

    total = 0.0
    for category in available:
        weight = weights.get(category, 0)
        if weight < 0:
            raise ValueError(f"Negative weight for {category!r}: {weight}")
        total += weight

    threshold = rng.random() * total
    for category in available:
        threshold -= weights.get(category, 0)
        if threshold < 0:
            return category

    # Zero total weight, or float rounding at the top end
    return available[0] if total == 0 else available[-1]


def draw_without_replacement(
    pool: Mapping[K, Sequence[T]],
    weights: Mapping[K, float],
    count: int,
    rng: random.Random,
    allow_duplicates: bool = False,
) -> list[T]:
    """Draw up to `count` items: weighted category, then a uniform item in it.

    Without duplicates, each drawn item is removed from a working copy of
    the pool before the next draw, and drawing stops early once every
    category is empty. The caller's pool is never modified.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    working: dict[K, list[T]] = {category: list(items) for category, items in pool.items()}
    results: list[T] = []

    for _ in range(count):
        category = pick_category(working, weights, rng)
        if category is None:
            break

        items = working[category]
        index = rng.randrange(len(items))
        if allow_duplicates:
            results.append(items[index])
        else:
            results.append(items.pop(index))

    return results
