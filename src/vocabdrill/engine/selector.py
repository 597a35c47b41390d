"""Weighted random choice of the next word to ask.

Words are ordered by level and a position is drawn with a skew towards
the front (``u ** exponent`` for uniform ``u``), so low-level words come up
far more often. The drawn position only selects a *level*: the final pick
is uniform over every word sharing that level (the "band"), which keeps a
word's chance independent of where it happens to sit among its peers.
"""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

from loguru import logger

LEARNING_EXPONENT = 3


class EmptyDeckError(ValueError):
    """Raised when asked to pick from a deck without words."""

    def __init__(self, message: str = "deck has no items"):
        super().__init__(message)


def find_band(levels: Sequence[int], index: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the run of equal levels containing ``index``.

    ``levels`` must be sorted. ``end`` is exclusive.
    """
    level = levels[index]

    start = index
    while start > 0 and levels[start - 1] == level:
        start -= 1

    end = index + 1
    while end < len(levels) and levels[end] == level:
        end += 1

    assert levels[start] == level
    assert start == 0 or levels[start - 1] != level
    assert levels[end - 1] == level
    assert end == len(levels) or levels[end] != level
    return start, end


def skewed_position(count: int, exponent: int, rng: random.Random) -> int:
    x = rng.random() ** exponent
    return min(math.floor(x * count), count - 1)


def pick_next(
    levels: Sequence[int],
    exponent: int = LEARNING_EXPONENT,
    rng: Optional[random.Random] = None,
) -> int:
    """Pick the index (into ``levels``) of the next word to ask."""
    if not levels:
        raise EmptyDeckError()
    rng = rng or random.Random()

    # sorted() is stable, and sorting indices leaves the deck order alone
    order = sorted(range(len(levels)), key=lambda i: levels[i])
    sorted_levels = [levels[i] for i in order]

    position = skewed_position(len(order), exponent, rng)
    start, end = find_band(sorted_levels, position)
    chosen = order[rng.randrange(start, end)]

    logger.debug(
        f"Picked word {chosen} at level {levels[chosen]} "
        f"(band {start}..{end} of {len(order)})"
    )
    return chosen
