"""Proficiency model: how a graded answer moves a word's level.

Levels are unbounded counters. Display and statistics clamp them to
``level_count - 1`` so that a word answered right twenty times in a row
counts the same as one answered right ``level_count - 1`` times.
"""

from __future__ import annotations

from typing import Iterable, Optional

from vocabdrill.engine.comparator import Outcome
from vocabdrill.engine.deck import Item

LEVEL_COUNT = 5


def update(item: Item, outcome: Outcome) -> None:
    """Record ``outcome`` on ``item`` and adjust its level in place."""
    if outcome is Outcome.OK:
        item.ok += 1
        item.level += 1
    elif outcome is Outcome.WARN:
        item.warn += 1
    elif outcome is Outcome.MINOR:
        item.minor += 1
        item.level = max(item.level - 1, 0)
    else:
        item.fail += 1
        item.level = 0


def has_been_asked(item: Item) -> bool:
    return item.ok > 0 or item.warn > 0 or item.minor > 0 or item.fail > 0


def clamp_level(level: int, level_count: int = LEVEL_COUNT) -> int:
    return min(level, level_count - 1)


def average_level(items: Iterable[Item], level_count: int = LEVEL_COUNT) -> Optional[float]:
    """Mean clamped level of the words asked so far, or None if none were."""
    levels = [clamp_level(i.level, level_count) for i in items if has_been_asked(i)]
    if not levels:
        return None
    return sum(levels) / len(levels)


def item_grade(item: Item, level_count: int = LEVEL_COUNT) -> int:
    """School-style grade of a word: ``level_count`` is unknown, 1 is mastered."""
    return level_count - clamp_level(item.level, level_count)


def deck_grade(items: Iterable[Item], level_count: int = LEVEL_COUNT) -> Optional[float]:
    avg = average_level(items, level_count)
    if avg is None:
        return None
    return level_count - avg


def level_histogram(items: Iterable[Item], level_count: int = LEVEL_COUNT) -> list[int]:
    """Number of words at each clamped level, index 0 being the lowest."""
    counts = [0] * level_count
    for item in items:
        counts[clamp_level(item.level, level_count)] += 1
    return counts
