"""Answer comparison with graded fuzziness."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

# Characters trimmed from both ends before the first fuzzy comparison.
EDGE_CHARS = " _?.!"
# Characters removed everywhere before the second fuzzy comparison.
NOISE_CHARS = " -,_'"
INFINITIVE_PREFIX = "to "

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_DROP_NOISE = str.maketrans("", "", NOISE_CHARS)


class Outcome(IntEnum):
    """Grade of a submitted answer, ordered from worst to best."""

    FAIL = 0
    MINOR = 1
    WARN = 2
    OK = 3


def fuzzy1(text: str) -> str:
    """Trim punctuation/underscores at the edges and one leading "to "."""
    text = text.strip(EDGE_CHARS)
    if text.startswith(INFINITIVE_PREFIX):
        text = text[len(INFINITIVE_PREFIX):]
    return text


def fuzzy2(text: str) -> str:
    """ASCII-lowercase and drop spaces, hyphens, commas, underscores, apostrophes."""
    return text.translate(_ASCII_LOWER).translate(_DROP_NOISE)


def compare(expected: str, answer: str) -> Outcome:
    """Grade an answer against a single accepted text."""
    if answer == expected:
        return Outcome.OK

    answer = fuzzy1(answer)
    expected = fuzzy1(expected)
    if answer == expected:
        return Outcome.WARN

    if fuzzy2(answer) == fuzzy2(expected):
        return Outcome.MINOR

    return Outcome.FAIL


def classify(expected: Iterable[str], answer: str) -> Outcome:
    """Return the best grade of ``answer`` over all accepted texts.

    An empty ``expected`` collection grades as FAIL.
    """
    return max((compare(e, answer) for e in expected), default=Outcome.FAIL)
