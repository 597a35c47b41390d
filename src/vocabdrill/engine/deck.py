"""Deck data model and its dict (JSON) representation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional


class DeckFormatError(ValueError):
    """Raised when a deck document does not have the expected shape."""


@dataclass
class Variant:
    prompt_texts: list[str]
    answer_texts: list[str]

    @classmethod
    def simple(cls, prompt: str, answer: str) -> "Variant":
        return cls(prompt_texts=[prompt], answer_texts=[answer])

    def reversed(self) -> "Variant":
        """Same pair, asked the other way round."""
        return Variant(prompt_texts=self.answer_texts, answer_texts=self.prompt_texts)


@dataclass
class Item:
    variants: list[Variant]
    level: int = 0
    ok: int = 0
    warn: int = 0
    minor: int = 0
    fail: int = 0

    def choose_variant(self, rng: Optional[random.Random] = None) -> Variant:
        return (rng or random).choice(self.variants)


@dataclass
class Deck:
    description: str = ""
    words: list[Item] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.words)

    def add(self, prompt: str, answer: str) -> Item:
        """Append a fresh, never-asked word with a single variant."""
        item = Item(variants=[Variant.simple(prompt, answer)])
        self.words.append(item)
        return item

    def levels(self) -> list[int]:
        return [w.level for w in self.words]


COUNTER_FIELDS = ("level", "ok", "warn", "minor", "fail")


def _parse_texts(raw, where: str) -> list[str]:
    if not isinstance(raw, list) or not raw:
        raise DeckFormatError(f"{where}: expected a non-empty list of strings")
    if not all(isinstance(t, str) for t in raw):
        raise DeckFormatError(f"{where}: expected a non-empty list of strings")
    return list(raw)


def _parse_variant(raw, where: str) -> Variant:
    if not isinstance(raw, dict):
        raise DeckFormatError(f"{where}: expected an object")
    return Variant(
        prompt_texts=_parse_texts(raw.get("prompts"), f"{where}.prompts"),
        answer_texts=_parse_texts(raw.get("answers"), f"{where}.answers"),
    )


def _parse_item(raw, index: int) -> Item:
    where = f"words[{index}]"
    if not isinstance(raw, dict):
        raise DeckFormatError(f"{where}: expected an object")

    counters = {}
    for name in COUNTER_FIELDS:
        value = raw.get(name, 0)
        # bool is an int subclass, but never a valid counter
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise DeckFormatError(f"{where}.{name}: expected a non-negative integer")
        counters[name] = value

    raw_variants = raw.get("variants")
    if not isinstance(raw_variants, list) or not raw_variants:
        raise DeckFormatError(f"{where}.variants: expected a non-empty list")
    variants = [
        _parse_variant(v, f"{where}.variants[{i}]") for i, v in enumerate(raw_variants)
    ]
    return Item(variants=variants, **counters)


def deck_from_dict(data) -> Deck:
    """Build a Deck from a decoded JSON document, validating its shape."""
    if not isinstance(data, dict):
        raise DeckFormatError("deck: expected an object")

    description = data.get("description", "")
    if not isinstance(description, str):
        raise DeckFormatError("description: expected a string")

    raw_words = data.get("words", [])
    if not isinstance(raw_words, list):
        raise DeckFormatError("words: expected a list")

    return Deck(
        description=description,
        words=[_parse_item(raw, i) for i, raw in enumerate(raw_words)],
    )


def deck_to_dict(deck: Deck) -> dict:
    return {
        "description": deck.description,
        "words": [
            {
                "level": w.level,
                "ok": w.ok,
                "warn": w.warn,
                "minor": w.minor,
                "fail": w.fail,
                "variants": [
                    {"prompts": list(v.prompt_texts), "answers": list(v.answer_texts)}
                    for v in w.variants
                ],
            }
            for w in deck.words
        ],
    }
