"""Shared fixtures for vocabdrill tests."""

from __future__ import annotations

import json
import random
import sys

import pytest
from loguru import logger

from vocabdrill.engine.deck import Deck, Item, Variant


@pytest.fixture(autouse=True)
def quiet_logging():
    """Only warnings and errors reach stderr during tests."""
    logger.remove()
    logger.add(sys.stderr, level="WARNING", format="<level>{level: <8}</level> | {message}")
    yield
    logger.remove()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def no_deck_env(monkeypatch):
    monkeypatch.delenv("VOCABDRILL_DECK", raising=False)


@pytest.fixture
def sample_deck_data():
    return {
        "description": "Englisch, Klasse 5",
        "words": [
            {
                "level": 0, "ok": 0, "warn": 0, "minor": 0, "fail": 0,
                "variants": [{"prompts": ["Hund"], "answers": ["dog"]}],
            },
            {
                "level": 3, "ok": 4, "warn": 1, "minor": 0, "fail": 1,
                "variants": [{"prompts": ["sagen"], "answers": ["to say"]}],
            },
            {
                "level": 7, "ok": 7, "warn": 0, "minor": 0, "fail": 0,
                "variants": [
                    {"prompts": ["Bär"], "answers": ["bear"]},
                    {"prompts": ["ein Bär"], "answers": ["a bear"]},
                ],
            },
        ],
    }


@pytest.fixture
def sample_deck_file(tmp_path, sample_deck_data):
    path = tmp_path / "deck.json"
    path.write_text(json.dumps(sample_deck_data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def single_word_deck():
    """One word at level 2 whose only accepted answer is "run"."""
    return Deck(
        description="single",
        words=[Item(variants=[Variant(prompt_texts=["rennen"], answer_texts=["run"])], level=2)],
    )
