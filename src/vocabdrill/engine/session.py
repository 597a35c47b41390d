"""Drill session: pick → ask → grade → update → save."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from vocabdrill.config.settings import Settings
from vocabdrill.engine import proficiency
from vocabdrill.engine.comparator import Outcome, classify
from vocabdrill.engine.deck import Deck, Item
from vocabdrill.engine.selector import pick_next
from vocabdrill.state.deck_store import DeckStore


@dataclass
class Question:
    word_index: int
    item: Item
    prompts: list[str]
    expected: list[str]


@dataclass
class SessionStats:
    asked: int = 0
    outcomes: Counter = field(default_factory=Counter)

    def record(self, outcome: Outcome) -> None:
        self.asked += 1
        self.outcomes[outcome] += 1


class DrillSession:
    """Drives one drilling session over a deck and persists after each answer."""

    def __init__(
        self,
        deck: Deck,
        store: Optional[DeckStore] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        reverse: bool = False,
    ):
        self.deck = deck
        self.store = store
        self.settings = settings or Settings()
        self.rng = rng or random.Random()
        self.reverse = reverse
        self.stats = SessionStats()

    @property
    def level_count(self) -> int:
        return self.settings.level_count

    def is_quit(self, line: str) -> bool:
        return line == self.settings.quit_sentinel

    def deck_grade(self) -> Optional[float]:
        return proficiency.deck_grade(self.deck.words, self.level_count)

    def item_grade(self, question: Question) -> int:
        return proficiency.item_grade(question.item, self.level_count)

    def next_question(self) -> Question:
        """Choose the next word and one of its variants.

        Raises EmptyDeckError when the deck has no words.
        """
        index = pick_next(
            self.deck.levels(), self.settings.learning_exponent, self.rng
        )
        item = self.deck.words[index]
        variant = item.choose_variant(self.rng)
        if self.reverse:
            variant = variant.reversed()
        return Question(
            word_index=index,
            item=item,
            prompts=list(variant.prompt_texts),
            expected=list(variant.answer_texts),
        )

    def submit(self, question: Question, answer: str) -> Outcome:
        """Grade ``answer``, update the word and save the deck."""
        outcome = classify(question.expected, answer.strip())
        before = question.item.level
        proficiency.update(question.item, outcome)
        self.stats.record(outcome)

        logger.debug(
            f"Word {question.word_index}: {outcome.name} "
            f"(level {before} -> {question.item.level})"
        )

        if self.store is not None:
            self.store.save(self.deck)
        return outcome
