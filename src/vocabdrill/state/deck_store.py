"""JSON file persistence for a vocabulary deck."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from loguru import logger

from vocabdrill.engine.deck import Deck, DeckFormatError, deck_from_dict, deck_to_dict


class DeckStore:
    def __init__(self, path: Optional[Path] = None):
        self.path = path or (Path.home() / ".vocabdrill" / "deck.json")

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Deck:
        """Read and validate the deck file.

        Raises FileNotFoundError if the file is missing and DeckFormatError
        if it is not a valid deck document.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.error(f"Deck file {self.path} is not UTF-8: {e}")
            raise DeckFormatError(f"{self.path}: not UTF-8: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Deck file {self.path} is not valid JSON: {e}")
            raise DeckFormatError(f"{self.path}: invalid JSON: {e}") from e

        try:
            deck = deck_from_dict(data)
        except DeckFormatError as e:
            logger.error(f"Rejected deck file {self.path}: {e}")
            raise

        logger.info(f"Loaded {len(deck)} words from {self.path}")
        return deck

    def save(self, deck: Deck) -> None:
        """Overwrite the deck file with the full current deck."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(deck_to_dict(deck), indent=2, ensure_ascii=False)
        self.path.write_text(text + "\n", encoding="utf-8")
        logger.debug(f"Saved {len(deck)} words to {self.path}")
