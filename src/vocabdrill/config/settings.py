"""Configuration model for vocabdrill."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, PrivateAttr, field_validator

from vocabdrill.engine.proficiency import LEVEL_COUNT
from vocabdrill.engine.selector import LEARNING_EXPONENT

DEFAULT_DATA_DIR = Path.home() / ".vocabdrill"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    level_count: int = Field(default=LEVEL_COUNT, ge=1)
    learning_exponent: int = Field(default=LEARNING_EXPONENT, ge=1)
    quit_sentinel: str = Field(default="X", min_length=1)
    data_dir: Path = DEFAULT_DATA_DIR
    deck_path: Optional[Path] = None
    log_level: str = "WARNING"

    _config_path: Optional[Path] = PrivateAttr(default=None)

    @field_validator("learning_exponent")
    @classmethod
    def _odd_exponent(cls, value: int) -> int:
        if value % 2 == 0:
            raise ValueError("learning_exponent must be odd")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    def get_deck_path(self) -> Path:
        env = os.environ.get("VOCABDRILL_DECK")
        if env:
            return Path(env)
        return self.deck_path or (self.data_dir / "deck.json")

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        config_path = config_path or (DEFAULT_DATA_DIR / "config.yaml")
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            settings = cls(**data)
        else:
            settings = cls()
        settings._config_path = config_path
        return settings

    def save(self) -> None:
        """Write back to the file this was loaded from, else ``data_dir/config.yaml``."""
        config_path = self._config_path or (self.data_dir / "config.yaml")
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)
