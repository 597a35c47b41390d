"""Tests for the settings model."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from vocabdrill.config.settings import Settings


def test_defaults(tmp_path):
    settings = Settings.load(tmp_path / "missing.yaml")
    assert settings.level_count == 5
    assert settings.learning_exponent == 3
    assert settings.quit_sentinel == "X"


def test_load_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"level_count": 6, "learning_exponent": 5, "quit_sentinel": "q"}))
    settings = Settings.load(path)
    assert settings.level_count == 6
    assert settings.learning_exponent == 5
    assert settings.quit_sentinel == "q"


def test_empty_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert Settings.load(path).level_count == 5


@pytest.mark.parametrize("field", ["level_count", "learning_exponent"])
def test_rejects_non_positive(field):
    with pytest.raises(ValidationError):
        Settings(**{field: 0})


def test_deck_path_resolution(tmp_path, monkeypatch):
    settings = Settings(data_dir=tmp_path)
    assert settings.get_deck_path() == tmp_path / "deck.json"

    settings = Settings(data_dir=tmp_path, deck_path=tmp_path / "english.json")
    assert settings.get_deck_path() == tmp_path / "english.json"

    monkeypatch.setenv("VOCABDRILL_DECK", "/decks/french.json")
    assert settings.get_deck_path() == Path("/decks/french.json")


def test_save_round_trip(tmp_path):
    Settings(data_dir=tmp_path, level_count=7).save()
    loaded = Settings.load(tmp_path / "config.yaml")
    assert loaded.level_count == 7
    assert loaded.data_dir == tmp_path


def test_log_level_is_normalised():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"log_level": "verbose"}))
    with pytest.raises(ValidationError, match="log_level"):
        Settings.load(path)


@pytest.mark.parametrize("exponent", [2, 4])
def test_even_exponent_rejected(exponent):
    with pytest.raises(ValidationError, match="odd"):
        Settings(learning_exponent=exponent)


def test_save_writes_back_to_loaded_path(tmp_path):
    path = tmp_path / "elsewhere" / "drill.yaml"
    path.parent.mkdir()
    path.write_text(yaml.dump({"level_count": 4, "data_dir": str(tmp_path / "data")}))

    settings = Settings.load(path)
    settings.quit_sentinel = "Q"
    settings.save()

    assert Settings.load(path).quit_sentinel == "Q"
    assert not (tmp_path / "data" / "config.yaml").exists()
