from pathlib import Path

import pytest

from gamesuite.config import GameSuiteConfig

ENV_NAMES = (
    "WORD_LENGTH",
    "MAX_GUESSES",
    "SECRET",
    "WORDS_FILE",
    "HISTORY_PATH",
    "RNG_SEED",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(f"GAMESUITE_{name}", raising=False)


def test_from_env_defaults():
    config = GameSuiteConfig.from_env()
    assert config.word_guess.max_guesses == 10
    assert config.word_guess.word_length == 5
    assert config.word_guess.secret is None
    assert config.word_guess.words_file is None
    assert config.history.path == Path("game_history.json")
    assert config.rng_seed is None
    assert config.log_level == "WARNING"


def test_from_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("GAMESUITE_MAX_GUESSES", "6")
    monkeypatch.setenv("GAMESUITE_SECRET", "apple")
    monkeypatch.setenv("GAMESUITE_HISTORY_PATH", str(tmp_path / "h.json"))
    monkeypatch.setenv("GAMESUITE_WORDS_FILE", str(tmp_path / "words.json"))
    monkeypatch.setenv("GAMESUITE_RNG_SEED", "42")
    monkeypatch.setenv("GAMESUITE_LOG_LEVEL", "debug")

    config = GameSuiteConfig.from_env()
    assert config.word_guess.max_guesses == 6
    assert config.word_guess.secret == "apple"
    assert config.word_guess.words_file == tmp_path / "words.json"
    assert config.history.path == tmp_path / "h.json"
    assert config.rng_seed == 42
    assert config.log_level == "DEBUG"


def test_from_env_rejects_bad_integer(monkeypatch):
    monkeypatch.setenv("GAMESUITE_MAX_GUESSES", "ten")
    with pytest.raises(ValueError) as excinfo:
        GameSuiteConfig.from_env()
    assert "GAMESUITE_MAX_GUESSES" in str(excinfo.value)


def test_from_env_blank_seed_means_unseeded(monkeypatch):
    monkeypatch.setenv("GAMESUITE_RNG_SEED", "   ")
    assert GameSuiteConfig.from_env().rng_seed is None
