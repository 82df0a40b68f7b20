"""Configuration models for gamesuite."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

ALLOWED_MAX_GUESSES = (6, 10)


@dataclass(slots=True)
class WordGuessConfig:
    """Rules for the word-guessing game."""

    word_length: int = 5
    max_guesses: int = 10
    secret: str | None = None
    words_file: Path | None = None


@dataclass(slots=True)
class HistoryConfig:
    """Where play history is persisted."""

    path: Path = field(default_factory=lambda: Path("game_history.json"))


@dataclass(slots=True)
class GameSuiteConfig:
    """Top-level configuration container."""

    word_guess: WordGuessConfig = field(default_factory=WordGuessConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    rng_seed: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "GameSuiteConfig":
        """Create config from environment variables prefixed with GAMESUITE_."""
        prefix = "GAMESUITE_"
        words_file = os.getenv(f"{prefix}WORDS_FILE")
        word_guess = WordGuessConfig(
            word_length=_int_env(f"{prefix}WORD_LENGTH", 5),
            max_guesses=_int_env(f"{prefix}MAX_GUESSES", 10),
            secret=os.getenv(f"{prefix}SECRET") or None,
            words_file=Path(words_file).expanduser() if words_file else None,
        )
        history = HistoryConfig(
            path=Path(os.getenv(f"{prefix}HISTORY_PATH", "game_history.json")).expanduser()
        )
        return cls(
            word_guess=word_guess,
            history=history,
            rng_seed=_int_env(f"{prefix}RNG_SEED", None),
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "WARNING").upper(),
        )


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {name}: {raw!r}") from exc
