"""Top level application object wiring games, history and configuration."""

from __future__ import annotations

import logging
from random import Random
from typing import Any

from .config import ALLOWED_MAX_GUESSES, GameSuiteConfig
from .console import ConsoleIO
from .domain.exceptions import StorageWriteError
from .domain.history import Clock, HistoryStore
from .domain.placeholders import SnakeGame, SudokuGame
from .domain.stats import GameStats
from .domain.word_guess import WordGuessGame
from .domain.words import DEFAULT_WORDS
from .loaders import load_words_from_json
from .registry import Game, GameIO, GameRegistry

logger = logging.getLogger(__name__)


class SuiteApp:
    """Central dependency container used by the CLI and the menu."""

    def __init__(
        self,
        config: GameSuiteConfig,
        *,
        io: GameIO | None = None,
        history: HistoryStore | None = None,
        rng: Random | None = None,
        clock: Clock | None = None,
        register_defaults: bool = True,
    ) -> None:
        self.config = config
        self.io = io or ConsoleIO()
        self.games = GameRegistry()
        self.history = history if history is not None else HistoryStore.load(
            config.history.path, clock=clock
        )
        self._rng = rng or (Random(config.rng_seed) if config.rng_seed is not None else Random())
        if register_defaults:
            self.register_default_games()

    def register_default_games(self) -> None:
        word_config = self.config.word_guess
        if word_config.max_guesses not in ALLOWED_MAX_GUESSES:
            allowed = ", ".join(str(value) for value in ALLOWED_MAX_GUESSES)
            raise ValueError(
                f"max_guesses must be one of {allowed}, got {word_config.max_guesses}"
            )
        words = (
            load_words_from_json(word_config.words_file, word_config.word_length)
            if word_config.words_file
            else DEFAULT_WORDS
        )
        self.games.register(
            WordGuessGame(
                self.io,
                words=words,
                secret=word_config.secret,
                max_guesses=word_config.max_guesses,
                word_length=word_config.word_length,
                rng=self._rng,
            )
        )
        self.games.register(SnakeGame(self.io))
        self.games.register(SudokuGame(self.io))

    def resolve(self, key: str) -> Game:
        game = self.games.find_by_command(key)
        if game is None:
            raise KeyError(f"Game {key} not found")
        return game

    def play(self, key: str) -> int | None:
        """Play one game, record the outcome and persist history."""
        game = self.resolve(key)
        score = game.play()
        self.record(game.name, score)
        return score

    def record(self, name: str, score: int | None) -> GameStats:
        stats = self.history.record_play(name, score)
        logger.info("Recorded play of %s (score=%s).", name, score)
        self.save_history()
        return stats

    def save_history(self) -> bool:
        try:
            self.history.save(self.config.history.path)
        except StorageWriteError as exc:
            self._report_write_failure(exc)
            return False
        return True

    def clear_history(self) -> bool:
        try:
            self.history.clear(self.config.history.path)
        except StorageWriteError as exc:
            self._report_write_failure(exc)
            return False
        return True

    def _report_write_failure(self, exc: StorageWriteError) -> None:
        logger.warning("Game history save failed: %s", exc)
        self.io.write(f"Game history save failed: {exc}", style="red")

    def snapshot(self) -> dict[str, Any]:
        """Export current configuration for debugging."""
        return {
            "history_path": str(self.config.history.path),
            "games": [game.game_id for game in self.games.all()],
            "max_guesses": self.config.word_guess.max_guesses,
            "recorded": sorted(self.history.names()),
        }
