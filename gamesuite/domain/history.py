"""Play history tracker keyed by game name."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, ItemsView, Iterable

from ..storage.json_file import read_history_file, write_history_file
from .exceptions import StorageReadError
from .stats import GameStats

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HistoryStore:
    """Mapping from game name to GameStats with durable save/load/clear."""

    def __init__(
        self,
        games: dict[str, GameStats] | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._games: dict[str, GameStats] = dict(games or {})
        self._clock = clock or utc_now

    def record_play(self, name: str, score: int | None = None) -> GameStats:
        """Count one play of *name*; append *score* when the game reported one."""
        stats = self._games.get(name) or GameStats()
        stats.increment_times_played()
        now = self._clock()
        if score is not None:
            stats.add_score(score, now)
        else:
            stats.touch(now)
        self._games[name] = stats
        return stats

    def get(self, name: str) -> GameStats | None:
        return self._games.get(name)

    def names(self) -> Iterable[str]:
        return self._games.keys()

    def items(self) -> ItemsView[str, GameStats]:
        return self._games.items()

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, name: object) -> bool:
        return name in self._games

    def save(self, path: str | Path) -> None:
        """Overwrite *path* with the whole mapping. Raises StorageWriteError."""
        write_history_file(path, self._games)
        logger.info("Saved history for %s game(s) to %s.", len(self._games), path)

    def clear(self, path: str | Path) -> None:
        """Empty the mapping and persist the empty state.

        The in-memory history stays cleared even when the write fails; the
        StorageWriteError is re-raised for the caller to report.
        """
        self._games.clear()
        self.save(path)

    @classmethod
    def load(cls, path: str | Path, *, clock: Clock | None = None) -> "HistoryStore":
        """Restore history from *path*, falling back to an empty store on any failure."""
        if not Path(path).exists():
            logger.info("No history file at %s; starting fresh.", path)
            return cls(clock=clock)
        try:
            games = read_history_file(path)
        except StorageReadError as exc:
            logger.info("Failed to load history, starting fresh: %s", exc)
            return cls(clock=clock)
        return cls(games, clock=clock)


__all__ = ["HistoryStore", "utc_now"]
