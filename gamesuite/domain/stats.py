"""Per-game play statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

LAST_PLAYED_FORMAT = "%b %d, %Y - %I:%M %p"


@dataclass(slots=True)
class GameStats:
    """Aggregate of play count, score history and last-played time for one game."""

    times_played: int = 0
    scores: list[int] = field(default_factory=list)
    last_played: datetime | None = None

    def increment_times_played(self) -> None:
        self.times_played += 1

    def add_score(self, score: int, when: datetime) -> None:
        self.scores.append(score)
        self.touch(when)

    def touch(self, when: datetime) -> None:
        self.last_played = when

    @property
    def total_score(self) -> int:
        return sum(self.scores)

    @property
    def average_score(self) -> float:
        if not self.scores:
            return 0.0
        return self.total_score / len(self.scores)

    @property
    def last_score(self) -> int:
        if not self.scores:
            return 0
        return self.scores[-1]

    def format_last_played(self) -> str:
        if self.last_played is None:
            return "Never"
        formatted = self.last_played.strftime(LAST_PLAYED_FORMAT)
        # Drop the zero padding on the hour ("03:04 PM" -> "3:04 PM").
        head, _, tail = formatted.rpartition(" - ")
        return f"{head} - {tail.lstrip('0')}"
