"""Versioned JSON document format for play history."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

from ..domain.exceptions import StorageReadError, StorageWriteError
from ..domain.stats import GameStats

HISTORY_FORMAT = "gamesuite.history"
HISTORY_VERSION = 1


def read_history_file(path: str | Path) -> dict[str, GameStats]:
    """Read and decode a history file, raising StorageReadError on any failure."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageReadError(f"Cannot read history file {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise StorageReadError(f"History file {path} is not valid JSON: {exc}") from exc
    return parse_history_dict(data)


def write_history_file(path: str | Path, games: Mapping[str, GameStats]) -> None:
    """Overwrite *path* with the serialized mapping."""
    target = Path(path)
    try:
        payload = json.dumps(dump_history_dict(games), ensure_ascii=False, indent=2)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(payload, encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        raise StorageWriteError(f"Cannot write history file {target}: {exc}") from exc


def dump_history_dict(games: Mapping[str, GameStats]) -> dict[str, Any]:
    return {
        "format": HISTORY_FORMAT,
        "version": HISTORY_VERSION,
        "games": {
            name: {
                "timesPlayed": stats.times_played,
                "scores": list(stats.scores),
                "lastPlayed": stats.last_played.isoformat() if stats.last_played else None,
            }
            for name, stats in games.items()
        },
    }


def parse_history_dict(data: Any) -> dict[str, GameStats]:
    """Convert a decoded document into stats objects, raising StorageReadError if invalid."""
    errors = validate_history_dict(data)
    if errors:
        raise StorageReadError(_format_errors("History validation failed", errors))
    games: dict[str, GameStats] = {}
    for name, entry in data["games"].items():
        last_played = entry.get("lastPlayed")
        games[name] = GameStats(
            times_played=entry["timesPlayed"],
            scores=list(entry["scores"]),
            last_played=datetime.fromisoformat(last_played) if last_played else None,
        )
    return games


def validate_history_dict(data: Any) -> list[str]:
    if not isinstance(data, dict):
        return ["History document must be a JSON object."]

    errors: list[str] = []
    if data.get("format") != HISTORY_FORMAT:
        errors.append(f"Unknown history format '{data.get('format')}'.")
    if data.get("version") != HISTORY_VERSION:
        errors.append(f"Unsupported history version '{data.get('version')}'.")

    games = data.get("games")
    if not isinstance(games, dict):
        errors.append("History must contain a 'games' object.")
        return errors

    for name, entry in games.items():
        if not name.strip():
            errors.append("Game names must be non-empty.")
        if not isinstance(entry, dict):
            errors.append(f"Game '{name}' must be an object.")
            continue

        times_played = entry.get("timesPlayed")
        if not _is_int(times_played) or times_played < 0:
            errors.append(f"Game '{name}' has invalid 'timesPlayed' value '{times_played}'.")
            times_played = None

        scores = entry.get("scores")
        if not isinstance(scores, list) or not all(_is_int(score) for score in scores):
            errors.append(f"Game '{name}' must define 'scores' as a list of integers.")
        elif times_played is not None and times_played < len(scores):
            errors.append(f"Game '{name}' has more scores than plays.")

        last_played = entry.get("lastPlayed")
        if last_played is not None:
            if not isinstance(last_played, str):
                errors.append(f"Game '{name}' 'lastPlayed' must be a string or null.")
            else:
                try:
                    datetime.fromisoformat(last_played)
                except ValueError:
                    errors.append(f"Game '{name}' has invalid 'lastPlayed' timestamp '{last_played}'.")

    return errors


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
