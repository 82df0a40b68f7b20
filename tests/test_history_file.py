from datetime import datetime, timezone

import pytest

from gamesuite.domain.exceptions import StorageReadError
from gamesuite.domain.stats import GameStats
from gamesuite.storage import dump_history_dict, parse_history_dict, validate_history_dict


def document(games):
    return {"format": "gamesuite.history", "version": 1, "games": games}


def test_validate_history_dict_accepts_valid_document():
    data = document(
        {
            "Word Guess": {"timesPlayed": 3, "scores": [9, 0], "lastPlayed": "2026-01-05T15:04:00+00:00"},
            "Snake": {"timesPlayed": 1, "scores": [], "lastPlayed": None},
        }
    )
    assert validate_history_dict(data) == []


def test_validate_history_dict_reports_schema_problems():
    data = document(
        {
            "A": {"timesPlayed": True, "scores": [], "lastPlayed": None},
            "B": {"timesPlayed": 1, "scores": ["7"], "lastPlayed": None},
            "C": {"timesPlayed": 0, "scores": [1], "lastPlayed": None},
            "D": {"timesPlayed": 1, "scores": [], "lastPlayed": "yesterday"},
            "E": [],
        }
    )
    errors = validate_history_dict(data)
    assert any("'A' has invalid 'timesPlayed'" in err for err in errors)
    assert any("'B' must define 'scores'" in err for err in errors)
    assert any("'C' has more scores than plays" in err for err in errors)
    assert any("'D' has invalid 'lastPlayed'" in err for err in errors)
    assert any("'E' must be an object" in err for err in errors)


def test_validate_history_dict_reports_missing_games():
    errors = validate_history_dict({"format": "gamesuite.history", "version": 1})
    assert errors == ["History must contain a 'games' object."]


def test_parse_history_dict_builds_stats():
    games = parse_history_dict(
        document({"Chess": {"timesPlayed": 2, "scores": [7], "lastPlayed": "2026-01-05T15:04:00+00:00"}})
    )
    assert games["Chess"] == GameStats(
        times_played=2,
        scores=[7],
        last_played=datetime(2026, 1, 5, 15, 4, tzinfo=timezone.utc),
    )


def test_parse_history_dict_raises_read_error():
    with pytest.raises(StorageReadError) as excinfo:
        parse_history_dict(document({"Chess": {"timesPlayed": -1, "scores": []}}))
    assert "History validation failed" in str(excinfo.value)


def test_dump_history_dict_writes_null_for_never_played():
    data = dump_history_dict({"Sudoku": GameStats()})
    assert data["games"]["Sudoku"] == {"timesPlayed": 0, "scores": [], "lastPlayed": None}
