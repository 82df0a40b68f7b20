"""Pytest fixtures for gamesuite."""

from __future__ import annotations

from pathlib import Path
from random import Random

import pytest

from ..app import SuiteApp
from ..config import GameSuiteConfig, HistoryConfig, WordGuessConfig
from .test_client import ScriptedIO


@pytest.fixture()
def suite_app(tmp_path: Path) -> SuiteApp:
    return app_fixture(tmp_path / "history.json")


def app_fixture(
    history_path: Path,
    *,
    lines: list[str] | None = None,
    secret: str | None = "APPLE",
    max_guesses: int = 10,
    seed: int = 0,
) -> SuiteApp:
    """Helper for ad-hoc tests where pytest fixtures are not convenient."""
    config = GameSuiteConfig(
        word_guess=WordGuessConfig(secret=secret, max_guesses=max_guesses),
        history=HistoryConfig(path=history_path),
        rng_seed=seed,
    )
    return SuiteApp(config, io=ScriptedIO(lines or []), rng=Random(seed))
