"""gamesuite public API."""

from .domain import GameStats, HistoryStore, WordGuessGame, WordGuessSession
from .app import SuiteApp
from .config import GameSuiteConfig
from .registry import Game, GameIO, GameRegistry

__all__ = [
    "Game",
    "GameIO",
    "GameRegistry",
    "GameStats",
    "GameSuiteConfig",
    "HistoryStore",
    "SuiteApp",
    "WordGuessGame",
    "WordGuessSession",
]
