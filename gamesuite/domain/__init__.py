"""Domain models and services."""

from .exceptions import (
    GameSuiteError,
    InvalidGuess,
    SessionFinished,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from .guess import common_letters, format_common_letters, is_valid_guess, normalize_guess, validate_guess
from .stats import GameStats
from .history import HistoryStore
from .word_guess import GuessKind, GuessResult, SessionState, WordGuessGame, WordGuessSession
from .placeholders import SnakeGame, SudokuGame
from .words import DEFAULT_WORDS

__all__ = [
    "DEFAULT_WORDS",
    "GameStats",
    "GameSuiteError",
    "GuessKind",
    "GuessResult",
    "HistoryStore",
    "InvalidGuess",
    "SessionFinished",
    "SessionState",
    "SnakeGame",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "SudokuGame",
    "WordGuessGame",
    "WordGuessSession",
    "common_letters",
    "format_common_letters",
    "is_valid_guess",
    "normalize_guess",
    "validate_guess",
]
