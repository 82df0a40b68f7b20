"""Exceptions raised by gamesuite domain services."""


class GameSuiteError(RuntimeError):
    """Base class for domain exceptions."""


class InvalidGuess(GameSuiteError):
    """Raised when a guess is not exactly the expected number of A-Z letters."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"Invalid guess {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


class SessionFinished(GameSuiteError):
    """Raised when a guess is submitted to a session that already ended."""


class StorageError(GameSuiteError):
    """Base class for history persistence failures."""


class StorageReadError(StorageError):
    """Raised when a history file cannot be read or decoded."""


class StorageWriteError(StorageError):
    """Raised when a history file cannot be written."""
