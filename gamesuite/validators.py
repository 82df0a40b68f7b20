"""Validation utilities for gamesuite configuration."""

from __future__ import annotations

from .config import ALLOWED_MAX_GUESSES, GameSuiteConfig
from .domain.guess import is_valid_guess
from .loaders import validate_words_file


def validate_config(config: GameSuiteConfig) -> list[str]:
    """Return list of validation errors discovered in the configuration."""
    errors: list[str] = []
    word_guess = config.word_guess

    if word_guess.max_guesses not in ALLOWED_MAX_GUESSES:
        allowed = ", ".join(str(value) for value in ALLOWED_MAX_GUESSES)
        errors.append(
            f"Word guess 'max_guesses' must be one of {allowed}, got {word_guess.max_guesses}."
        )

    length_ok = word_guess.word_length >= 1
    if not length_ok:
        errors.append(f"Word guess 'word_length' must be positive, got {word_guess.word_length}.")

    if word_guess.secret is not None and length_ok:
        if not is_valid_guess(word_guess.secret, word_guess.word_length):
            errors.append(
                f"Configured secret must be exactly {word_guess.word_length} letters A-Z."
            )

    if word_guess.words_file is not None and length_ok:
        if not word_guess.words_file.exists():
            errors.append(f"Word list file '{word_guess.words_file}' not found.")
        else:
            errors.extend(validate_words_file(word_guess.words_file, word_guess.word_length))
    elif word_guess.word_length != 5 and word_guess.secret is None and length_ok:
        errors.append(
            "A custom 'word_length' requires a words file or a secret; the built-in list has 5-letter words."
        )

    if config.history.path.exists() and config.history.path.is_dir():
        errors.append(f"History path '{config.history.path}' is a directory.")

    return errors


__all__ = ["validate_config"]
