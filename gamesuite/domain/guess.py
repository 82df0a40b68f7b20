"""Guess normalization, validation, and letter feedback for word games."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Pattern

from .exceptions import InvalidGuess

WORD_LENGTH = 5


@lru_cache(maxsize=None)
def _pattern(length: int) -> Pattern[str]:
    return re.compile(f"[A-Z]{{{length}}}")


def normalize_guess(raw: str) -> str:
    """Trim surrounding whitespace and upper-case the guess."""
    return raw.strip().upper()


def is_valid_guess(raw: str, length: int = WORD_LENGTH) -> bool:
    """Return True when *raw* normalizes to exactly *length* letters A-Z.

    Digits, punctuation, embedded whitespace and non-ASCII letters are all
    rejected. Never raises for string input.
    """
    return _pattern(length).fullmatch(normalize_guess(raw)) is not None


def validate_guess(raw: str, length: int = WORD_LENGTH) -> str:
    """Return the normalized guess or raise InvalidGuess describing the problem."""
    guess = normalize_guess(raw)
    if len(guess) != length:
        raise InvalidGuess(raw, f"expected {length} letters, got {len(guess)}")
    if _pattern(length).fullmatch(guess) is None:
        raise InvalidGuess(raw, "only letters A-Z are allowed")
    return guess


def common_letters(secret: str, guess: str) -> list[str]:
    """Distinct letters found in both words, ordered by first position in *secret*."""
    in_guess = set(guess)
    seen: set[str] = set()
    result: list[str] = []
    for letter in secret:
        if letter in in_guess and letter not in seen:
            seen.add(letter)
            result.append(letter)
    return result


def format_common_letters(secret: str, guess: str) -> str:
    return " ".join(common_letters(secret, guess))


__all__ = [
    "WORD_LENGTH",
    "common_letters",
    "format_common_letters",
    "is_valid_guess",
    "normalize_guess",
    "validate_guess",
]
