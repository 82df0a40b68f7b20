"""Load word lists for the word-guessing game from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..domain.guess import WORD_LENGTH, is_valid_guess, normalize_guess


def load_words_from_json(path: str | Path, length: int = WORD_LENGTH) -> tuple[str, ...]:
    """Load a word list from a JSON array or a ``{"words": [...]}`` object."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return parse_words(data, length)


def parse_words(data: Any, length: int = WORD_LENGTH) -> tuple[str, ...]:
    """Extract, validate and normalize words from decoded JSON."""
    words = _extract_words(data)
    if words is None:
        raise ValueError("Word list must be a JSON array or an object with a 'words' array.")
    errors = validate_word_list(words, length)
    if errors:
        raise ValueError(_format_errors("Word list validation failed", errors))
    return tuple(normalize_guess(word) for word in words)


def validate_words_file(path: str | Path, length: int = WORD_LENGTH) -> list[str]:
    """Validate a word list file and return a list of errors."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        return [f"Cannot read word list '{path}': {exc}"]
    except json.JSONDecodeError as exc:
        return [f"Word list '{path}' is not valid JSON: {exc}"]
    words = _extract_words(data)
    if words is None:
        return ["Word list must be a JSON array or an object with a 'words' array."]
    return validate_word_list(words, length)


def validate_word_list(words: Iterable[Any], length: int = WORD_LENGTH) -> list[str]:
    errors: list[str] = []
    seen: set[str] = set()
    count = 0
    for idx, word in enumerate(words, start=1):
        count += 1
        if not isinstance(word, str):
            errors.append(f"Word #{idx} must be a string.")
            continue
        if not is_valid_guess(word, length):
            errors.append(f"Word '{word}' must be exactly {length} letters A-Z.")
            continue
        normalized = normalize_guess(word)
        if normalized in seen:
            errors.append(f"Word '{normalized}' listed multiple times.")
        seen.add(normalized)
    if not count:
        errors.append("Word list must not be empty.")
    return errors


def _extract_words(data: Any) -> list[Any] | None:
    if isinstance(data, dict):
        data = data.get("words")
    if isinstance(data, list):
        return data
    return None


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
