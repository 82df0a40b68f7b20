"""Loaders for declarative game data."""

from .json_loader import (
    load_words_from_json,
    parse_words,
    validate_word_list,
    validate_words_file,
)

__all__ = [
    "load_words_from_json",
    "parse_words",
    "validate_word_list",
    "validate_words_file",
]
