"""Durable storage for gamesuite play history."""

from .json_file import (
    HISTORY_FORMAT,
    HISTORY_VERSION,
    dump_history_dict,
    parse_history_dict,
    read_history_file,
    validate_history_dict,
    write_history_file,
)

__all__ = [
    "HISTORY_FORMAT",
    "HISTORY_VERSION",
    "dump_history_dict",
    "parse_history_dict",
    "read_history_file",
    "validate_history_dict",
    "write_history_file",
]
