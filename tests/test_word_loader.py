import json
from pathlib import Path

import pytest

from gamesuite.domain.words import DEFAULT_WORDS
from gamesuite.loaders import load_words_from_json, parse_words, validate_word_list, validate_words_file
from gamesuite.testing import WordFactory


def test_load_words_from_json_array(tmp_path: Path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["crane", "Toast", "PIANO"]), encoding="utf-8")
    assert load_words_from_json(path) == ("CRANE", "TOAST", "PIANO")


def test_load_words_from_json_object(tmp_path: Path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"words": ["planet", "forest"]}), encoding="utf-8")
    assert load_words_from_json(path, length=6) == ("PLANET", "FOREST")


def test_parse_words_rejects_invalid_entries():
    with pytest.raises(ValueError) as excinfo:
        parse_words(["CRANE", "CR4NE", 12])
    message = str(excinfo.value)
    assert "Word list validation failed" in message
    assert "'CR4NE'" in message
    assert "Word #3 must be a string" in message


def test_parse_words_rejects_wrong_shape():
    with pytest.raises(ValueError):
        parse_words({"items": ["CRANE"]})


def test_validate_word_list_reports_duplicates_and_empty():
    assert any("multiple times" in err for err in validate_word_list(["crane", "CRANE"]))
    assert validate_word_list([]) == ["Word list must not be empty."]


def test_validate_words_file_reports_bad_json(tmp_path: Path):
    path = tmp_path / "words.json"
    path.write_text("[", encoding="utf-8")
    errors = validate_words_file(path)
    assert errors and "not valid JSON" in errors[0]


def test_generated_words_validate():
    words = list(WordFactory().batch(20))
    assert validate_word_list(words) == []


def test_builtin_words_validate():
    assert validate_word_list(DEFAULT_WORDS) == []
