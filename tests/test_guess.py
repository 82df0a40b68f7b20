import pytest

from gamesuite.domain.exceptions import InvalidGuess
from gamesuite.domain.guess import (
    common_letters,
    format_common_letters,
    is_valid_guess,
    normalize_guess,
    validate_guess,
)


@pytest.mark.parametrize("raw", ["apple", "APPLE", "  Apple\t", "crane\n"])
def test_is_valid_guess_accepts_five_letters(raw):
    assert is_valid_guess(raw)


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "appl3", "ap-le", "apples", "app", "ap le", "ÀPPLE", "12345", "appl!"],
)
def test_is_valid_guess_rejects_malformed_input(raw):
    assert not is_valid_guess(raw)


def test_is_valid_guess_honours_custom_length():
    assert is_valid_guess("planet", length=6)
    assert not is_valid_guess("apple", length=6)


def test_normalize_guess_trims_and_uppercases():
    assert normalize_guess("  mango \n") == "MANGO"


def test_validate_guess_explains_failure():
    assert validate_guess(" apple ") == "APPLE"
    with pytest.raises(InvalidGuess) as excinfo:
        validate_guess("app")
    assert "expected 5 letters" in excinfo.value.reason
    with pytest.raises(InvalidGuess) as excinfo:
        validate_guess("ap-le")
    assert excinfo.value.raw == "ap-le"


def test_common_letters_follow_secret_order():
    assert common_letters("APPLE", "LEMON") == ["L", "E"]
    assert format_common_letters("APPLE", "LEMON") == "L E"


def test_common_letters_deduplicates():
    assert common_letters("APPLE", "PUPPY") == ["P"]
    assert common_letters("APPLE", "PALEA") == ["A", "P", "L", "E"]


def test_common_letters_empty_renders_empty_string():
    assert common_letters("APPLE", "BRICK") == []
    assert format_common_letters("APPLE", "BRICK") == ""
