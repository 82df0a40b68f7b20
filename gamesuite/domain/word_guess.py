"""Word-guessing game: a session state machine and its console driver.

The player has a limited number of attempts to guess a secret five-letter
word. Invalid guesses (wrong length, digits, punctuation) are rejected
without costing an attempt. After each wrong guess the letters the guess
shares with the secret are shown, ordered as they appear in the secret.
The score is the number of attempts left going into the winning round, or
0 when every attempt is used up.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Sequence

from ..formatting import LOSE_BANNER, WIN_BANNER
from ..registry import GameIO
from .exceptions import SessionFinished
from .guess import WORD_LENGTH, common_letters, is_valid_guess, normalize_guess
from .words import DEFAULT_WORDS

logger = logging.getLogger(__name__)

MAX_GUESSES = 10


class SessionState(str, Enum):
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    LOST = "lost"


class GuessKind(str, Enum):
    INVALID = "invalid"
    INCORRECT = "incorrect"
    CORRECT = "correct"


@dataclass(frozen=True, slots=True)
class GuessResult:
    kind: GuessKind
    guess: str
    state: SessionState
    attempts_remaining: int
    guesses_made: int
    common: tuple[str, ...] = ()

    @property
    def feedback(self) -> str:
        return " ".join(self.common)


class WordGuessSession:
    """One play-through against a fixed secret. Performs no I/O."""

    def __init__(
        self,
        secret: str,
        *,
        max_guesses: int = MAX_GUESSES,
        word_length: int = WORD_LENGTH,
    ) -> None:
        if max_guesses <= 0:
            raise ValueError("max_guesses must be positive")
        if not is_valid_guess(secret, word_length):
            raise ValueError(f"Secret must be exactly {word_length} letters A-Z")
        self.secret = normalize_guess(secret)
        self.max_guesses = max_guesses
        self.word_length = word_length
        self.attempts_remaining = max_guesses
        self.state = SessionState.AWAITING_GUESS
        self._score: int | None = None

    @property
    def guesses_made(self) -> int:
        return self.max_guesses - self.attempts_remaining

    @property
    def is_over(self) -> bool:
        return self.state is not SessionState.AWAITING_GUESS

    @property
    def score(self) -> int | None:
        """Attempts left going into the winning round, 0 on a loss, None while pending."""
        return self._score

    def submit(self, raw: str) -> GuessResult:
        if self.is_over:
            raise SessionFinished(f"Session already ended ({self.state.value})")

        guess = normalize_guess(raw)
        if not is_valid_guess(guess, self.word_length):
            return self._result(GuessKind.INVALID, guess)

        if guess == self.secret:
            self.state = SessionState.WON
            self._score = self.attempts_remaining
            return self._result(GuessKind.CORRECT, guess)

        self.attempts_remaining -= 1
        if self.attempts_remaining == 0:
            self.state = SessionState.LOST
            self._score = 0
        return self._result(
            GuessKind.INCORRECT,
            guess,
            common=tuple(common_letters(self.secret, guess)),
        )

    def _result(self, kind: GuessKind, guess: str, common: tuple[str, ...] = ()) -> GuessResult:
        return GuessResult(
            kind=kind,
            guess=guess,
            state=self.state,
            attempts_remaining=self.attempts_remaining,
            guesses_made=self.guesses_made,
            common=common,
        )


class WordGuessGame:
    """Console word-guessing game implementing the Game protocol."""

    game_id = "word-guess"
    name = "Word Guess"
    description = "Guess the secret five-letter word in a limited number of attempts."
    command: str | None = "word"
    aliases: tuple[str, ...] = ("wordguess", "wg")

    def __init__(
        self,
        io: GameIO,
        *,
        words: Sequence[str] = DEFAULT_WORDS,
        secret: str | None = None,
        max_guesses: int = MAX_GUESSES,
        word_length: int = WORD_LENGTH,
        rng: Random | None = None,
    ) -> None:
        if max_guesses <= 0:
            raise ValueError("max_guesses must be positive")
        if secret is not None and not is_valid_guess(secret, word_length):
            raise ValueError(f"Secret must be exactly {word_length} letters A-Z")
        if secret is None:
            if not words:
                raise ValueError("Word list must not be empty")
            bad = [word for word in words if not is_valid_guess(word, word_length)]
            if bad:
                raise ValueError(
                    f"Word list contains entries that are not {word_length} letters A-Z: {', '.join(bad)}"
                )
        self._io = io
        self._words = tuple(normalize_guess(word) for word in words)
        self._secret = normalize_guess(secret) if secret is not None else None
        self.max_guesses = max_guesses
        self.word_length = word_length
        self._rng = rng or Random()

    def new_session(self) -> WordGuessSession:
        secret = self._secret or self._rng.choice(self._words)
        return WordGuessSession(secret, max_guesses=self.max_guesses, word_length=self.word_length)

    def play(self) -> int:
        self._print_intro()
        session = self.new_session()
        logger.info("Word Guess session started (%s attempts).", self.max_guesses)

        while not session.is_over:
            result = session.submit(self._io.read_line("Guess the word: "))
            logger.debug("Guess %r -> %s", result.guess, result.kind.value)

            if result.kind is GuessKind.INVALID:
                self._io.write(
                    f"Please enter exactly {self.word_length} letters A-Z only (no punctuation).",
                    style="yellow",
                )
            elif result.kind is GuessKind.CORRECT:
                self._io.write(WIN_BANNER, style="bold green")
            elif result.state is SessionState.LOST:
                self._io.write(
                    f"You're out of guesses. You lose. The word was {session.secret}."
                )
                self._io.write(LOSE_BANNER, style="bold red")
            else:
                self._io.write(f"Incorrect guess. Letters in common: {result.feedback}")
                self._io.write(f"Guesses made: {result.guesses_made}/{self.max_guesses}")

        score = session.score
        logger.info("Word Guess session finished: %s, score %s.", session.state.value, score)
        return score if score is not None else 0

    def _print_intro(self) -> None:
        self._io.write(
            f"[Playing {self.name} - You will have {self.max_guesses} attempts]", style="bold"
        )
        self._io.write(f"to guess a secret {self.word_length} letter word.")
        self._io.write("After each guess, the game will indicate whether the guess is correct.")
        self._io.write("Your score is the number of attempts remaining after a correct guess.")


__all__ = [
    "MAX_GUESSES",
    "GuessKind",
    "GuessResult",
    "SessionState",
    "WordGuessGame",
    "WordGuessSession",
]
