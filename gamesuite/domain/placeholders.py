"""Placeholder games that introduce themselves and report no score."""

from __future__ import annotations

from ..registry import GameIO


class SnakeGame:
    """Classic Snake: steer a growing snake around a grid collecting food."""

    game_id = "snake"
    name = "Snake"
    description = "Collect food to grow your snake without hitting yourself or the edge."
    command: str | None = "snake"
    aliases: tuple[str, ...] = ()

    def __init__(self, io: GameIO) -> None:
        self._io = io

    def play(self) -> int | None:
        self._io.write("Welcome, you are now playing Snake", style="bold")
        self._io.write("Collect food to grow your snake")
        self._io.write("But be careful!")
        self._io.write("If you run into yourself or the edge of the grid, you lose!")
        self._io.write("Have fun!!!")
        return None


class SudokuGame:
    """Number placement on a 9x9 grid."""

    game_id = "sudoku"
    name = "Sudoku"
    description = "Fill the 9x9 grid so every row, column and 3x3 box holds 1-9."
    command: str | None = "sudoku"
    aliases: tuple[str, ...] = ()

    def __init__(self, io: GameIO) -> None:
        self._io = io

    def play(self) -> int | None:
        self._io.write("[Playing Sudoku - Placeholder]", style="bold")
        self._io.write("Welcome to Sudoku!")
        self._io.write("Fill the grid with digits 1 to 9")
        self._io.write("so that each column, row and 3x3 subgrid contains all digits without repetition.")
        return None
