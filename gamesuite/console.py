"""Console input/output used by games and the menu."""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console


class ConsoleIO:
    """Implements GameIO over a text stream for input and a rich Console for output."""

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or Console()
        self._stream = stream

    def read_line(self, prompt: str = "") -> str:
        """Read exactly one line, without its line terminator.

        Raises EOFError when the stream is exhausted.
        """
        if prompt:
            self.console.print(prompt, end="", markup=False, highlight=False)
        stream = self._stream or sys.stdin
        line = stream.readline()
        if not line:
            raise EOFError("Input stream closed")
        return line.rstrip("\r\n")

    def write(self, text: str = "", *, style: str | None = None) -> None:
        self.console.print(text, style=style, markup=False, highlight=False)
