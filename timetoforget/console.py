"""Terminal output with colours and typewriter delays, and number input."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from collections import deque
from enum import IntEnum
from typing import Callable, Optional, TextIO

INVALID_NUMBER_MESSAGE = "Escribe un valor valido porfavor"


class Color(IntEnum):
    """Console text colours."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    RED = 4
    DEFAULT_WHITE = 7


class TextSpeed(IntEnum):
    """Delay per character in milliseconds."""

    FAST = 50
    MEDIUM = 100
    SLOW = 150


_ANSI_CODES = {
    Color.BLACK: 30,
    Color.BLUE: 34,
    Color.GREEN: 32,
    Color.RED: 31,
    Color.DEFAULT_WHITE: 37,
}


class Console:
    """Reads from and writes to a pair of text streams."""

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clear: Optional[Callable[[], None]] = None,
        ansi: bool = True,
    ) -> None:
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout
        self._sleep = sleep
        self._clear = clear
        self.ansi = ansi
        self._pending: deque[str] = deque()

    def print_text(
        self, text: str, color: int = Color.DEFAULT_WHITE, delay_ms: int = 0
    ) -> None:
        """Write ``text`` in ``color``, pausing ``delay_ms`` after each character."""
        if self.ansi:
            self._output.write(f"\x1b[{_ANSI_CODES[Color(color)]}m")
        for character in text:
            self._output.write(character)
            self._output.flush()
            if delay_ms > 0:
                self._sleep(delay_ms / 1000)

    def print_line(
        self, text: str, color: int = Color.DEFAULT_WHITE, delay_ms: int = 0
    ) -> None:
        """Like ``print_text``, followed by a newline."""
        self.print_text(text, color, delay_ms)
        self.new_line()

    def new_line(self) -> None:
        """Write a newline."""
        self._output.write("\n")
        self._output.flush()

    def clear_screen(self) -> None:
        """Clear the terminal."""
        if self._clear is not None:
            self._clear()
            return
        command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
        try:
            subprocess.run(command, check=False)
        except FileNotFoundError:
            self._output.write("\x1b[2J\x1b[H")
            self._output.flush()

    def wait_for_input(self, prompt: str) -> None:
        """Show ``prompt``, wait for a line of input, then clear the screen."""
        self.print_line(prompt, Color.DEFAULT_WHITE, 1)
        self._pending.clear()
        self._input.readline()
        self.clear_screen()

    def read_int(self, minimum: int, maximum: int) -> int:
        """Read whitespace-separated tokens until one is an integer in range.

        A token that is not an integer discards the rest of its line and
        prints a complaint; an integer out of range is skipped silently.
        Raises ``EOFError`` when the input runs out.
        """
        while True:
            token = self._next_token()
            try:
                value = int(token)
            except ValueError:
                self._pending.clear()
                self._output.write(INVALID_NUMBER_MESSAGE + "\n")
                self._output.flush()
                continue
            if minimum <= value <= maximum:
                return value

    def _next_token(self) -> str:
        while not self._pending:
            line = self._input.readline()
            if line == "":
                raise EOFError("input ended")
            self._pending.extend(line.split())
        return self._pending.popleft()