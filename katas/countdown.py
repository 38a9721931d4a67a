"""A countdown that ends with "Go!"."""

import sys
import time
from collections.abc import Callable
from typing import TextIO

FINAL_WORD = "Go!"
COUNTDOWN_START = 3


def countdown(out: TextIO, sleep: Callable[[float], None] | None = None) -> None:
    """Write 3, 2, 1 to ``out``, pausing a second after each, then "Go!"."""
    pause = sleep if sleep is not None else time.sleep
    for i in range(COUNTDOWN_START, 0, -1):
        out.write(f"{i}\n")
        pause(1)
    out.write(FINAL_WORD)


def main(argv: list[str] | None = None) -> None:
    """Run the countdown on standard output."""
    countdown(sys.stdout)