"""Interactive menu calculator for sine, cosine, arcsine and arctangent.

Sine and cosine read their argument in degrees. Arcsine reads a value and
asks again until it lies in [-1, 1]. Arctangent reads any number. Results
are printed with five decimals.
"""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterator, TextIO

from snowcalc.snow import snow_arcsin, snow_arctan, snow_cos_degrees, snow_sin_degrees

MENU = (
    "-------Welcome to Snow Calculator-------",
    "               1. sin x                 ",
    "               2. cos x                 ",
    "               3. arcsin x              ",
    "               4. arctan x              ",
    "               5. Clean screen          ",
    "               0. to quit               ",
    "----------------------------------------",
)
CLEAR_SCREEN = "\033[2J\033[H"
PROMPT = "please input a number"
WRONG_TYPE = "Wrong, you have inputed a wrong type data\n"
AGAIN = "please input again"
OUT_OF_RANGE = "输入错误，请重新输入:"
WRONG_CHOICE = "Wrong input, please input again!"
FAREWELL = "Thank you for using!\nPress any key to exit.\n"


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._lines: Iterator[str] = iter(stream)
        self._pending: list[str] = []

    def next(self) -> str | None:
        """Return the next token, or None at end of input."""
        while not self._pending:
            line = next(self._lines, None)
            if line is None:
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    def drop_line(self) -> None:
        """Forget what is left of the current line."""
        self._pending = []


def _parse_number(token: str) -> float | None:
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


class _Session:
    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self.tokens = _Tokens(stream)
        self.out = out
        # After the first result the output stays in fixed five-decimal form.
        self.fixed = False

    def say(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def fmt(self, value: float) -> str:
        return f"{value:.5f}" if self.fixed else f"{value:g}"

    def select(self) -> int:
        for line in MENU:
            self.say(line)
        token = self.tokens.next()
        if token is None:
            return 0
        try:
            return int(token)
        except ValueError:
            return 0

    def read_number(self) -> float | None:
        """Prompt for a number, asking again after malformed input."""
        self.say(PROMPT)
        while True:
            token = self.tokens.next()
            if token is None:
                return None
            value = _parse_number(token)
            if value is not None:
                break
            self.say(WRONG_TYPE)
            self.tokens.drop_line()
            self.say(AGAIN)
        self.say(f"The number x is: {self.fmt(value)}")
        return value

    def read_unit_value(self) -> float | None:
        value = self.read_number()
        while value is not None and (value > 1 or value < -1):
            self.say(OUT_OF_RANGE)
            token = self.tokens.next()
            if token is None:
                return None
            parsed = _parse_number(token)
            if parsed is not None:
                value = parsed
        return value

    def read_plain(self) -> float | None:
        self.say(PROMPT)
        while True:
            token = self.tokens.next()
            if token is None:
                return None
            value = _parse_number(token)
            if value is not None:
                return value

    def show(self, result: float) -> None:
        self.fixed = True
        self.say(f"Result =  {result:.5f}")

    def step(self, choice: int) -> bool:
        """Handle one menu choice; return False when input has run out."""
        if choice == 1:
            x = self.read_number()
            if x is None:
                return False
            self.show(snow_sin_degrees(x))
        elif choice == 2:
            x = self.read_number()
            if x is None:
                return False
            self.show(snow_cos_degrees(x))
        elif choice == 3:
            x = self.read_unit_value()
            if x is None:
                return False
            self.show(snow_arcsin(x))
        elif choice == 4:
            x = self.read_plain()
            if x is None:
                return False
            self.show(snow_arctan(x))
        elif choice == 5:
            self.out.write(CLEAR_SCREEN)
        else:
            self.say(WRONG_CHOICE)
        return True


def run(stream: TextIO, out: TextIO) -> int:
    """Run the menu loop reading from ``stream`` and writing to ``out``."""
    session = _Session(stream, out)
    choice = session.select()
    while choice != 0:
        if not session.step(choice):
            break
        choice = session.select()
    out.write(FAREWELL)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive calculator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="snowcalc",
        description="Menu calculator for sin, cos, arcsin and arctan.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())