"""State machine behind the calculator's button panel.

The panel starts with only the function buttons usable. Choosing a function
unlocks the digit and dot buttons and locks the other functions. Digits build
up the argument, at most six before and six after the decimal point.
``evaluate`` shows the expression and its value. Sine and cosine take their
argument in degrees.
"""

from __future__ import annotations

import enum

from snowcalc.snow import (
    snow_arcsin_poly,
    snow_arctan,
    snow_cos_degrees,
    snow_sin_degrees,
)

MAX_DIGITS = 6
TOO_MANY_DECIMALS = "输入最小精度为0.000001，请重新输入！"
TOO_MANY_DIGITS = "输入最大为6位，请重新输入！"


class Function(enum.Enum):
    """The functions offered on the panel, valued by their display label."""

    SIN = "sin"
    COS = "cos"
    ARCSIN = "arcsin"
    ARCTAN = "arctan"


class Keypad:
    """Button-driven entry of one argument and evaluation of one function."""

    def __init__(self) -> None:
        self.function: Function | None = None
        self.value = 0.0
        self.display = ""
        self.digits_enabled = False
        self.enabled_functions: set[Function] = set(Function)
        self._label = ""
        self._after_dot = False
        self._int_digits = 0
        self._dot_digits = 0

    def choose(self, function: Function) -> str:
        """Select a function; choosing the current one again clears the value."""
        function = Function(function)
        if function not in self.enabled_functions:
            raise RuntimeError(f"the {function.value} button is disabled")
        self.digits_enabled = True
        self._after_dot = False
        self._dot_digits = 0
        if self._label == function.value:
            self.value = 0.0
        self._label = function.value
        self.enabled_functions = {function}
        self.function = function
        self.display = self._label
        return self.display

    def press_digit(self, digit: int) -> str:
        """Append a digit to the argument and return the new display text.

        Raises ValueError, after resetting the panel, when more than six
        integer or six decimal digits have been entered.
        """
        if not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"not a decimal digit: {digit!r}")
        if not self.digits_enabled:
            raise RuntimeError("choose a function before entering digits")
        if self._after_dot:
            self._dot_digits += 1
            step = float(digit)
            for _ in range(self._dot_digits):
                step *= 0.1
            self.value += step
        else:
            self.value = self.value * 10 + digit
            self._int_digits += 1
        self.display = self._label + f"{self.value:f}"

        if self._dot_digits > MAX_DIGITS:
            self._reject(TOO_MANY_DECIMALS)
        if self._int_digits > MAX_DIGITS:
            self._reject(TOO_MANY_DIGITS)
        return self.display

    def press_dot(self) -> None:
        """Switch digit entry to the fractional part."""
        if not self.digits_enabled:
            raise RuntimeError("choose a function before entering a point")
        self._after_dot = True

    def back(self) -> None:
        """Unlock all functions, lock the digits and zero the argument."""
        self.enabled_functions = set(Function)
        self.digits_enabled = False
        self.value = 0.0
        self._int_digits = 0
        self._dot_digits = 0

    def clear(self) -> str:
        """Reset the display text, the argument and the digit counters."""
        self._label = ""
        self.value = 0.0
        self._after_dot = False
        self._int_digits = 0
        self._dot_digits = 0
        self.display = ""
        return self.display

    def evaluate(self) -> str:
        """Compute the chosen function and show ``label + x = result``.

        Raises ValueError, after resetting the panel, for an arcsine argument
        outside [-1, 1].
        """
        self._after_dot = False
        self._int_digits = 0
        self._dot_digits = 0
        if self.function is None:
            return self.display
        x = self.value
        if self.function is Function.SIN:
            result = snow_sin_degrees(x)
        elif self.function is Function.COS:
            result = snow_cos_degrees(x)
        elif self.function is Function.ARCSIN:
            if x < -1 or x > 1:
                self.clear()
                self.back()
                raise ValueError(f"arcsin is defined only on [-1, 1], got {x:f}")
            result = snow_arcsin_poly(x)
        else:
            result = snow_arctan(x)
        self.display = f"{self._label}{x:f}={result:f}"
        return self.display

    def _reject(self, message: str) -> None:
        self.clear()
        self.back()
        self.display = message
        raise ValueError(message)