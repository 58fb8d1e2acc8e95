"""Trigonometric functions computed from their Maclaurin series.

Each ``fn_*`` function takes a ``degrees`` flag. For ``fn_sin`` and ``fn_cos``
it says whether the argument is in degrees. For ``fn_arcsin`` and ``fn_arctan``
it says whether the result is given in degrees.
"""

from __future__ import annotations

# Sine and cosine use a coarser value of pi than arcsine does.
PI_TRIG = 3.1415926
PI_ARCSIN = 3.1415926535898
PI_ARCTAN = 3.1415926

DEFAULT_TRIG_PRECISION = 0.0000001
DEFAULT_ARCSIN_PRECISION = 0.000000001
DEFAULT_ARCTAN_PRECISION = 0.00001


def _snap_to_zero(value: float, precision: float) -> float:
    """Return 0.0 for values smaller than the precision, so -0.0 never shows."""
    return 0.0 if -precision < value < precision else value


def fmod(dividend: float, divisor: float) -> float:
    """Floating remainder that shifts by the divisor when the signs differ.

    A zero divisor gives 0.0 instead of raising.
    """
    if divisor == 0.0:
        return 0.0
    quotient = float(int(dividend / divisor))
    remainder = dividend - quotient * divisor
    if (dividend < 0.0) != (divisor < 0.0):
        remainder -= divisor
    return remainder


def _reduce(degrees: bool, x: float) -> float:
    """Bring the argument into one period and express it in radians."""
    if degrees:
        return fmod(x, 360) / 180 * PI_TRIG
    return fmod(x, 2 * PI_TRIG)


def _maclaurin(x: float, start: float, coefficient: float,
               odd_terms: bool, precision: float) -> float:
    """Sum the sine (odd powers) or cosine (even powers) series at ``x``."""
    total = start
    numerator = 1.0
    denominator = 1.0
    i = 1
    current = numerator / denominator
    while abs(current) >= precision:
        numerator *= x
        denominator *= i
        if (i % 2 == 1) == odd_terms:
            coefficient = -coefficient
            total += coefficient * numerator / denominator
        i += 1
        current = numerator / denominator
    return total


def fn_sin(degrees: bool, x: float,
           precision: float = DEFAULT_TRIG_PRECISION) -> float:
    """Sine of ``x``, taken in degrees when ``degrees`` is true."""
    radians = _reduce(degrees, x)
    total = _maclaurin(radians, 0.0, -1.0, True, precision)
    return _snap_to_zero(total, precision)


def fn_cos(degrees: bool, x: float,
           precision: float = DEFAULT_TRIG_PRECISION) -> float:
    """Cosine of ``x``, taken in degrees when ``degrees`` is true."""
    radians = _reduce(degrees, x)
    total = _maclaurin(radians, 1.0, 1.0, False, precision)
    return _snap_to_zero(total, precision)


def fn_arcsin(degrees: bool, x: float,
              precision: float = DEFAULT_ARCSIN_PRECISION) -> float:
    """Arcsine of ``x`` in radians, or in degrees when ``degrees`` is true.

    Raises ValueError when ``x`` lies outside [-1, 1], where the series
    does not converge.
    """
    if x > 1 or x < -1:
        raise ValueError(f"arcsin is defined only on [-1, 1], got {x}")
    total = x
    square = x * x
    term = x
    m = 1
    while abs(term) >= precision:
        double_m = 2.0 * m
        term *= (1 + 1.0 / double_m - 4.0 / (double_m + 1)) * square
        total += term
        m += 1
    total = _snap_to_zero(total, precision)
    if degrees:
        total = total * 180 / PI_ARCSIN
    return total


def arctan_series(x: float, precision: float = DEFAULT_ARCTAN_PRECISION) -> float:
    """Arctangent of ``x`` in radians from its series; ``x`` must be in [-1, 1]."""
    if x > 1 or x < -1:
        raise ValueError(f"the arctan series converges only on [-1, 1], got {x}")
    square = x * x
    power = x
    total = 0.0
    i = 1
    term = power / i
    while abs(term) > precision:
        term = power / i
        total = total + term if i % 4 == 1 else total - term
        power *= square
        i += 2
    return total


def fn_arctan(degrees: bool, x: float,
              precision: float = DEFAULT_ARCTAN_PRECISION) -> float:
    """Arctangent of any real ``x``, in degrees when ``degrees`` is true."""
    if -1 <= x <= 1:
        result = arctan_series(x, precision)
    elif x > 0:
        result = PI_ARCTAN / 2 - arctan_series(1 / x, precision)
    else:
        result = -PI_ARCTAN / 2 - arctan_series(1 / x, precision)
    if degrees:
        result = result * 180 / PI_ARCTAN
    return result