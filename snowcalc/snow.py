"""Series-based trigonometry with angle reduction done on the input.

``snow_sin``, ``snow_cos`` and ``snow_arctan`` work on radians. The
``*_degrees`` variants reduce a degree value below 360 and convert it first.
``snow_cos`` is derived from the sine, so it always returns a non-negative
value.
"""

from __future__ import annotations

import math
import struct

PI = 3.1415926

_SIN_TOLERANCE = 1e-15
_ARCTAN_TOLERANCE = 1e-7
_ARCSIN_TERMS = 1000

# Coefficients of the odd polynomial in x*x used by ``snow_arcsin_poly``,
# highest power first.
_ARCSIN_POLY = (
    355.8344664968055,
    -1527.866163211568,
    2753.832624036205,
    -2703.664106042975,
    1570.005944165283,
    -547.8511412592482,
    111.6022805454461,
    -12.131229199997044,
    0.767998895934955,
    0.991408990431597,
)


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def to_radians(x: float) -> float:
    """Reduce a degree value below 360 and convert it to radians.

    Only values of 360 or more are reduced; negative values are kept as they are.
    """
    while x >= 360.0:
        x -= 360.0
    return x * PI / 180.0


def factorial(n: float) -> float:
    """Product n * (n - 1) * ... down to the first factor not above 1.

    Values of ``n`` not above 1 are returned unchanged, so ``factorial(0)``
    is 0.
    """
    result = 1.0
    while n > 1:
        result *= n
        n -= 1
    return result * n


def snow_sin(x: float) -> float:
    """Sine of ``x`` radians from its Taylor series."""
    total = x
    power = x
    denominator = 1.0
    sign = 1
    i = 1
    while True:
        denominator *= (i + 1) * (i + 2)
        power *= x * x
        sign = -sign
        term = power / denominator * sign
        total += term
        i += 2
        if abs(term) <= _SIN_TOLERANCE:
            return total


def _cos_from_sin(sine: float) -> float:
    return math.sqrt(max(0.0, 1.0 - sine * sine))


def snow_cos(x: float) -> float:
    """Magnitude of the cosine of ``x`` radians, as sqrt(1 - sin(x)**2)."""
    return _cos_from_sin(snow_sin(x))


def snow_sin_degrees(x: float) -> float:
    """Sine of ``x`` degrees."""
    return snow_sin(to_radians(x))


def snow_cos_degrees(x: float) -> float:
    """Magnitude of the cosine of ``x`` degrees."""
    return _cos_from_sin(snow_sin_degrees(x))


def snow_arcsin(x: float) -> float:
    """Series approximation of arcsin in single precision.

    Inputs on or outside the bounds -1 and 1 give 0.0. Accuracy drops as
    ``|x|`` approaches 1.
    """
    x = _f32(x)
    if x <= -1 or x >= 1:
        return 0.0
    result = x
    product = 1.0
    k = 0
    for i in range(_ARCSIN_TERMS):
        while k < 2 * i + 1:
            factor = _f32(float(2 * k + 1) / float(2 * k + 2))
            product = _f32(product * factor)
            k += 1
        coefficient = _f32(product / float(2 * i + 3))
        result = _f32(result + _f32(coefficient * x))
    return result


def snow_arcsin_poly(x: float) -> float:
    """Arcsin of ``x`` in radians from a fitted polynomial.

    Exactly 1 gives pi/2; anything else outside (-1, 1) gives -pi/2.
    """
    if -1 < x < 1:
        square = x * x
        acc = 0.0
        for coefficient in _ARCSIN_POLY:
            acc = acc * square + coefficient
        return acc * x
    if x == 1:
        return PI / 2
    return -(PI / 2)


def snow_arctan(x: float) -> float:
    """Arctangent of ``x`` in radians.

    Values in [-1, 1] use the series directly; larger ones use
    arctan(x) = ±pi/2 - arctan(1/x).
    """
    square = x * x
    e = x
    total = 0.0
    i = 1
    if -1 <= e <= 1:
        while abs(e / i) > _ARCTAN_TOLERANCE:
            term = e / i
            total = total + term if i % 4 == 1 else total - term
            e *= square
            i += 2
    if e <= -1 or e >= 1:
        e = 1 / e
        h = e * e
        while abs(e / i) > _ARCTAN_TOLERANCE:
            term = e / i
            total = total + term if i % 4 == 1 else total - term
            e *= h
            i += 2
        total = PI / 2 - total if e > 0 else -PI / 2 - total
    return total