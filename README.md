# snowcalc

Trigonometric functions computed from their power series, a state machine
for a digit-by-digit keypad calculator, and an interactive text menu.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Series functions: `snowcalc.series`

These functions sum Maclaurin series until a term drops below the given
precision. The first argument is a `degrees` flag. For `fn_sin` and `fn_cos`
it says the input is in degrees. For `fn_arcsin` and `fn_arctan` it says the
result is returned in degrees.

```python
from snowcalc.series import fn_sin, fn_cos, fn_arcsin, fn_arctan, fmod

fn_sin(True, 30, 1e-7)       # about 0.5
fn_cos(False, 0.0, 1e-7)     # 1.0
fn_arcsin(True, 0.5, 1e-9)   # about 30 (degrees)
fn_arctan(False, 1.0, 1e-5)  # about 0.785
fmod(370, 360)               # 10.0
```

- `fmod(dividend, divisor)` gives a floating-point remainder. When the two
  operands have different signs, the result is shifted by the divisor. A zero
  divisor gives `0.0`.
- `fn_sin` and `fn_cos` reduce their argument to one period first. Results
  smaller than the precision come back as `0.0`.
- `fn_arcsin` raises `ValueError` for inputs outside [-1, 1].
- `arctan_series(x, precision)` is the raw series. It raises `ValueError`
  outside [-1, 1]. `fn_arctan` accepts any real number, using
  ±π/2 − arctan(1/x) when |x| > 1.

The precision arguments have defaults: 1e-7 for sine and cosine, 1e-9 for
arcsine and 1e-5 for arctangent.

## Taylor helpers: `snowcalc.snow`

```python
from snowcalc.snow import to_radians, snow_sin, snow_cos, snow_arctan

snow_sin(to_radians(90))     # about 1.0
snow_cos(to_radians(0))      # 1.0
snow_arctan(1.0)             # about 0.785
```

- `to_radians(x)` subtracts 360 while `x >= 360`, then converts to radians.
  Negative values are not reduced.
- `snow_sin(x)` and `snow_cos(x)` take radians. `snow_cos` is computed as
  `sqrt(1 - sin(x)**2)`, so it never returns a negative value.
- `snow_sin_degrees(x)` and `snow_cos_degrees(x)` do the same for degrees.
- `snow_arcsin(x)` is a series evaluated in single precision. Inputs on or
  outside ±1 give `0.0`, and accuracy falls off as |x| approaches 1.
- `snow_arcsin_poly(x)` is a fitted polynomial on (-1, 1). Exactly 1 gives
  π/2, and any other input outside that interval gives −π/2.
- `snow_arctan(x)` works for any real number.
- `factorial(n)` returns n·(n−1)·… and stops at the first factor not above 1.
  Inputs not above 1 are returned unchanged.

## Keypad calculator: `snowcalc.keypad`

`Keypad` models a button panel. You choose a `Function` (`SIN`, `COS`,
`ARCSIN`, `ARCTAN`) first, then enter the argument digit by digit:

```python
from snowcalc.keypad import Function, Keypad

pad = Keypad()
pad.choose(Function.SIN)
pad.press_digit(3)
pad.press_digit(0)
print(pad.evaluate())        # "sin30.000000=0.500000" (approximately)
```

- Before a function is chosen, the digit buttons are disabled:
  `press_digit` and `press_dot` raise `RuntimeError`. After a choice, the other
  functions are locked, and choosing one of them raises `RuntimeError`.
- `press_dot()` switches entry to the fractional part.
- More than six integer digits or six decimal places resets the panel and
  raises `ValueError`.
- `back()` unlocks all functions, locks the digits and zeroes the argument.
- `clear()` resets the display, the argument and the counters.
- `evaluate()` returns `label + x = result`.
  - Sine and cosine take the argument in degrees, and cosine is returned as a
    magnitude.
  - Arcsine uses `snow_arcsin_poly`. An arcsine argument outside [-1, 1]
    resets the panel and raises `ValueError`.

The panel state is available as `function`, `value`, `display`,
`digits_enabled` and `enabled_functions`.

## Command line

```
snowcalc
```

This starts a text menu on standard input and output:

| Entry | Action |
|-------|--------|
| 1 | sin (argument in degrees) |
| 2 | cos (argument in degrees) |
| 3 | arcsin (asks again until the value lies in [-1, 1]) |
| 4 | arctan |
| 5 | clear the screen with ANSI escapes |
| 0 | quit |

Results are printed with five decimals. The loop also ends when input runs
out. From Python, `snowcalc.cli.run(stream, out)` drives the same menu over
any text streams.

## What it does not do

`Keypad` only holds the state and rules of a button panel. There is no
graphical window; the only interactive front end is the text menu.