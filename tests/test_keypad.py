import pytest

from snowcalc.keypad import Function, Keypad
from snowcalc.snow import (
    snow_arcsin_poly,
    snow_arctan,
    snow_cos_degrees,
    snow_sin_degrees,
)


def _enter(pad, keys):
    for key in keys:
        if key == ".":
            pad.press_dot()
        else:
            pad.press_digit(int(key))


def test_digits_locked_until_function_chosen():
    pad = Keypad()
    with pytest.raises(RuntimeError):
        pad.press_digit(1)
    with pytest.raises(RuntimeError):
        pad.press_dot()


def test_choose_shows_label_and_locks_other_functions():
    pad = Keypad()
    assert pad.choose(Function.SIN) == "sin"
    assert pad.enabled_functions == {Function.SIN}
    assert pad.digits_enabled is True
    with pytest.raises(RuntimeError):
        pad.choose(Function.COS)


def test_digits_accumulate_into_value():
    pad = Keypad()
    pad.choose(Function.COS)
    pad.press_digit(1)
    text = pad.press_digit(2)
    assert pad.value == 12.0
    assert text == "cos12.000000"


def test_fractional_digits():
    pad = Keypad()
    pad.choose(Function.ARCTAN)
    _enter(pad, "1.5")
    assert pad.value == pytest.approx(1.5)
    assert pad.display == "arctan1.500000"


def test_invalid_digit_rejected():
    pad = Keypad()
    pad.choose(Function.SIN)
    with pytest.raises(ValueError):
        pad.press_digit(10)


def test_seventh_integer_digit_resets_panel():
    pad = Keypad()
    pad.choose(Function.SIN)
    _enter(pad, "123456")
    with pytest.raises(ValueError, match="6"):
        pad.press_digit(7)
    assert pad.display == "输入最大为6位，请重新输入！"
    assert pad.value == 0.0
    assert pad.digits_enabled is False
    assert pad.enabled_functions == set(Function)


def test_seventh_decimal_digit_resets_panel():
    pad = Keypad()
    pad.choose(Function.SIN)
    _enter(pad, "0.111111")
    with pytest.raises(ValueError):
        pad.press_digit(1)
    assert pad.display == "输入最小精度为0.000001，请重新输入！"
    assert pad.value == 0.0
    assert pad.digits_enabled is False


def test_evaluate_sin():
    pad = Keypad()
    pad.choose(Function.SIN)
    _enter(pad, "30")
    assert pad.evaluate() == f"sin30.000000={snow_sin_degrees(30.0):f}"


def test_evaluate_cos():
    pad = Keypad()
    pad.choose(Function.COS)
    _enter(pad, "60")
    assert pad.evaluate() == f"cos60.000000={snow_cos_degrees(60.0):f}"


def test_evaluate_arctan():
    pad = Keypad()
    pad.choose(Function.ARCTAN)
    _enter(pad, "2")
    assert pad.evaluate() == f"arctan2.000000={snow_arctan(2.0):f}"


def test_evaluate_arcsin_in_range():
    pad = Keypad()
    pad.choose(Function.ARCSIN)
    _enter(pad, "0.5")
    expected = f"arcsin{pad.value:f}={snow_arcsin_poly(pad.value):f}"
    assert pad.evaluate() == expected


def test_evaluate_arcsin_out_of_range_resets():
    pad = Keypad()
    pad.choose(Function.ARCSIN)
    pad.press_digit(2)
    with pytest.raises(ValueError):
        pad.evaluate()
    assert pad.value == 0.0
    assert pad.display == ""
    assert pad.enabled_functions == set(Function)


def test_evaluate_without_function_leaves_display():
    pad = Keypad()
    assert pad.evaluate() == ""


def test_choosing_same_function_again_zeroes_value():
    pad = Keypad()
    pad.choose(Function.SIN)
    pad.press_digit(4)
    pad.choose(Function.SIN)
    assert pad.value == 0.0
    assert pad.display == "sin"


def test_back_unlocks_functions_and_zeroes_value():
    pad = Keypad()
    pad.choose(Function.SIN)
    pad.press_digit(9)
    pad.back()
    assert pad.value == 0.0
    assert pad.digits_enabled is False
    assert pad.enabled_functions == set(Function)
    assert pad.choose(Function.COS) == "cos"


def test_clear_empties_display():
    pad = Keypad()
    pad.choose(Function.SIN)
    pad.press_digit(9)
    assert pad.clear() == ""
    assert pad.value == 0.0
    assert pad.display == ""


def test_value_persists_after_evaluate():
    pad = Keypad()
    pad.choose(Function.SIN)
    pad.press_digit(3)
    pad.evaluate()
    pad.press_digit(0)
    assert pad.value == 30.0