"""End-to-end key sequences through the Keypad.

Each test presses buttons the way a user would and checks the display
(and, where it matters, the operands left behind).
"""

import pytest

from tallypad.engine import CalculatorEngine
from tallypad.keypad import Keypad
from tallypad.models import KeyKind, Operation, Phase


@pytest.fixture
def keypad():
    return Keypad()


def _press(keypad: Keypad, sequence: str) -> str:
    return keypad.press_all(sequence.split())


# --- Basic arithmetic ---

def test_addition(keypad):
    assert _press(keypad, "5 + 3 =") == "8"


def test_multi_digit_operands(keypad):
    assert _press(keypad, "1 2 - 3 0 =") == "-18"


def test_ascii_aliases(keypad):
    assert _press(keypad, "2 * 3 =") == "6"
    keypad.press_all_clear()
    assert _press(keypad, "8 / 2 =") == "4"


def test_division_by_zero(keypad):
    assert _press(keypad, "1 ÷ 0 =") == "Undefined"


def test_long_division_rounds(keypad):
    assert _press(keypad, "1 ÷ 3 =") == "0.33333333"


def test_decimal_second_operand(keypad):
    assert _press(keypad, "1 + . 5 =") == "1.5"


def test_result_too_wide(keypad):
    assert _press(keypad, "9 9 9 9 9 × 9 9 9 9 9 =") == "Error"


# --- Operator handling ---

def test_operator_before_any_digit_is_ignored(keypad):
    keypad.press("+")
    assert keypad.engine.get_operation() is Operation.NONE
    assert keypad.phase is Phase.EMPTY


def test_chaining_applies_left_to_right(keypad):
    """2 + 3 × 4 is (2 + 3) × 4, no precedence."""
    _press(keypad, "2 + 3 ×")
    assert keypad.display == "5"
    assert keypad.engine.get_previous() == "5"
    assert keypad.engine.get_current() == ""
    assert _press(keypad, "4 =") == "20"


def test_second_operator_replaces_first(keypad):
    assert _press(keypad, "5 + - 3 =") == "2"


def test_second_operand_starts_fresh(keypad):
    _press(keypad, "5 +")
    keypad.press("7")
    assert keypad.display == "7"
    assert keypad.engine.get_current() == "7"


def test_chain_after_error_shows_nan(keypad):
    _press(keypad, "9 9 9 9 9 × 9 9 9 9 9 +")
    assert keypad.engine.get_previous() == "Error"
    assert _press(keypad, "1 =") == "NaN"


# --- Equals ---

def test_equals_without_second_operand_reuses_previous(keypad):
    assert _press(keypad, "5 + =") == "10"
    assert keypad.engine.get_current() == "5"


def test_equals_without_second_operand_multiplies(keypad):
    assert _press(keypad, "5 × =") == "25"


def test_repeated_equals_repeats_same_operation(keypad):
    assert _press(keypad, "5 + 3 = =") == "8"


def test_equals_with_nothing_entered(keypad):
    assert _press(keypad, "=") == ""


def test_equals_with_single_operand(keypad):
    assert _press(keypad, "0 4 2 =") == "42"


def test_digits_after_result_append(keypad):
    """Typing after = extends the shown result rather than starting over."""
    assert _press(keypad, "5 + 3 = 2") == "82"
    assert keypad.engine.get_current() == "82"


# --- Clear and delete ---

def test_all_clear(keypad):
    _press(keypad, "5 + 3 AC")
    engine = keypad.engine
    assert (engine.get_current(), engine.get_previous(), engine.get_display()) == ("", "", "")
    assert engine.get_operation() is Operation.NONE
    assert _press(keypad, "2 + 2 =") == "4"


def test_delete_second_operand(keypad):
    _press(keypad, "5 + 3 DEL")
    assert keypad.display == ""
    assert _press(keypad, "4 =") == "9"


def test_delete_first_operand_after_operator(keypad):
    _press(keypad, "5 + DEL")
    assert keypad.engine.get_previous() == ""
    assert keypad.display == ""
    assert keypad.engine.get_operation() is Operation.PLUS


def test_delete_on_result_is_noop(keypad):
    _press(keypad, "5 + 3 =")
    keypad.press("DEL")
    assert keypad.display == "8"


# --- Dispatch and tracing ---

def test_press_returns_parsed_key(keypad):
    key = keypad.press("x")
    assert key.kind is KeyKind.OPERATOR
    assert key.label == "×"


def test_unknown_key_raises(keypad):
    with pytest.raises(ValueError):
        keypad.press("?")


def test_press_operator_rejects_empty_label(keypad):
    _press(keypad, "5 +")
    with pytest.raises(ValueError):
        keypad.press_operator("")
    assert keypad.engine.get_operation() is Operation.PLUS
    assert keypad.engine.get_previous() == "5"


def test_press_digit_rejects_operators(keypad):
    with pytest.raises(ValueError):
        keypad.press_digit("+")


def test_trace_phases(keypad):
    steps = keypad.trace(["5", "+", "3", "=", "AC"])
    assert [s.phase for s in steps] == [
        Phase.ENTERING_FIRST,
        Phase.OPERATOR_PENDING,
        Phase.ENTERING_SECOND,
        Phase.RESULT,
        Phase.EMPTY,
    ]
    assert steps[3].state.displayed == "8"


def test_shared_engine_listener_sees_result():
    seen = []
    keypad = Keypad(CalculatorEngine(on_display=seen.append))
    _press(keypad, "5 + 3 =")
    assert seen[-1] == "8"
