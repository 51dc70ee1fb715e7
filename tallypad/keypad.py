"""Keypad: translates button presses into engine calls.

Data flow per press:
1. Parse the button label into a Key (digit, operator, =, AC, DEL)
2. Shift operands between current/previous as the button dictates
3. Write the resulting text to the engine display

Operations apply immediately, left to right: pressing an operator while
both operands are set evaluates the pending one first and carries the
result forward as the new previous operand.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from tallypad.engine import CalculatorEngine
from tallypad.models import DIGIT_TOKENS, Key, KeyKind, Operation, Phase, TraceStep

logger = logging.getLogger(__name__)


class Keypad:
    """Button layer bound to a single CalculatorEngine."""

    def __init__(self, engine: Optional[CalculatorEngine] = None) -> None:
        self.engine = engine or CalculatorEngine()
        self._showing_result = False

    @property
    def display(self) -> str:
        return self.engine.get_display()

    @property
    def phase(self) -> Phase:
        """Conceptual input state derived from the engine fields."""
        engine = self.engine
        current = engine.get_current()
        previous = engine.get_previous()
        if self._showing_result:
            return Phase.RESULT
        if not current and not previous:
            return Phase.EMPTY
        if not previous:
            return Phase.ENTERING_FIRST
        if not current:
            return Phase.OPERATOR_PENDING
        return Phase.ENTERING_SECOND

    # ------------------------------------------------------------------
    # Buttons
    # ------------------------------------------------------------------

    def press_digit(self, token: str) -> None:
        """Digit or decimal point. Starts the second operand fresh."""
        engine = self.engine
        if token not in DIGIT_TOKENS:
            raise ValueError(f"Expected a digit or '.', got {token!r}")
        if engine.get_previous() != "" and engine.get_current() == "":
            engine.set_display(engine.get_current() + token)
        else:
            engine.append_digit_or_point(token)
        engine.set_current(engine.get_display())

    def press_operator(self, label: str) -> None:
        """Operator button: start, replace, or chain an operation."""
        engine = self.engine
        operation = Operation.from_label(label)
        if operation is Operation.NONE:
            raise ValueError(f"Unknown operation: {label!r}")
        current = engine.get_current()
        previous = engine.get_previous()

        if current == "" and previous == "":
            return
        if current != "" and previous != "":
            # Chain: fold the pending operation into previous
            engine.set_display(engine.compute())
            engine.set_operation(operation)
            engine.set_previous(engine.get_display())
            engine.set_current("")
        elif engine.get_operation() is not Operation.NONE and current == "":
            engine.set_operation(operation)
        else:
            engine.set_operation(operation)
            engine.set_previous(current)
            engine.set_current("")

    def press_equals(self) -> None:
        """Equals button.

        With no second operand entered, previous is reused as the second
        operand, so "5 + =" shows 10.
        """
        engine = self.engine
        if (
            engine.get_current() == ""
            and engine.get_previous() != ""
            and engine.get_operation() is not Operation.NONE
        ):
            engine.set_current(engine.get_previous())
        engine.set_display(engine.compute())

    def press_all_clear(self) -> None:
        self.engine.all_clear()

    def press_delete(self) -> None:
        self.engine.delete()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def press(self, label: str) -> Key:
        """Press a button by label.

        Raises:
            ValueError: If the label is not a known button.
        """
        key = Key.parse(label)
        if key.kind is KeyKind.DIGIT:
            self.press_digit(key.label)
        elif key.kind is KeyKind.OPERATOR:
            self.press_operator(key.label)
        elif key.kind is KeyKind.EQUALS:
            self.press_equals()
        elif key.kind is KeyKind.ALL_CLEAR:
            self.press_all_clear()
        else:
            self.press_delete()

        self._showing_result = key.kind is KeyKind.EQUALS
        logger.debug("%-3s -> %r", key.label, self.engine)
        return key

    def press_all(self, labels: Iterable[str]) -> str:
        """Press each label in order and return the final display."""
        for label in labels:
            self.press(label)
        return self.display

    def trace(self, labels: Iterable[str]) -> list[TraceStep]:
        """Press each label in order, recording the state after every press."""
        steps = []
        for label in labels:
            key = self.press(label)
            steps.append(TraceStep(key=key, phase=self.phase, state=self.engine.snapshot()))
        return steps
