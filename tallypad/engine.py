"""Calculator engine: arithmetic state and the display string.

The engine owns four text fields (current, previous, operation, displayed)
and knows how to append input to the display and evaluate the pending
operation. It does not decide *when* to shift operands around; that is the
keypad's job (see tallypad.keypad), which composes the accessors below.

compute() never raises. Outcomes that are not numbers come back as
sentinel display strings:
    ""           nothing to compute
    "Undefined"  division by zero
    "Error"      integer result too wide for the display
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from tallypad.models import (
    DIGIT_TOKENS,
    EMPTY,
    ERROR,
    MAX_DECIMAL_WIDTH,
    MAX_INTEGER_WIDTH,
    ROUND_DECIMALS,
    UNDEFINED,
    EngineState,
    Operation,
)
from tallypad.numbers import format_number, is_number, parse_number, round_to

logger = logging.getLogger(__name__)

DisplayListener = Callable[[str], None]


class CalculatorEngine:
    """Arithmetic-and-input state machine behind the calculator buttons.

    Args:
        on_display: Called with the new display text after every call that
            changes it, so the owning UI can push it to the screen.
    """

    def __init__(self, on_display: Optional[DisplayListener] = None) -> None:
        self._current = ""
        self._previous = ""
        self._operation = Operation.NONE
        self._displayed = ""
        self._on_display = on_display

    def __repr__(self) -> str:
        return (
            f"CalculatorEngine(current={self._current!r}, previous={self._previous!r}, "
            f"operation={self._operation.value!r}, displayed={self._displayed!r})"
        )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def get_display(self) -> str:
        return self._displayed

    def set_display(self, text: str) -> None:
        self._displayed = text
        if self._on_display is not None:
            self._on_display(text)

    @property
    def display(self) -> str:
        return self._displayed

    def append_digit_or_point(self, token: str) -> None:
        """Append a digit or decimal point to the display.

        A second "." is ignored, and the display stops growing at 9
        characters (10 once it holds a ".").

        Raises:
            ValueError: If token is not one of 0-9 or ".".
        """
        if len(token) != 1 or token not in DIGIT_TOKENS:
            raise ValueError(f"Expected a digit or '.', got {token!r}")

        shown = self._displayed
        if token == "." and "." in shown:
            return
        if "." in shown and len(shown) < MAX_DECIMAL_WIDTH:
            self.set_display(shown + token)
        elif len(shown) < MAX_INTEGER_WIDTH:
            self.set_display(shown + token)
        else:
            logger.debug("Display full, dropped %r", token)

    # ------------------------------------------------------------------
    # Operands and operation
    # ------------------------------------------------------------------

    def get_current(self) -> str:
        return self._current

    def set_current(self, current: str) -> None:
        self._current = current

    def get_previous(self) -> str:
        return self._previous

    def set_previous(self, previous: str) -> None:
        self._previous = previous

    def get_operation(self) -> Operation:
        return self._operation

    def set_operation(self, operation: Union[Operation, str]) -> None:
        """Set the pending operation from an Operation or its label.

        Raises:
            ValueError: If the label is not a known operation.
        """
        self._operation = Operation.from_label(operation)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def compute(self) -> str:
        """Evaluate the pending operation and return the display text.

        With no operation pending (or an operand missing) the display is
        passed through as a number, or "" if it does not parse as one.
        """
        if self._operation is Operation.NONE or self._current == "" or self._previous == "":
            if not is_number(self._displayed):
                return EMPTY
            return format_number(parse_number(self._displayed))

        left = parse_number(self._previous)
        right = parse_number(self._current)

        if self._operation is Operation.PLUS:
            solution = left + right
        elif self._operation is Operation.MINUS:
            solution = left - right
        elif self._operation is Operation.TIMES:
            solution = left * right
        else:
            if right == 0:
                logger.debug("Division by zero: %s ÷ %s", self._previous, self._current)
                return UNDEFINED
            solution = left / right

        text = format_number(solution)
        if "." in text and len(text) > MAX_DECIMAL_WIDTH:
            text = format_number(round_to(solution, ROUND_DECIMALS))
        elif len(text) > MAX_INTEGER_WIDTH:
            logger.debug("Result %s too wide for display", text)
            return ERROR

        logger.debug("%s %s %s = %s", self._previous, self._operation.value, self._current, text)
        return text

    # ------------------------------------------------------------------
    # Clearing
    # ------------------------------------------------------------------

    def all_clear(self) -> None:
        """Reset every field to its initial empty value."""
        self._current = ""
        self._previous = ""
        self._operation = Operation.NONE
        self.set_display("")

    def delete(self) -> None:
        """Clear whichever operand is on the display.

        The current operand wins; the previous one is only cleared while an
        operation is pending. Does nothing when the display shows neither.
        """
        if self._displayed == self._current:
            self._current = ""
            self.set_display("")
        if self._displayed == self._previous and self._operation is not Operation.NONE:
            self._previous = ""
            self.set_display("")

    def snapshot(self) -> EngineState:
        return EngineState(
            current=self._current,
            previous=self._previous,
            operation=self._operation,
            displayed=self._displayed,
        )
