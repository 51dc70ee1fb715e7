"""Data models for the tallypad calculator.

Operation, KeyKind, Phase enums plus the EngineState/TraceStep snapshots
that flow through engine → keypad → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Sentinel display strings returned by compute() instead of a number.
EMPTY = ""
UNDEFINED = "Undefined"
ERROR = "Error"
SENTINELS = (UNDEFINED, ERROR)

# Fixed-width display bounds.
MAX_INTEGER_WIDTH = 9
MAX_DECIMAL_WIDTH = 10
ROUND_DECIMALS = 8

DIGIT_TOKENS = tuple("0123456789.")


class Operation(str, Enum):
    """Pending binary operation."""

    PLUS = "+"
    MINUS = "-"
    TIMES = "×"
    DIVIDE = "÷"
    NONE = ""

    @classmethod
    def from_label(cls, label: str) -> Operation:
        """Resolve a button label (or ASCII alias) to an Operation.

        Args:
            label: "+", "-", "×", "÷", or one of the aliases "*", "x", "/".

        Raises:
            ValueError: If the label is not an operation.
        """
        if isinstance(label, Operation):
            return label
        label = _OPERATION_ALIASES.get(label, label)
        return cls(label)


_OPERATION_ALIASES = {
    "*": "×",
    "x": "×",
    "X": "×",
    "/": "÷",
}


class KeyKind(str, Enum):
    """Semantic button categories."""

    DIGIT = "digit"
    OPERATOR = "operator"
    EQUALS = "equals"
    DELETE = "delete"
    ALL_CLEAR = "all-clear"


_CONTROL_ALIASES: dict[str, KeyKind] = {
    "=": KeyKind.EQUALS,
    "ac": KeyKind.ALL_CLEAR,
    "c": KeyKind.ALL_CLEAR,
    "del": KeyKind.DELETE,
    "d": KeyKind.DELETE,
    "⌫": KeyKind.DELETE,
}


@dataclass(frozen=True)
class Key:
    """A single button press: its kind and canonical label."""

    kind: KeyKind
    label: str

    @classmethod
    def parse(cls, label: str) -> Key:
        """Parse a button label.

        Digits and "." map to DIGIT, operator labels (and their aliases) to
        OPERATOR with the canonical symbol, "=" to EQUALS, "AC"/"C" to
        ALL_CLEAR and "DEL"/"D"/"⌫" to DELETE.

        Raises:
            ValueError: If the label is not a known button.
        """
        text = label.strip()
        if text in DIGIT_TOKENS:
            return cls(KeyKind.DIGIT, text)
        kind = _CONTROL_ALIASES.get(text.lower())
        if kind is not None:
            return cls(kind, text.upper() if kind is not KeyKind.EQUALS else text)
        try:
            op = Operation.from_label(text)
        except ValueError:
            raise ValueError(f"Unknown key: {label!r}") from None
        if op is Operation.NONE:
            raise ValueError(f"Unknown key: {label!r}")
        return cls(KeyKind.OPERATOR, op.value)


class Phase(str, Enum):
    """Conceptual input states of the calculator."""

    EMPTY = "empty"
    ENTERING_FIRST = "entering-first"
    OPERATOR_PENDING = "operator-pending"
    ENTERING_SECOND = "entering-second"
    RESULT = "result"


@dataclass
class EngineState:
    """Snapshot of the engine's four state fields."""

    current: str = ""
    previous: str = ""
    operation: Operation = Operation.NONE
    displayed: str = ""

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "current": self.current,
            "previous": self.previous,
            "operation": self.operation.value,
            "displayed": self.displayed,
        }

    @classmethod
    def from_dict(cls, d: dict) -> EngineState:
        return cls(
            current=d.get("current", ""),
            previous=d.get("previous", ""),
            operation=Operation.from_label(d.get("operation", "")),
            displayed=d.get("displayed", ""),
        )


@dataclass
class TraceStep:
    """One key press and the state it left behind."""

    key: Key
    phase: Phase
    state: EngineState = field(default_factory=EngineState)
