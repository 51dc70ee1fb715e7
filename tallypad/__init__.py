"""tallypad: on-screen four-function calculator.

The engine holds the operands, the pending operation and the display text;
the keypad turns button presses into engine calls. Operations apply
immediately, left to right.

Usage:
    python -m tallypad press 5 + 3 =            # Final display: 8
    python -m tallypad press 1 ÷ 3 = --trace    # State after every press
    python -m tallypad keys                     # Buttons and aliases
"""

from tallypad.engine import CalculatorEngine
from tallypad.keypad import Keypad

__all__ = ["CalculatorEngine", "Keypad"]
