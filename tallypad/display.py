"""Rich rendering of the calculator display, press traces and key table."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tallypad.models import MAX_DECIMAL_WIDTH, SENTINELS, Phase, TraceStep

# Panel inner width: widest display text plus a leading sign.
_SCREEN_WIDTH = MAX_DECIMAL_WIDTH + 1

_PHASE_STYLES = {
    Phase.EMPTY: "dim",
    Phase.ENTERING_FIRST: "cyan",
    Phase.OPERATOR_PENDING: "yellow",
    Phase.ENTERING_SECOND: "cyan",
    Phase.RESULT: "green",
}

# (label, aliases, description)
KEY_ROWS = [
    ("0-9", "", "Digit"),
    (".", "", "Decimal point (one per operand)"),
    ("+", "", "Add"),
    ("-", "", "Subtract"),
    ("×", "* x", "Multiply"),
    ("÷", "/", "Divide"),
    ("=", "", "Evaluate the pending operation"),
    ("AC", "C", "All clear"),
    ("DEL", "D ⌫", "Delete the operand on the display"),
]


def _display_text(text: str) -> Text:
    style = "bold red" if text in SENTINELS or text == "NaN" else "bold"
    return Text(text or "0", style=style, justify="right")


def render_display(text: str, console: Console) -> None:
    """Render the display text as a fixed-width screen."""
    console.print(
        Panel(
            _display_text(text),
            width=_SCREEN_WIDTH + 4,
            title="tallypad",
            title_align="left",
        )
    )


def render_trace(steps: list[TraceStep], console: Console) -> None:
    """Render a row per key press with the state it left behind."""
    table = Table(title="Key trace", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Key", style="bold")
    table.add_column("Display", justify="right", min_width=_SCREEN_WIDTH)
    table.add_column("Current", justify="right")
    table.add_column("Previous", justify="right")
    table.add_column("Op", justify="center")
    table.add_column("Phase")

    for i, step in enumerate(steps, 1):
        state = step.state
        style = _PHASE_STYLES.get(step.phase, "white")
        table.add_row(
            str(i),
            step.key.label,
            _display_text(state.displayed) if state.displayed else Text("--", style="dim"),
            state.current or "--",
            state.previous or "--",
            state.operation.value or "--",
            f"[{style}]{step.phase.value}[/{style}]",
        )

    console.print()
    console.print(table)
    console.print()


def render_keys(console: Console) -> None:
    """Render the button table."""
    table = Table(title="Keys", show_header=True, header_style="bold")
    table.add_column("Key", style="green", min_width=5)
    table.add_column("Aliases", style="cyan")
    table.add_column("Action", min_width=30)

    for label, aliases, description in KEY_ROWS:
        table.add_row(label, aliases or "--", description)

    console.print()
    console.print(table)
    console.print()
