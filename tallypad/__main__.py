"""CLI for the tallypad calculator.

Usage:
    python -m tallypad press 5 + 3 =              # Show the final display
    python -m tallypad press 1 ÷ 3 = --trace      # Table of every press
    python -m tallypad press 2 x 4 = --json       # Final state as JSON
    python -m tallypad keys                       # Buttons and aliases
"""

from __future__ import annotations

import json
import logging
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tallypad.config import Settings
from tallypad.display import render_display, render_keys, render_trace
from tallypad.keypad import Keypad

app = typer.Typer(
    name="tallypad",
    help="On-screen four-function calculator",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    """Route tallypad's loggers through Rich on stderr."""
    logger = logging.getLogger("tallypad")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=err_console, show_path=False, show_time=False))
    logger.setLevel(level)
    logger.propagate = False


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every key press"),
) -> None:
    """On-screen four-function calculator."""
    settings = Settings.from_env()
    console.no_color = settings.no_color
    err_console.no_color = settings.no_color
    _configure_logging("DEBUG" if verbose else settings.log_level)


@app.command("press")
def cmd_press(
    keys: List[str] = typer.Argument(help="Button labels, e.g. 5 + 3 ="),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the state after every press"),
    as_json: bool = typer.Option(False, "--json", help="Print the final state as JSON"),
) -> None:
    """Press a sequence of buttons on a fresh calculator."""
    trace = trace or Settings.from_env().trace

    keypad = Keypad()
    try:
        steps = keypad.trace(keys)
    except ValueError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]. Run 'tallypad keys' for the button list.")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(keypad.engine.snapshot().to_dict(), ensure_ascii=False))
        return

    if trace:
        render_trace(steps, console)
    render_display(keypad.display, console)


@app.command("keys")
def cmd_keys() -> None:
    """List the calculator buttons and their aliases."""
    render_keys(console)


if __name__ == "__main__":
    app()
