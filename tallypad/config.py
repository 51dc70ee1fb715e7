"""Environment-driven settings for the tallypad CLI.

Self-contained; everything is read from os.environ at call time:
    TALLYPAD_LOG_LEVEL  logging level name (default WARNING)
    TALLYPAD_TRACE      1/true/yes/on to trace presses by default
    TALLYPAD_NO_COLOR   1/true/yes/on to disable colour output
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = ("1", "true", "yes", "on")


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def _log_level(value: Optional[str]) -> str:
    """Normalize a level name, falling back to the default if unknown."""
    name = (value or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


@dataclass
class Settings:
    """Resolved CLI settings."""

    log_level: str = DEFAULT_LOG_LEVEL
    trace: bool = False
    no_color: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from env (defaults to os.environ)."""
        env = os.environ if env is None else env
        return cls(
            log_level=_log_level(env.get("TALLYPAD_LOG_LEVEL")),
            trace=_flag(env.get("TALLYPAD_TRACE")),
            no_color=_flag(env.get("TALLYPAD_NO_COLOR")),
        )
