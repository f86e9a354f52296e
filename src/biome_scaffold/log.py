"""Terminal output for biome-scaffold, filtered by a process-wide level.

Messages at ``warning`` and above go to stderr, everything else to stdout.
The level comes from ``--log-level`` or ``BIOME_SCAFFOLD_LOG_LEVEL`` and
defaults to ``info``. Colour is disabled by ``--no-color``, ``NO_COLOR`` or
``BIOME_SCAFFOLD_NO_COLOR``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import IntEnum

from rich.console import Console
from rich.text import Text

LOG_LEVEL_ENV = "BIOME_SCAFFOLD_LOG_LEVEL"
NO_COLOR_ENVS = ("NO_COLOR", "BIOME_SCAFFOLD_NO_COLOR")


class LogLevel(IntEnum):
    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


LEVELS_BY_NAME: dict[str, LogLevel] = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "success": LogLevel.SUCCESS,
    "warning": LogLevel.WARNING,
    "warn": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}
LEVEL_NAMES = tuple(LEVELS_BY_NAME)

_STYLES: dict[LogLevel, str] = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "cyan",
    LogLevel.INFO: "",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}


@dataclass
class _LogState:
    level: LogLevel | None = None
    no_color: bool | None = None


_state = _LogState()


def parse_level(value: str | None, default: LogLevel = LogLevel.INFO) -> LogLevel:
    """Map a level name to ``LogLevel``; blank or unknown names give ``default``.

    Example:
        >>> parse_level(" Warn ")
        <LogLevel.WARNING: 40>
        >>> parse_level("loud")
        <LogLevel.INFO: 30>
    """
    if not value:
        return default
    return LEVELS_BY_NAME.get(value.strip().lower(), default)


def current_level() -> LogLevel:
    if _state.level is None:
        _state.level = parse_level(os.environ.get(LOG_LEVEL_ENV))
    return _state.level


def set_level(value: str | None) -> None:
    _state.level = parse_level(value)


def set_no_color(value: bool) -> None:
    """Turn colour off, or hand the decision back to the environment."""
    _state.no_color = True if value else None


def no_color() -> bool:
    if _state.no_color is not None:
        return _state.no_color
    return any(os.environ.get(name) for name in NO_COLOR_ENVS)


def console(*, stderr: bool = False) -> Console:
    return Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=no_color(),
    )


def emit(
    level: LogLevel,
    message: str,
    *,
    style: str | None = None,
    stderr: bool | None = None,
) -> None:
    if level < current_level():
        return
    to_stderr = level >= LogLevel.WARNING if stderr is None else stderr
    console(stderr=to_stderr).print(Text(message, style=style or _STYLES[level]))


def trace(message: str) -> None:
    emit(LogLevel.TRACE, message)


def debug(message: str) -> None:
    emit(LogLevel.DEBUG, message)


def info(message: str) -> None:
    emit(LogLevel.INFO, message)


def success(message: str) -> None:
    emit(LogLevel.SUCCESS, message)


def warning(message: str) -> None:
    emit(LogLevel.WARNING, message)


def error(message: str) -> None:
    emit(LogLevel.ERROR, message)


def code(command: str) -> None:
    """Print a shell command the user can copy and run."""
    emit(LogLevel.INFO, f"  $ {command}", style="dim")


def final_success(message: str) -> None:
    emit(LogLevel.SUCCESS, f"\n{message}\n", style="bold green")
