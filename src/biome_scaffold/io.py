"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import NoReturn, Sequence, TypeVar

import questionary

T = TypeVar("T")

CANCELLED_MESSAGE = "Operation cancelled."


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def die(message: str, code: int = 1) -> NoReturn:
    """Report a fatal usage error on stderr and exit with ``code``."""
    print(f"error: {message}", file=sys.stderr)
    sys.exit(code)


def cancelled() -> NoReturn:
    """Abort the whole run after the user cancelled a prompt."""
    print(f"\n{CANCELLED_MESSAGE}", file=sys.stderr)
    sys.exit(1)


def confirm(text: str, default: bool = False) -> bool:
    """Prompt for a yes/no confirmation.

    Args:
        text: Prompt label shown to the user.
        default: Default answer when the user presses enter.

    Returns:
        ``True`` when the user confirms.
    """
    if _use_questionary():
        response = questionary.confirm(text, default=default).ask()
        if response is None:
            cancelled()
        return bool(response)
    suffix = "[Y/n]" if default else "[y/N]"
    try:
        response = input(f"{text} {suffix}: ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        cancelled()
    if response == "":
        return default
    return response in {"y", "yes"}


def select(text: str, choices: Sequence[T], default: T | None = None) -> T:
    """Prompt the user to pick one of ``choices``.

    Args:
        text: Prompt label shown to the user.
        choices: Candidate values; their ``str()`` is displayed.
        default: Pre-selected value. Defaults to the first choice.

    Returns:
        The chosen value.
    """
    if not choices:
        raise ValueError("select() requires at least one choice")
    initial = default if default in choices else choices[0]
    labels = [str(choice) for choice in choices]
    if _use_questionary():
        answer = questionary.select(text, choices=labels, default=str(initial)).ask()
        if answer is None:
            cancelled()
        return choices[labels.index(answer)]
    for index, label in enumerate(labels, start=1):
        print(f"  {index}. {label}")
    default_index = labels.index(str(initial)) + 1
    while True:
        try:
            raw = input(f"{text} [{default_index}]: ").strip()
        except (EOFError, KeyboardInterrupt):
            cancelled()
        if raw == "":
            return initial
        if raw in labels:
            return choices[labels.index(raw)]
        if raw.isdigit() and 1 <= int(raw) <= len(choices):
            return choices[int(raw) - 1]
