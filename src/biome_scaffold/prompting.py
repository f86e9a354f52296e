"""Interactive prompt capability used by resolvers and setup services.

Services receive a ``Prompter`` instead of calling the terminal directly so
tests can drive them with scripted answers.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

from . import io

T = TypeVar("T")


class Prompter(Protocol):
    """Ask the user yes/no and pick-one questions."""

    def confirm(self, message: str, *, default: bool = False) -> bool: ...

    def select(self, message: str, choices: Sequence[T], *, default: T | None = None) -> T: ...


class ConsolePrompter:
    """Prompter backed by questionary, with a plain ``input()`` fallback."""

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return io.confirm(message, default=default)

    def select(self, message: str, choices: Sequence[T], *, default: T | None = None) -> T:
        return io.select(message, choices, default)


def overwrite_message(label: str) -> str:
    return f"{label} already exists. Overwrite?"
