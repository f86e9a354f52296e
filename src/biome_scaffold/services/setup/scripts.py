"""Add package.json scripts through ``npm pkg set``."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ... import log
from ...exec import CommandRequest, CommandRunner, run_checked
from ..errors import ValidationFailedError

BIOME_SCRIPTS = (
    "scripts.format=biome format --write",
    "scripts.lint=biome lint",
    "scripts.lint-fix=biome lint --write",
    "scripts.check=biome check --write",
)
PREPARE_SCRIPT = "scripts.prepare=lefthook install"

PKG_SET_TIMEOUT_SECONDS = 60.0
_FORBIDDEN_CHARS = ("\r", "\n", "\0")


def validate_pkg_set_entry(entry: str) -> tuple[str, str]:
    """Split and validate a ``key=value`` argument for ``npm pkg set``.

    Raises:
        ValidationFailedError: The entry is malformed or contains a line
            break or NUL byte.

    Example:
        >>> validate_pkg_set_entry("scripts.lint=biome lint")
        ('scripts.lint', 'biome lint')
    """
    separator = entry.find("=")
    if separator <= 0 or separator == len(entry) - 1:
        raise ValidationFailedError(f'Invalid format: "{entry}". Expected "key=value".')
    key = entry[:separator].strip()
    value = entry[separator + 1 :]
    if not key:
        raise ValidationFailedError(f'Invalid key in "{entry}". Key must be non-empty.')
    if any(char in entry for char in _FORBIDDEN_CHARS):
        raise ValidationFailedError(f"Invalid characters (newline/NUL) in {entry!r}.")
    return key, value


def npm_pkg_set(base_dir: Path, entry: str, *, runner: CommandRunner | None = None) -> None:
    """Run ``npm pkg set <entry>`` in ``base_dir``.

    Raises:
        ValidationFailedError: ``entry`` is malformed.
        CommandExecutionError: npm is missing or exits non-zero.
    """
    validate_pkg_set_entry(entry)
    run_checked(
        CommandRequest(
            argv=("npm", "pkg", "set", entry),
            cwd=base_dir,
            timeout_seconds=PKG_SET_TIMEOUT_SECONDS,
        ),
        runner=runner,
    )


def add_scripts(
    base_dir: Path, entries: Sequence[str], *, runner: CommandRunner | None = None
) -> None:
    """Apply each entry with its own ``npm pkg set`` call.

    Entries applied before a failure stay applied.

    Raises:
        ValidationFailedError: An entry is malformed.
        CommandExecutionError: An ``npm pkg set`` call failed.
    """
    with log.console().status("Adding package.json scripts...", spinner="dots"):
        for entry in entries:
            npm_pkg_set(base_dir, entry, runner=runner)
            log.debug(f"set {entry}")
