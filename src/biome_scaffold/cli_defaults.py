"""Fill unset CLI options from ``BIOME_SCAFFOLD_*`` environment variables.

Only ``--force``, ``--local``, ``--skip-deps`` and ``--type`` have an
environment counterpart. A flag given on the command line always wins; an
unparseable environment value ends the run before any prompt is shown.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeVar

from .io import die
from .models import PROJECT_TYPE_VALUES, ProjectType

T = TypeVar("T")

DefaultSource = Literal["cli", "env", "built-in"]

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class EnvDefault:
    flag: str
    env_var: str
    choices: tuple[str, ...]


@dataclass(frozen=True)
class ResolvedCliDefault(Generic[T]):
    """A resolved option value and where it came from."""

    flag: str
    value: T
    source: DefaultSource
    env_var: str | None = None
    raw_env_value: str | None = None


CLI_ENV_DEFAULTS: tuple[EnvDefault, ...] = (
    EnvDefault("--force", "BIOME_SCAFFOLD_FORCE", TRUE_VALUES + FALSE_VALUES),
    EnvDefault("--local", "BIOME_SCAFFOLD_LOCAL", TRUE_VALUES + FALSE_VALUES),
    EnvDefault("--skip-deps", "BIOME_SCAFFOLD_SKIP_DEPS", TRUE_VALUES + FALSE_VALUES),
    EnvDefault("--type", "BIOME_SCAFFOLD_TYPE", PROJECT_TYPE_VALUES),
)
_BY_FLAG = {entry.flag: entry for entry in CLI_ENV_DEFAULTS}


def _reject(source: str, choices: tuple[str, ...]) -> NoReturn:
    die(f"{source} must be one of: " + ", ".join(choices))


def _read_env(entry: EnvDefault) -> str:
    return os.environ.get(entry.env_var, "").strip()


def resolve_bool_default(flag: str, explicit: bool) -> ResolvedCliDefault[bool]:
    """Resolve a boolean flag such as ``--force``.

    Args:
        flag: A flag listed in ``CLI_ENV_DEFAULTS``.
        explicit: Whether the flag was passed on the command line.

    Returns:
        The value with its source. Exits with status 1 on an invalid
        environment value.
    """
    if explicit:
        return ResolvedCliDefault(flag=flag, value=True, source="cli")
    entry = _BY_FLAG[flag]
    raw = _read_env(entry)
    if not raw:
        return ResolvedCliDefault(flag=flag, value=False, source="built-in")
    normalized = raw.lower()
    if normalized not in entry.choices:
        _reject(entry.env_var, entry.choices)
    return ResolvedCliDefault(
        flag=flag,
        value=normalized in TRUE_VALUES,
        source="env",
        env_var=entry.env_var,
        raw_env_value=raw,
    )


def resolve_type_default(explicit: str | None) -> ResolvedCliDefault[ProjectType | None]:
    """Resolve ``--type``; a ``None`` value means detect from package.json."""
    entry = _BY_FLAG["--type"]
    if explicit is not None:
        return ResolvedCliDefault(
            flag=entry.flag, value=_project_type(explicit, source=entry.flag), source="cli"
        )
    raw = _read_env(entry)
    if not raw:
        return ResolvedCliDefault(flag=entry.flag, value=None, source="built-in")
    return ResolvedCliDefault(
        flag=entry.flag,
        value=_project_type(raw, source=entry.env_var),
        source="env",
        env_var=entry.env_var,
        raw_env_value=raw,
    )


def _project_type(value: str, *, source: str) -> ProjectType:
    normalized = value.strip().lower()
    for project_type in PROJECT_TYPE_VALUES:
        if normalized == project_type:
            return project_type  # type: ignore[return-value]
    _reject(source, PROJECT_TYPE_VALUES)


def describe_translated_default(value: ResolvedCliDefault[object]) -> str:
    env_var = value.env_var or "<unknown>"
    raw = value.raw_env_value if value.raw_env_value is not None else ""
    return f"translated {env_var}={raw!r} into default {value.flag}={value.value!r}"


__all__ = [
    "CLI_ENV_DEFAULTS",
    "EnvDefault",
    "ResolvedCliDefault",
    "describe_translated_default",
    "resolve_bool_default",
    "resolve_type_default",
]
