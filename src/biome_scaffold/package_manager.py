"""Package-manager detection, flag validation and command construction."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from . import log
from .models import PACKAGE_MANAGER_VALUES, InitOptions, PackageManager
from .prompting import Prompter
from .services.errors import ConflictingChoiceError

MULTIPLE_MANAGERS_MESSAGE = "Multiple package managers specified. Please choose only one."
DEFAULT_PROMPT_INDEX = 2  # pnpm

# Installed with ``-E`` so package.json records an exact version.
EXACT_PACKAGES = frozenset({"@biomejs/biome"})


@dataclass(frozen=True)
class LockFile:
    name: str
    manager: PackageManager


# Priority order for ``detect``: the first existing lock file wins.
LOCK_FILES: tuple[LockFile, ...] = (
    LockFile("package-lock.json", "npm"),
    LockFile("yarn.lock", "yarn"),
    LockFile("pnpm-lock.yaml", "pnpm"),
    LockFile("bun.lockb", "bun"),
    LockFile("bun.lock", "bun"),
)

_ADD_DEV_ARGS: dict[PackageManager, tuple[str, ...]] = {
    "npm": ("npm", "i", "-D"),
    "yarn": ("yarn", "add", "-D"),
    "pnpm": ("pnpm", "add", "-D"),
    "bun": ("bun", "add", "-D"),
}
_EXACT_FLAG = "-E"

_HOOK_INSTALL_ARGS: dict[PackageManager, tuple[str, ...]] = {
    "npm": ("npx", "lefthook", "install"),
    "yarn": ("yarn", "lefthook", "install"),
    "pnpm": ("pnpm", "exec", "lefthook", "install"),
    "bun": ("bunx", "lefthook", "install"),
}


def validate_choice(
    *,
    use_npm: bool = False,
    use_yarn: bool = False,
    use_pnpm: bool = False,
    use_bun: bool = False,
) -> PackageManager | None:
    """Return the manager selected by ``--use-*`` flags.

    Raises:
        ConflictingChoiceError: More than one flag is set.

    Example:
        >>> validate_choice(use_yarn=True)
        'yarn'
        >>> validate_choice() is None
        True
    """
    flags: dict[PackageManager, bool] = {
        "npm": use_npm,
        "yarn": use_yarn,
        "pnpm": use_pnpm,
        "bun": use_bun,
    }
    selected = [manager for manager, enabled in flags.items() if enabled]
    if len(selected) > 1:
        raise ConflictingChoiceError(MULTIPLE_MANAGERS_MESSAGE)
    if not selected:
        return None
    return selected[0]


def validate_options(options: InitOptions) -> PackageManager | None:
    return validate_choice(
        use_npm=options.use_npm,
        use_yarn=options.use_yarn,
        use_pnpm=options.use_pnpm,
        use_bun=options.use_bun,
    )


def detect(project_dir: Path) -> PackageManager | None:
    """Return the manager of the highest-priority lock file in ``project_dir``."""
    for lock_file in LOCK_FILES:
        if (project_dir / lock_file.name).exists():
            return lock_file.manager
    return None


def detect_all(project_dir: Path) -> tuple[PackageManager, ...]:
    """Return every manager with a lock file present, in priority order."""
    found: list[PackageManager] = []
    for lock_file in LOCK_FILES:
        if lock_file.manager in found:
            continue
        if (project_dir / lock_file.name).exists():
            found.append(lock_file.manager)
    return tuple(found)


def prompt_package_manager(
    prompter: Prompter, choices: Sequence[PackageManager] = PACKAGE_MANAGER_VALUES
) -> PackageManager:
    if list(choices) == list(PACKAGE_MANAGER_VALUES):
        default = PACKAGE_MANAGER_VALUES[DEFAULT_PROMPT_INDEX]
    else:
        default = choices[0]
    return prompter.select(
        "Which package manager do you want to use?", list(choices), default=default
    )


def resolve(project_dir: Path, options: InitOptions, prompter: Prompter) -> PackageManager:
    """Resolve the package manager: flag, then lock files, then a prompt.

    Several lock files from different managers lead to a prompt restricted to
    the detected managers.

    Raises:
        ConflictingChoiceError: More than one ``--use-*`` flag is set.
    """
    chosen = validate_options(options)
    if chosen is not None:
        return chosen
    detected = detect_all(project_dir)
    if len(detected) == 1:
        log.info(f"Detected package manager: {detected[0]}")
        return detected[0]
    if detected:
        log.warning("Multiple lock files found: " + ", ".join(detected))
        return prompt_package_manager(prompter, detected)
    return prompt_package_manager(prompter)


def install_commands(manager: PackageManager, packages: Sequence[str]) -> list[tuple[str, ...]]:
    """Build the install command(s) for ``packages``.

    Exact-pinned packages go into one ``-E`` command; the rest share a second
    command. Either command is omitted when its group is empty.

    Example:
        >>> install_commands("pnpm", ["@biomejs/biome"])
        [('pnpm', 'add', '-D', '-E', '@biomejs/biome@latest')]
    """
    base = _ADD_DEV_ARGS[manager]
    exact = [f"{name}@latest" for name in packages if name in EXACT_PACKAGES]
    floating = [f"{name}@latest" for name in packages if name not in EXACT_PACKAGES]
    commands: list[tuple[str, ...]] = []
    if exact:
        commands.append((*base, _EXACT_FLAG, *exact))
    if floating:
        commands.append((*base, *floating))
    return commands


def hook_install_command(manager: PackageManager) -> tuple[str, ...]:
    """Return the command that installs lefthook's Git hooks for ``manager``."""
    return _HOOK_INSTALL_ARGS[manager]


def format_command(argv: Sequence[str]) -> str:
    return " ".join(argv)
