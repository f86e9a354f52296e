"""Project path helpers.

Example:
    >>> project_file_paths(Path("/repo")).vscode_settings
    PosixPath('/repo/.vscode/settings.json')
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

GIT_DIR = ".git"
PACKAGE_JSON = "package.json"
VSCODE_DIR = ".vscode"
SETTINGS_FILE = "settings.json"
BIOME_FILE_JSON = "biome.json"
BIOME_FILE_JSONC = "biome.jsonc"
BIOME_CONFIG_FILES = (BIOME_FILE_JSON, BIOME_FILE_JSONC)
DEFAULT_BIOME_EXTENSION = ".jsonc"
LEFTHOOK_FILE = "lefthook.yml"


@dataclass(frozen=True)
class ProjectFilePaths:
    """Files written into a target project."""

    package_json: Path
    vscode_settings: Path
    default_biome_config: Path
    lefthook_config: Path


def project_file_paths(base_dir: Path) -> ProjectFilePaths:
    return ProjectFilePaths(
        package_json=base_dir / PACKAGE_JSON,
        vscode_settings=base_dir / VSCODE_DIR / SETTINGS_FILE,
        default_biome_config=base_dir / BIOME_FILE_JSONC,
        lefthook_config=base_dir / LEFTHOOK_FILE,
    )


def find_biome_config(base_dir: Path) -> Path | None:
    """Return the existing Biome config file, preferring ``biome.json``."""
    for name in BIOME_CONFIG_FILES:
        candidate = base_dir / name
        if candidate.is_file():
            return candidate
    return None


def find_git_root(start: Path, *, home: Path | None = None) -> Path | None:
    """Walk up from ``start`` to the first directory holding a ``.git`` entry.

    ``.git`` may be a directory or a file (worktrees, submodules). The walk
    stops after checking the home directory or at the filesystem root.

    Args:
        start: Directory to start from.
        home: Boundary directory; defaults to ``Path.home()``.

    Returns:
        The repository root, or ``None`` if no marker was found.
    """
    boundary = (home or Path.home()).resolve()
    current = start.resolve()
    while True:
        if (current / GIT_DIR).exists():
            return current
        if current == boundary:
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent
