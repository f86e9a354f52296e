"""Template lookup helpers.

Templates ship inside the package under ``biome_scaffold/templates``. A
different template root can be supplied through
``BIOME_SCAFFOLD_TEMPLATES_DIR``.

Example:
    >>> biome_template_name("react", ".jsonc")
    'biome/react.jsonc'
"""

from __future__ import annotations

import os
from importlib import resources
from pathlib import Path

from .models import FormatterChoice, PackageManager, ProjectType

TEMPLATES_DIR_ENV = "BIOME_SCAFFOLD_TEMPLATES_DIR"
BIOME_TEMPLATES_DIR = "biome"
VSCODE_TEMPLATES_DIR = "vscode"
LEFTHOOK_TEMPLATES_DIR = "lefthook"


def _packaged_templates_root() -> Path:
    return Path(str(resources.files("biome_scaffold").joinpath("templates")))


def templates_root() -> Path:
    """Return the active template root directory."""
    override = os.environ.get(TEMPLATES_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return _packaged_templates_root()


def template_path(name: str) -> Path:
    """Map a logical template name such as ``vscode/biome-only.json`` to a path.

    The returned path is not checked for existence; callers report a missing
    template themselves.
    """
    return templates_root().joinpath(*name.split("/"))


def biome_template_name(project_type: ProjectType, extension: str) -> str:
    return f"{BIOME_TEMPLATES_DIR}/{project_type}{extension}"


def vscode_template_name(formatter: FormatterChoice) -> str:
    return f"{VSCODE_TEMPLATES_DIR}/{formatter}.json"


def lefthook_template_name(manager: PackageManager) -> str:
    return f"{LEFTHOOK_TEMPLATES_DIR}/{manager}.yml"
