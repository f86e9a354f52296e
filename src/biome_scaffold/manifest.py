"""package.json reading and project-type detection."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from . import log
from .models import PROJECT_TYPE_VALUES, InitOptions, PackageJson, ProjectType
from .paths import PACKAGE_JSON
from .prompting import Prompter

NEXT_PACKAGES = ("next",)
REACT_PACKAGES = ("react", "react-dom")


def read_package_json(base_dir: Path) -> PackageJson | None:
    """Load ``package.json`` from ``base_dir``.

    Returns:
        The parsed manifest, or ``None`` when it is missing, not JSON, or not
        a JSON object with well-formed dependency tables.
    """
    path = base_dir / PACKAGE_JSON
    if not path.is_file():
        return None
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    try:
        return PackageJson.model_validate(payload)
    except ValidationError:
        return None


def detect_project_type(package_json: PackageJson | None) -> ProjectType | None:
    """Infer the project type from declared dependencies.

    Example:
        >>> detect_project_type(PackageJson(dependencies={"react": "18", "next": "14"}))
        'next'
        >>> detect_project_type(PackageJson())
        'base'
        >>> detect_project_type(None) is None
        True
    """
    if package_json is None:
        return None
    if any(package_json.has_dependency(name) for name in NEXT_PACKAGES):
        return "next"
    if any(package_json.has_dependency(name) for name in REACT_PACKAGES):
        return "react"
    return "base"


def resolve_project_type(
    base_dir: Path, options: InitOptions, prompter: Prompter
) -> ProjectType:
    """Return the explicit type, else the detected type, else ask the user."""
    if options.type is not None:
        log.info(f"Project type selected: {options.type}")
        return options.type
    detected = detect_project_type(read_package_json(base_dir))
    if detected is not None:
        log.info(f"Project type detected: {detected}")
        return detected
    selected = prompter.select(
        "Select your project type:", list(PROJECT_TYPE_VALUES), default="base"
    )
    log.info(f"Project type selected: {selected}")
    return selected
