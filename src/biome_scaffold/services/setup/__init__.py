"""Setup pipeline services."""

from .dependencies import DependencyOutcome, install_dependencies
from .initialize import InitializeProjectRequest, InitializeProjectService
from .lefthook import setup_lefthook, should_integrate
from .materialize import (
    BIOME_CONFIG,
    LEFTHOOK_CONFIG,
    VSCODE_SETTINGS,
    ConfigMaterializer,
    MaterializeResult,
)
from .scripts import BIOME_SCRIPTS, PREPARE_SCRIPT, add_scripts

__all__ = [
    "BIOME_CONFIG",
    "BIOME_SCRIPTS",
    "LEFTHOOK_CONFIG",
    "PREPARE_SCRIPT",
    "VSCODE_SETTINGS",
    "ConfigMaterializer",
    "DependencyOutcome",
    "InitializeProjectRequest",
    "InitializeProjectService",
    "MaterializeResult",
    "add_scripts",
    "install_dependencies",
    "setup_lefthook",
    "should_integrate",
]
