"""Copy bundled config templates into the target project.

The same overwrite policy applies to every file:

1. If the destination exists and ``force`` is not set, ask before
   overwriting; a "no" leaves the file untouched.
2. A missing template is an error.
3. The template replaces the destination byte for byte. Existing files are
   never merged, so comments in a hand-edited ``biome.jsonc`` are lost.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Generic, Literal, TypeVar

from ... import log, paths, templates
from ...models import FormatterChoice, PackageManager, ProjectType
from ...prompting import Prompter, overwrite_message

S = TypeVar("S")

MaterializeKind = Literal["created", "overwritten", "skipped", "error"]
TEMPLATE_NOT_FOUND = "Template not found"


@dataclass(frozen=True)
class MaterializeResult:
    kind: MaterializeKind
    path: Path
    message: str | None = None

    @property
    def written(self) -> bool:
        return self.kind in ("created", "overwritten")


@dataclass(frozen=True)
class ConfigMaterializer(Generic[S]):
    """One config file and how to pick its template.

    Attributes:
        destination: Maps the project directory to the file to write.
        template_name: Maps ``(selector, destination)`` to a logical
            template name understood by ``templates.template_path``.
    """

    destination: Callable[[Path], Path]
    template_name: Callable[[S, Path], str]

    def materialize(
        self,
        base_dir: Path,
        selector: S,
        *,
        force: bool,
        prompter: Prompter,
    ) -> MaterializeResult:
        target = self.destination(base_dir)
        label = _display_name(base_dir, target)
        existed = target.exists()
        if existed and not force:
            if not prompter.confirm(overwrite_message(label), default=False):
                log.warning(f"Warning: {label} already exists!")
                log.warning("Use --force to overwrite the existing file")
                return MaterializeResult("skipped", target)

        source = templates.template_path(self.template_name(selector, target))
        if not source.is_file():
            log.error(f"Failed to create {label}: {TEMPLATE_NOT_FOUND} ({source})")
            return MaterializeResult("error", target, TEMPLATE_NOT_FOUND)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as exc:
            message = exc.strerror or str(exc) or "Unknown error"
            log.error(f"Failed to create {label}: {message}")
            return MaterializeResult("error", target, message)

        if existed:
            log.success(f"{label} overwritten successfully!")
            kind: MaterializeKind = "overwritten"
        else:
            log.success(f"{label} created successfully!")
            kind = "created"
        log.info(f"Location: {target}")
        return MaterializeResult(kind, target)


def _display_name(base_dir: Path, target: Path) -> str:
    try:
        return target.relative_to(base_dir).as_posix()
    except ValueError:
        return str(target)


def _biome_destination(base_dir: Path) -> Path:
    existing = paths.find_biome_config(base_dir)
    if existing is not None:
        return existing
    return paths.project_file_paths(base_dir).default_biome_config


def _biome_template(project_type: ProjectType, target: Path) -> str:
    extension = target.suffix or paths.DEFAULT_BIOME_EXTENSION
    return templates.biome_template_name(project_type, extension)


BIOME_CONFIG: ConfigMaterializer[ProjectType] = ConfigMaterializer(
    destination=_biome_destination,
    template_name=_biome_template,
)

VSCODE_SETTINGS: ConfigMaterializer[FormatterChoice] = ConfigMaterializer(
    destination=lambda base_dir: paths.project_file_paths(base_dir).vscode_settings,
    template_name=lambda formatter, _target: templates.vscode_template_name(formatter),
)

LEFTHOOK_CONFIG: ConfigMaterializer[PackageManager] = ConfigMaterializer(
    destination=lambda base_dir: paths.project_file_paths(base_dir).lefthook_config,
    template_name=lambda manager, _target: templates.lefthook_template_name(manager),
)
