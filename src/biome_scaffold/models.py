"""Pydantic models for setup options, manifests and task outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PACKAGE_MANAGER_VALUES = ("npm", "yarn", "pnpm", "bun")
PackageManager = Literal["npm", "yarn", "pnpm", "bun"]

PROJECT_TYPE_VALUES = ("base", "react", "next")
ProjectType = Literal["base", "react", "next"]

FORMATTER_CHOICE_VALUES = ("biome-only", "with-prettier")
FormatterChoice = Literal["biome-only", "with-prettier"]

TaskStatus = Literal["success", "error", "skipped"]


class InitOptions(BaseModel):
    """Flags for one ``biome-scaffold`` invocation.

    Mutual exclusion between the ``use_*`` flags and between the formatter
    flags is checked by the orchestrator, so a conflicting combination can be
    reported as a failed run instead of a construction error.

    Attributes:
        force: Overwrite existing files without asking.
        local: Use the current directory instead of the Git root.
        skip_deps: Do not install npm dependencies.
        use_npm: Force npm as the package manager.
        use_yarn: Force yarn as the package manager.
        use_pnpm: Force pnpm as the package manager.
        use_bun: Force bun as the package manager.
        type: Explicit project type.
        biome_only: Format with Biome only.
        with_prettier: Format with Prettier alongside Biome.
        lefthook: Set up lefthook; ``None`` means ask (when interactive).

    Example:
        >>> InitOptions(local=True, type="react").type
        'react'
    """

    model_config = ConfigDict(frozen=True)

    force: bool = False
    local: bool = False
    skip_deps: bool = False
    use_npm: bool = False
    use_yarn: bool = False
    use_pnpm: bool = False
    use_bun: bool = False
    type: ProjectType | None = None
    biome_only: bool = False
    with_prettier: bool = False
    lefthook: bool | None = None

    @property
    def formatter_flag_given(self) -> bool:
        return self.biome_only or self.with_prettier


class PackageJson(BaseModel):
    """The parts of ``package.json`` this tool reads.

    Example:
        >>> PackageJson.model_validate({"devDependencies": {"next": "14"}}).dev_dependencies
        {'next': '14'}
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str | None = None
    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    @field_validator("scripts", "dependencies", "dev_dependencies", mode="before")
    @classmethod
    def normalize_tables(cls, value: object) -> object:
        if value is None:
            return {}
        return value

    def has_dependency(self, package_name: str) -> bool:
        return package_name in self.dependencies or package_name in self.dev_dependencies


class TaskDetail(BaseModel):
    status: TaskStatus = "skipped"
    message: str | None = None


class TaskResults(BaseModel):
    """Per-task outcome record owned by the orchestrator."""

    dependencies: TaskDetail = Field(default_factory=TaskDetail)
    biome_config: TaskDetail = Field(default_factory=TaskDetail)
    scripts: TaskDetail = Field(default_factory=TaskDetail)
    settings_file: TaskDetail = Field(default_factory=TaskDetail)
    lefthook: TaskDetail = Field(default_factory=TaskDetail)

    def any_success(self) -> bool:
        return any(
            detail.status == "success"
            for detail in (
                self.dependencies,
                self.biome_config,
                self.scripts,
                self.settings_file,
                self.lefthook,
            )
        )


@dataclass(frozen=True)
class RunContext:
    """Explicit per-run context threaded through every setup step."""

    base_dir: Path
    options: InitOptions


@dataclass(frozen=True)
class InitResult:
    """Overall outcome of one run; ``tasks`` is ``None`` for pre-task failures."""

    success: bool
    target_path: Path | None = None
    error: str | None = None
    tasks: TaskResults | None = None
