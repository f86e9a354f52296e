"""Top-level setup pipeline behind ``biome-scaffold``."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict

from ... import log, manifest, package_manager, paths
from ...exec import CommandExecutionError, CommandRunner
from ...models import FormatterChoice, InitOptions, InitResult, RunContext, TaskDetail, TaskResults
from ...prompting import ConsolePrompter, Prompter
from ...summary import echo_task, show_setup_summary
from ..base import BaseService
from ..errors import ConflictingChoiceError, GitRootNotFoundError, ServiceFailure
from .dependencies import DependencyOutcome, install_dependencies, resolve_formatter_choice
from .lefthook import setup_lefthook, should_integrate
from .materialize import BIOME_CONFIG, VSCODE_SETTINGS, MaterializeResult
from .scripts import BIOME_SCRIPTS, add_scripts

CONFLICTING_FORMATTER_FLAGS = "Conflicting formatter flags"

ShowSummary = Callable[[TaskResults], None]


class InitializeProjectRequest(BaseModel):
    options: InitOptions
    cwd: Path
    home: Path | None = None
    model_config = ConfigDict(arbitrary_types_allowed=True)


def determine_base_dir(request: InitializeProjectRequest) -> Path:
    """Return the directory to scaffold.

    Raises:
        GitRootNotFoundError: ``--local`` is not set and no ``.git`` marker
            exists between the working directory and the home directory.
    """
    if request.options.local:
        log.info("Using current directory (--local option specified)")
        return request.cwd
    root = paths.find_git_root(request.cwd, home=request.home)
    if root is None:
        raise GitRootNotFoundError()
    log.info(f"Found git repository root: {root}")
    return root


def validate_formatter_flags(options: InitOptions) -> None:
    if options.biome_only and options.with_prettier:
        raise ConflictingChoiceError(
            CONFLICTING_FORMATTER_FLAGS,
            recovery_hint="Use either --biome-only or --with-prettier, not both.",
        )


def dependency_detail(outcome: DependencyOutcome) -> TaskDetail:
    match outcome.kind:
        case "installed":
            return TaskDetail(status="success", message="installed")
        case "already-installed":
            return TaskDetail(status="success", message="already installed")
        case "skipped":
            return TaskDetail(status="skipped", message="--skip-deps")
        case "no-package-json":
            return TaskDetail(status="skipped", message="package.json not found")
        case "declined":
            return TaskDetail(status="skipped", message="installation declined")
        case "error":
            return TaskDetail(status="error", message=outcome.message)


def materialize_detail(result: MaterializeResult) -> TaskDetail:
    match result.kind:
        case "created" | "overwritten":
            return TaskDetail(status="success", message=result.kind)
        case "skipped":
            return TaskDetail(status="skipped", message="kept existing file")
        case "error":
            return TaskDetail(status="error", message=result.message)


class InitializeProjectService(BaseService[InitializeProjectRequest, InitResult]):
    """Run every setup task in order and aggregate their outcomes.

    Flag conflicts and a missing Git root abort the run before any task.
    After that, each task records exactly one ``TaskDetail`` and a failing
    task never stops the ones after it.
    """

    def __init__(
        self,
        prompter: Prompter,
        runner: CommandRunner | None = None,
        show_summary: ShowSummary = show_setup_summary,
    ) -> None:
        self._prompter = prompter
        self._runner = runner
        self._show_summary = show_summary

    @classmethod
    def run_default(cls, *, options: InitOptions, cwd: Path) -> InitResult:
        """Run the pipeline against the real terminal and subprocesses."""
        service = cls(prompter=ConsolePrompter())
        return service(InitializeProjectRequest(options=options, cwd=cwd))

    def _run(self, request: InitializeProjectRequest) -> InitResult:
        options = request.options
        base_dir = determine_base_dir(request)
        package_manager.validate_options(options)
        validate_formatter_flags(options)

        ctx = RunContext(base_dir=base_dir, options=options)
        tasks = TaskResults()
        project_type = manifest.resolve_project_type(base_dir, options, self._prompter)

        tasks.dependencies, formatter = self._dependencies(ctx)
        echo_task("Dependencies", tasks.dependencies)

        tasks.biome_config = materialize_detail(
            BIOME_CONFIG.materialize(
                base_dir, project_type, force=options.force, prompter=self._prompter
            )
        )
        echo_task("biome.json", tasks.biome_config)

        tasks.scripts = self._scripts(ctx)
        echo_task("Scripts", tasks.scripts)

        tasks.settings_file = materialize_detail(
            VSCODE_SETTINGS.materialize(
                base_dir, formatter, force=options.force, prompter=self._prompter
            )
        )
        echo_task(".vscode/settings.json", tasks.settings_file)

        if should_integrate(ctx, self._prompter):
            tasks.lefthook = setup_lefthook(ctx, self._prompter, self._runner)
            echo_task("lefthook", tasks.lefthook)

        self._show_summary(tasks)
        return InitResult(
            success=tasks.any_success(),
            target_path=paths.project_file_paths(base_dir).vscode_settings,
            tasks=tasks,
        )

    def _handle_failure(self, error: ServiceFailure) -> InitResult:
        log.error(f"Error: {error.message}")
        if error.recovery_hint:
            log.error(error.recovery_hint)
        return InitResult(success=False, error=error.message)

    def _dependencies(self, ctx: RunContext) -> tuple[TaskDetail, FormatterChoice]:
        # Only failures raised before the formatter question reach this handler.
        try:
            outcome = install_dependencies(ctx, self._prompter, self._runner)
        except OSError as exc:
            log.error(f"Failed to handle dependencies: {exc}")
            detail = TaskDetail(status="error", message=str(exc) or "Unknown error")
            return detail, resolve_formatter_choice(ctx.options, self._prompter)
        return dependency_detail(outcome), outcome.formatter_choice

    def _scripts(self, ctx: RunContext) -> TaskDetail:
        if not paths.project_file_paths(ctx.base_dir).package_json.is_file():
            return TaskDetail(status="skipped", message="package.json not found")
        try:
            add_scripts(ctx.base_dir, BIOME_SCRIPTS, runner=self._runner)
        except (CommandExecutionError, ServiceFailure, OSError) as exc:
            log.error(f"Failed to add Biome scripts to package.json. {exc}")
            return TaskDetail(status="error", message=str(exc) or "Unknown error")
        log.success("Added Biome dev scripts.")
        return TaskDetail(status="success", message="added")
