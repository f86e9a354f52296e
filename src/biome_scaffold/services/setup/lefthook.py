"""Wire lefthook Git hooks into the target project."""

from __future__ import annotations

from ... import log, package_manager
from ...exec import CommandExecutionError, CommandRequest, CommandRunner, run_checked
from ...manifest import read_package_json
from ...models import PackageManager, RunContext, TaskDetail
from ...paths import project_file_paths
from ...prompting import Prompter
from ..errors import ServiceFailure
from .materialize import LEFTHOOK_CONFIG
from .scripts import PREPARE_SCRIPT, npm_pkg_set

LEFTHOOK_PACKAGE = "lefthook"
HOOK_INSTALL_TIMEOUT_SECONDS = 60.0


def should_integrate(ctx: RunContext, prompter: Prompter) -> bool:
    """Decide whether to set up lefthook.

    An explicit ``--lefthook``/``--no-lefthook`` wins. Otherwise the user is
    asked, unless a formatter flag was passed, which marks a scripted run.
    """
    if ctx.options.lefthook is not None:
        return ctx.options.lefthook
    if ctx.options.formatter_flag_given:
        return False
    return prompter.confirm("Set up lefthook for Git hooks?", default=False)


def _install_lefthook(
    ctx: RunContext, manager: PackageManager, runner: CommandRunner | None
) -> None:
    package_json = read_package_json(ctx.base_dir)
    if package_json is not None and package_json.has_dependency(LEFTHOOK_PACKAGE):
        log.info(f"{LEFTHOOK_PACKAGE} is already installed")
        return
    log.info(f"Installing {LEFTHOOK_PACKAGE} with {manager}...")
    for argv in package_manager.install_commands(manager, [LEFTHOOK_PACKAGE]):
        run_checked(
            CommandRequest(argv=argv, cwd=ctx.base_dir, capture_output=False),
            runner=runner,
        )


def _install_hooks(
    ctx: RunContext, manager: PackageManager, runner: CommandRunner | None
) -> None:
    argv = package_manager.hook_install_command(manager)
    with log.console().status("Installing Git hooks...", spinner="dots"):
        run_checked(
            CommandRequest(
                argv=argv,
                cwd=ctx.base_dir,
                timeout_seconds=HOOK_INSTALL_TIMEOUT_SECONDS,
            ),
            runner=runner,
        )


def setup_lefthook(
    ctx: RunContext, prompter: Prompter, runner: CommandRunner | None = None
) -> TaskDetail:
    """Install lefthook, write ``lefthook.yml`` and install the Git hooks.

    Installing lefthook can generate a default ``lefthook.yml``. When no
    config existed before the install, that file is replaced without asking;
    a config the user already had follows the usual force/prompt policy.
    """
    base_dir = ctx.base_dir
    manager = (
        package_manager.validate_options(ctx.options)
        or package_manager.detect(base_dir)
        or "npm"
    )
    existed_before = project_file_paths(base_dir).lefthook_config.exists()

    try:
        _install_lefthook(ctx, manager, runner)
    except (CommandExecutionError, OSError) as exc:
        log.error(f"Failed to install {LEFTHOOK_PACKAGE}: {exc}")
        return TaskDetail(status="error", message=f"Failed to install {LEFTHOOK_PACKAGE}")

    result = LEFTHOOK_CONFIG.materialize(
        base_dir,
        manager,
        force=ctx.options.force or not existed_before,
        prompter=prompter,
    )
    if not result.written:
        if result.kind == "error":
            return TaskDetail(status="error", message=result.message)
        return TaskDetail(status="skipped", message="kept existing lefthook.yml")

    try:
        npm_pkg_set(base_dir, PREPARE_SCRIPT, runner=runner)
        log.success("Added lefthook prepare script")
        _install_hooks(ctx, manager, runner)
    except (CommandExecutionError, ServiceFailure, OSError) as exc:
        log.error(f"Failed to set up lefthook: {exc}")
        return TaskDetail(status="error", message=str(exc) or "Unknown error")
    log.success("Git hooks installed")
    return TaskDetail(status="success", message=result.kind)
