"""Install the Biome toolchain into the target project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ... import log, package_manager
from ...exec import CommandRequest, CommandRunner, run_with_runner
from ...manifest import read_package_json
from ...models import FORMATTER_CHOICE_VALUES, FormatterChoice, InitOptions, RunContext
from ...prompting import Prompter

BIOME_PACKAGE = "@biomejs/biome"
CONFIG_PACKAGE = "@mfyuu/biome-config"
PRETTIER_PACKAGE = "prettier"
BASE_PACKAGES = (BIOME_PACKAGE, CONFIG_PACKAGE)

INSTALL_FAILED_MESSAGE = "Failed to install dependencies"

DependencyOutcomeKind = Literal[
    "skipped",
    "no-package-json",
    "already-installed",
    "installed",
    "declined",
    "error",
]


@dataclass(frozen=True)
class DependencyOutcome:
    """Installer result; ``formatter_choice`` is set on every path."""

    kind: DependencyOutcomeKind
    formatter_choice: FormatterChoice
    packages: tuple[str, ...] = ()
    message: str | None = None


def formatter_from_options(options: InitOptions) -> FormatterChoice | None:
    if options.biome_only:
        return "biome-only"
    if options.with_prettier:
        return "with-prettier"
    return None


def resolve_formatter_choice(options: InitOptions, prompter: Prompter) -> FormatterChoice:
    chosen = formatter_from_options(options)
    if chosen is not None:
        return chosen
    return prompter.select(
        "How do you want to format your code?",
        list(FORMATTER_CHOICE_VALUES),
        default="biome-only",
    )


def required_packages(formatter: FormatterChoice) -> tuple[str, ...]:
    """Packages the chosen formatter setup needs.

    Example:
        >>> required_packages("with-prettier")
        ('@biomejs/biome', '@mfyuu/biome-config', 'prettier')
    """
    if formatter == "with-prettier":
        return (*BASE_PACKAGES, PRETTIER_PACKAGE)
    return BASE_PACKAGES


def _show_manual_commands(commands: list[tuple[str, ...]]) -> None:
    log.info("Please run the following command manually:")
    for argv in commands:
        log.code(package_manager.format_command(argv))


def install_dependencies(
    ctx: RunContext, prompter: Prompter, runner: CommandRunner | None = None
) -> DependencyOutcome:
    """Install missing Biome packages with the resolved package manager.

    Raises:
        ConflictingChoiceError: More than one ``--use-*`` flag is set.
    """
    options = ctx.options
    if options.skip_deps:
        log.info("Skipping dependency installation (--skip-deps option)")
        return DependencyOutcome("skipped", resolve_formatter_choice(options, prompter))

    package_json = read_package_json(ctx.base_dir)
    if package_json is None:
        log.warning("Warning: package.json not found. Skipping dependency installation.")
        log.info("No package.json found. Initialize it with:")
        log.code("npm init -y")
        return DependencyOutcome("no-package-json", resolve_formatter_choice(options, prompter))

    existing = [name for name in BASE_PACKAGES if package_json.has_dependency(name)]
    if existing:
        log.info("Dependencies already installed: " + ", ".join(existing))

    manager = package_manager.resolve(ctx.base_dir, options, prompter)
    formatter = resolve_formatter_choice(options, prompter)

    missing = tuple(
        name for name in required_packages(formatter) if not package_json.has_dependency(name)
    )
    if not missing:
        return DependencyOutcome("already-installed", formatter)

    commands = package_manager.install_commands(manager, missing)
    if not prompter.confirm(
        f"Install missing dependencies ({', '.join(missing)})?", default=True
    ):
        _show_manual_commands(commands)
        return DependencyOutcome("declined", formatter, missing)

    log.info(f"Installing dependencies: {', '.join(missing)}...")
    for argv in commands:
        try:
            result = run_with_runner(
                CommandRequest(argv=argv, cwd=ctx.base_dir, capture_output=False),
                runner=runner,
            )
        except OSError as exc:
            detail = str(exc) or "Unknown error"
        else:
            if result is not None and result.returncode == 0:
                continue
            detail = (
                f"missing required command: {argv[0]}"
                if result is None
                else f"exit code {result.returncode}: {package_manager.format_command(argv)}"
            )
        log.error(f"Failed to install dependencies: {detail}")
        _show_manual_commands(commands)
        return DependencyOutcome("error", formatter, missing, INSTALL_FAILED_MESSAGE)

    log.success("Dependencies installed successfully!")
    return DependencyOutcome("installed", formatter, missing)
