"""Command-line entry point for ``biome-scaffold``."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from . import log as scaffold_log
from .cli_defaults import (
    ResolvedCliDefault,
    describe_translated_default,
    resolve_bool_default,
    resolve_type_default,
)
from .models import PROJECT_TYPE_VALUES, InitOptions
from .services.setup import InitializeProjectService

app = typer.Typer(
    name="biome-scaffold",
    help="Set up Biome, VS Code settings and lefthook in an existing project.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _log_level_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in scaffold_log.LEVEL_NAMES:
        raise typer.BadParameter(
            "expected one of: " + ", ".join(scaffold_log.LEVEL_NAMES)
        )
    return normalized


def _report_env_defaults(*values: ResolvedCliDefault[object]) -> None:
    for value in values:
        if value.source == "env":
            scaffold_log.debug(describe_translated_default(value))


@app.command()
def init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing files without asking.")
    ] = False,
    local: Annotated[
        bool,
        typer.Option("--local", "-l", help="Use the current directory instead of the Git root."),
    ] = False,
    skip_deps: Annotated[
        bool, typer.Option("--skip-deps", help="Skip dependency installation.")
    ] = False,
    use_npm: Annotated[bool, typer.Option("--use-npm", help="Use npm.")] = False,
    use_yarn: Annotated[bool, typer.Option("--use-yarn", help="Use yarn.")] = False,
    use_pnpm: Annotated[bool, typer.Option("--use-pnpm", help="Use pnpm.")] = False,
    use_bun: Annotated[bool, typer.Option("--use-bun", help="Use bun.")] = False,
    project_type: Annotated[
        Optional[str],
        typer.Option(
            "--type",
            "-t",
            help="Project type: " + ", ".join(PROJECT_TYPE_VALUES) + ".",
            show_default=False,
        ),
    ] = None,
    biome_only: Annotated[
        bool, typer.Option("--biome-only", help="Format with Biome only.")
    ] = False,
    with_prettier: Annotated[
        bool, typer.Option("--with-prettier", help="Use Prettier alongside Biome.")
    ] = False,
    lefthook: Annotated[
        Optional[bool],
        typer.Option(
            "--lefthook/--no-lefthook",
            help="Set up lefthook Git hooks (asked interactively when omitted).",
            show_default=False,
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="Log level: " + ", ".join(scaffold_log.LEVEL_NAMES) + ".",
            callback=_log_level_callback,
            show_default=False,
        ),
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable coloured output.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Write biome config, editor settings and Git hooks into the project."""
    del version
    if log_level is not None:
        scaffold_log.set_level(log_level)
    if no_color:
        scaffold_log.set_no_color(True)

    resolved_force = resolve_bool_default("--force", force)
    resolved_local = resolve_bool_default("--local", local)
    resolved_skip_deps = resolve_bool_default("--skip-deps", skip_deps)
    resolved_type = resolve_type_default(project_type)
    _report_env_defaults(resolved_force, resolved_local, resolved_skip_deps, resolved_type)

    options = InitOptions(
        force=resolved_force.value,
        local=resolved_local.value,
        skip_deps=resolved_skip_deps.value,
        use_npm=use_npm,
        use_yarn=use_yarn,
        use_pnpm=use_pnpm,
        use_bun=use_bun,
        type=resolved_type.value,
        biome_only=biome_only,
        with_prettier=with_prettier,
        lefthook=lefthook,
    )
    result = InitializeProjectService.run_default(options=options, cwd=Path.cwd())
    raise typer.Exit(code=0 if result.success else 1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
