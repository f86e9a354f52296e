"""Subprocess helpers for running package-manager commands."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol

from . import log

TIMEOUT_RETURNCODE = 124
KILL_GRACE_SECONDS = 5.0


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request.

    ``capture_output=False`` lets the child inherit stdin/stdout/stderr so
    long-running installs stream their progress to the terminal.
    """

    argv: tuple[str, ...]
    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    capture_output: bool = True
    timeout_seconds: float | None = None


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of one command."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False


class CommandRunner(Protocol):
    """Anything that can run a ``CommandRequest``; tests substitute a fake."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


def resolve_executable(name: str) -> str:
    """Resolve ``name`` on PATH, honouring PATHEXT (``npm.cmd``) on Windows."""
    return shutil.which(name) or name


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess.

    Returns ``None`` when the executable cannot be found. On timeout the
    child is terminated, given ``kill_grace_seconds`` to exit, then killed.
    """

    def __init__(self, kill_grace_seconds: float = KILL_GRACE_SECONDS) -> None:
        self._kill_grace_seconds = kill_grace_seconds

    def run(self, request: CommandRequest) -> CommandResult | None:
        if not request.argv:
            return None
        argv = [resolve_executable(request.argv[0]), *request.argv[1:]]
        pipe = subprocess.PIPE if request.capture_output else None
        log.trace(f"running: {' '.join(request.argv)}")
        try:
            process = subprocess.Popen(
                argv,
                cwd=request.cwd,
                env=request.env,
                stdout=pipe,
                stderr=pipe,
                text=True,
            )
        except FileNotFoundError:
            return None

        try:
            stdout, stderr = process.communicate(timeout=request.timeout_seconds)
        except subprocess.TimeoutExpired:
            stdout, stderr = self._stop(process)
            return CommandResult(
                argv=request.argv,
                returncode=TIMEOUT_RETURNCODE,
                stdout=stdout or "",
                stderr=stderr or "",
                timed_out=True,
            )
        return CommandResult(
            argv=request.argv,
            returncode=process.returncode,
            stdout=stdout or "",
            stderr=stderr or "",
        )

    def _stop(self, process: subprocess.Popen[str]) -> tuple[str | None, str | None]:
        process.terminate()
        try:
            return process.communicate(timeout=self._kill_grace_seconds)
        except subprocess.TimeoutExpired:
            process.kill()
            return process.communicate()


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def default_runner() -> CommandRunner:
    return _DEFAULT_COMMAND_RUNNER


@dataclass(frozen=True)
class CommandExecutionError(RuntimeError):
    """Raised when a command is missing, times out or exits non-zero."""

    request: CommandRequest
    detail: str
    result: CommandResult | None = None

    def __str__(self) -> str:
        return self.detail


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Run ``request`` with ``runner`` or the subprocess-backed default."""
    active_runner = runner or default_runner()
    return active_runner.run(request)


def _missing_command_detail(request: CommandRequest) -> str:
    argv = request.argv
    if not argv:
        return "missing required command"
    return f"missing required command: {argv[0]}"


def _command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    command_text = " ".join(request.argv)
    if result.timed_out:
        timeout = request.timeout_seconds
        return f"command timed out after {timeout:g}s: {command_text}"
    output = (result.stderr or "").strip()
    if output:
        return output
    return f"command failed with exit code {result.returncode}: {command_text}"


def run_checked(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult:
    """Execute a command and raise ``CommandExecutionError`` unless it succeeds."""
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise CommandExecutionError(
            request=request,
            detail=_missing_command_detail(request),
        )
    if result.timed_out or result.returncode != 0:
        raise CommandExecutionError(
            request=request,
            result=result,
            detail=_command_failure_detail(request, result),
        )
    return result
