"""Expected failures that abort a setup run before any task starts.

Failures inside an individual task are recorded on that task instead.
"""

from __future__ import annotations

from typing import Literal

ServiceFailureCode = Literal["validation_failed", "dependency_missing"]


class ServiceFailure(Exception):
    """A run-ending failure with a message for the user and an optional hint."""

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class ConflictingChoiceError(ValidationFailedError):
    """Mutually exclusive CLI flags were combined."""


class DependencyMissingError(ServiceFailure):
    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("dependency_missing", message, recovery_hint=recovery_hint)


class GitRootNotFoundError(DependencyMissingError):
    """No ``.git`` marker between the working directory and the home directory."""

    def __init__(self) -> None:
        super().__init__(
            "Git repository not found",
            recovery_hint="Use --local option to create in the current directory instead.",
        )
