from .base import BaseService
from .errors import (
    ConflictingChoiceError,
    DependencyMissingError,
    GitRootNotFoundError,
    ServiceFailure,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "ConflictingChoiceError",
    "DependencyMissingError",
    "GitRootNotFoundError",
    "ServiceFailure",
    "ValidationFailedError",
]
