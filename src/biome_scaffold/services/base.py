"""Request/response service contract shared by the setup pipeline."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .errors import ServiceFailure

RequestT = TypeVar("RequestT")
ResultT = TypeVar("ResultT")


class BaseService(ABC, Generic[RequestT, ResultT]):
    """Run ``_run`` and route expected failures through ``_handle_failure``.

    Only ``ServiceFailure`` is intercepted. Any other exception is a bug and
    propagates unchanged.
    """

    def __call__(self, request: RequestT) -> ResultT:
        try:
            return self._run(request)
        except ServiceFailure as failure:
            return self._handle_failure(failure)

    @abstractmethod
    def _run(self, request: RequestT) -> ResultT: ...

    def _handle_failure(self, error: ServiceFailure) -> ResultT:
        raise error
