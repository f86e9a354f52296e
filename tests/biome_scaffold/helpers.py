# ruff: noqa: E402

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, Sequence, TypeVar

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from biome_scaffold.exec import CommandRequest, CommandResult

T = TypeVar("T")


class FakePrompter:
    """Scripted answers for confirm/select; unexpected questions fail the test."""

    def __init__(self, confirms: Sequence[bool] = (), selects: Sequence[object] = ()) -> None:
        self.confirms = list(confirms)
        self.selects = list(selects)
        self.questions: list[str] = []
        self.select_calls: list[tuple[str, list[object], object]] = []

    def confirm(self, message: str, *, default: bool = False) -> bool:
        self.questions.append(message)
        if not self.confirms:
            raise AssertionError(f"unexpected confirm: {message}")
        return self.confirms.pop(0)

    def select(self, message: str, choices: Sequence[T], *, default: T | None = None) -> T:
        self.questions.append(message)
        self.select_calls.append((message, list(choices), default))
        if not self.selects:
            raise AssertionError(f"unexpected select: {message}")
        answer = self.selects.pop(0)
        assert answer in choices
        return answer  # type: ignore[return-value]


class FakeRunner:
    """Records command requests and answers them from ``returncodes``."""

    def __init__(
        self,
        returncodes: dict[tuple[str, ...], int] | None = None,
        *,
        missing: Sequence[str] = (),
        on_run: Callable[[CommandRequest], None] | None = None,
        stderr: str = "",
    ) -> None:
        self.returncodes = returncodes or {}
        self.missing = set(missing)
        self.on_run = on_run
        self.stderr = stderr
        self.requests: list[CommandRequest] = []

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]

    def run(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        if request.argv[0] in self.missing:
            return None
        if self.on_run is not None:
            self.on_run(request)
        returncode = self.returncodes.get(request.argv, 0)
        return CommandResult(
            argv=request.argv,
            returncode=returncode,
            stdout="",
            stderr=self.stderr if returncode else "",
        )


def write_package_json(base_dir: Path, **payload: object) -> Path:
    path = base_dir / "package.json"
    data = {"name": "test-project", "version": "1.0.0"}
    data.update(payload)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
