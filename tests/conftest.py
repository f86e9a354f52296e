# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import biome_scaffold.io as io
import biome_scaffold.log as scaffold_log

DOCTEST_MODULES = {
    ROOT / "src" / "biome_scaffold" / "__init__.py",
    ROOT / "src" / "biome_scaffold" / "log.py",
    ROOT / "src" / "biome_scaffold" / "manifest.py",
    ROOT / "src" / "biome_scaffold" / "models.py",
    ROOT / "src" / "biome_scaffold" / "package_manager.py",
    ROOT / "src" / "biome_scaffold" / "paths.py",
    ROOT / "src" / "biome_scaffold" / "summary.py",
    ROOT / "src" / "biome_scaffold" / "templates.py",
    ROOT / "src" / "biome_scaffold" / "services" / "setup" / "dependencies.py",
    ROOT / "src" / "biome_scaffold" / "services" / "setup" / "scripts.py",
}


@pytest.fixture(autouse=True)
def _default_terminal_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(scaffold_log, "_state", scaffold_log._LogState())
    for name in (
        "BIOME_SCAFFOLD_FORCE",
        "BIOME_SCAFFOLD_LOCAL",
        "BIOME_SCAFFOLD_SKIP_DEPS",
        "BIOME_SCAFFOLD_TYPE",
        "BIOME_SCAFFOLD_LOG_LEVEL",
        "BIOME_SCAFFOLD_TEMPLATES_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
