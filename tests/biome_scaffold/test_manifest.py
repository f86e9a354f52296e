from __future__ import annotations

import json
from pathlib import Path

import pytest

from biome_scaffold import manifest
from biome_scaffold.models import InitOptions, PackageJson
from tests.biome_scaffold.helpers import FakePrompter, write_package_json


def test_read_package_json_returns_none_when_missing(tmp_path: Path) -> None:
    assert manifest.read_package_json(tmp_path) is None


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"dependencies": ["react"]}'])
def test_read_package_json_returns_none_when_unusable(tmp_path: Path, content: str) -> None:
    (tmp_path / "package.json").write_text(content, encoding="utf-8")

    assert manifest.read_package_json(tmp_path) is None


def test_read_package_json_keeps_unknown_fields(tmp_path: Path) -> None:
    write_package_json(tmp_path, devDependencies={"@biomejs/biome": "2.0.0"}, private=True)

    package_json = manifest.read_package_json(tmp_path)

    assert package_json is not None
    assert package_json.name == "test-project"
    assert package_json.has_dependency("@biomejs/biome")
    assert package_json.model_extra == {"version": "1.0.0", "private": True}


def test_read_package_json_accepts_null_tables(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        json.dumps({"dependencies": None}), encoding="utf-8"
    )

    package_json = manifest.read_package_json(tmp_path)

    assert package_json is not None
    assert package_json.dependencies == {}


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"dependencies": {"next": "14.0.0", "react": "18.2.0"}}, "next"),
        ({"dependencies": {"react": "18.2.0"}, "devDependencies": {"next": "14.0.0"}}, "next"),
        ({"devDependencies": {"next": "latest"}}, "next"),
        ({"dependencies": {"react": "18.2.0"}}, "react"),
        ({"devDependencies": {"react-dom": "18.2.0"}}, "react"),
        ({"dependencies": {"vue": "3.0.0"}}, "base"),
        ({}, "base"),
    ],
)
def test_detect_project_type(payload: dict, expected: str) -> None:
    assert manifest.detect_project_type(PackageJson.model_validate(payload)) == expected


def test_detect_project_type_returns_none_without_manifest() -> None:
    assert manifest.detect_project_type(None) is None


def test_resolve_project_type_prefers_explicit_type(tmp_path: Path) -> None:
    write_package_json(tmp_path, dependencies={"next": "14.0.0"})

    resolved = manifest.resolve_project_type(tmp_path, InitOptions(type="react"), FakePrompter())

    assert resolved == "react"


def test_resolve_project_type_detects_from_manifest(tmp_path: Path) -> None:
    write_package_json(tmp_path, dependencies={"react": "18.2.0"})

    resolved = manifest.resolve_project_type(tmp_path, InitOptions(), FakePrompter())

    assert resolved == "react"


def test_resolve_project_type_prompts_without_manifest(tmp_path: Path) -> None:
    prompter = FakePrompter(selects=["next"])

    resolved = manifest.resolve_project_type(tmp_path, InitOptions(), prompter)

    assert resolved == "next"
    _message, choices, default = prompter.select_calls[0]
    assert choices == ["base", "react", "next"]
    assert default == "base"
