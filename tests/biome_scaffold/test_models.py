from __future__ import annotations

import pytest
from pydantic import ValidationError

from biome_scaffold.models import InitOptions, PackageJson, TaskDetail, TaskResults


def test_init_options_reject_unknown_project_type() -> None:
    with pytest.raises(ValidationError):
        InitOptions(type="vue")


def test_init_options_are_frozen() -> None:
    options = InitOptions()

    with pytest.raises(ValidationError):
        options.force = True  # type: ignore[misc]


def test_formatter_flag_given() -> None:
    assert InitOptions(with_prettier=True).formatter_flag_given
    assert not InitOptions().formatter_flag_given


def test_package_json_reads_dev_dependencies_alias() -> None:
    package_json = PackageJson.model_validate(
        {"devDependencies": {"lefthook": "1.7.0"}, "scripts": None}
    )

    assert package_json.has_dependency("lefthook")
    assert not package_json.has_dependency("prettier")
    assert package_json.scripts == {}


def test_task_results_default_to_skipped() -> None:
    tasks = TaskResults()

    assert tasks.lefthook == TaskDetail(status="skipped", message=None)
    assert not tasks.any_success()


def test_any_success_counts_lefthook() -> None:
    tasks = TaskResults(lefthook=TaskDetail(status="success", message="created"))

    assert tasks.any_success()
