from __future__ import annotations

from pathlib import Path

from biome_scaffold import templates
from biome_scaffold.exec import CommandRequest
from biome_scaffold.models import InitOptions, RunContext
from biome_scaffold.services.setup import lefthook
from biome_scaffold.services.setup.scripts import PREPARE_SCRIPT
from tests.biome_scaffold.helpers import FakePrompter, FakeRunner, write_package_json


def _ctx(base_dir: Path, **options: object) -> RunContext:
    return RunContext(base_dir=base_dir, options=InitOptions(**options))


def test_should_integrate_honours_explicit_flag(tmp_path: Path) -> None:
    scripted = _ctx(tmp_path, lefthook=True, biome_only=True)
    assert lefthook.should_integrate(scripted, FakePrompter())
    assert not lefthook.should_integrate(_ctx(tmp_path, lefthook=False), FakePrompter())


def test_should_integrate_skips_prompt_for_scripted_runs(tmp_path: Path) -> None:
    prompter = FakePrompter()

    assert not lefthook.should_integrate(_ctx(tmp_path, with_prettier=True), prompter)
    assert prompter.questions == []


def test_should_integrate_asks_otherwise(tmp_path: Path) -> None:
    prompter = FakePrompter(confirms=[True])

    assert lefthook.should_integrate(_ctx(tmp_path), prompter)
    assert prompter.questions == ["Set up lefthook for Git hooks?"]


def test_setup_replaces_config_generated_by_install(tmp_path: Path) -> None:
    """The default lefthook.yml written by the install is replaced without asking."""
    write_package_json(tmp_path)
    (tmp_path / "pnpm-lock.yaml").write_text("", encoding="utf-8")
    config = tmp_path / "lefthook.yml"

    def generate_default(request: CommandRequest) -> None:
        if request.argv[:2] == ("pnpm", "add"):
            config.write_text("# generated\n", encoding="utf-8")

    runner = FakeRunner(on_run=generate_default)

    detail = lefthook.setup_lefthook(_ctx(tmp_path), FakePrompter(), runner)

    assert detail.status == "success"
    assert config.read_bytes() == templates.template_path("lefthook/pnpm.yml").read_bytes()
    assert runner.argvs == [
        ("pnpm", "add", "-D", "lefthook@latest"),
        ("npm", "pkg", "set", PREPARE_SCRIPT),
        ("pnpm", "exec", "lefthook", "install"),
    ]
    assert runner.requests[0].capture_output is False


def test_setup_skips_install_when_already_a_dependency(tmp_path: Path) -> None:
    write_package_json(tmp_path, devDependencies={"lefthook": "1.7.0"})
    runner = FakeRunner()

    detail = lefthook.setup_lefthook(_ctx(tmp_path, use_bun=True), FakePrompter(), runner)

    assert detail.status == "success"
    assert detail.message == "created"
    assert runner.argvs == [
        ("npm", "pkg", "set", PREPARE_SCRIPT),
        ("bunx", "lefthook", "install"),
    ]


def test_setup_asks_before_replacing_existing_config(tmp_path: Path) -> None:
    write_package_json(tmp_path, devDependencies={"lefthook": "1.7.0"})
    config = tmp_path / "lefthook.yml"
    config.write_text("# mine\n", encoding="utf-8")
    runner = FakeRunner()
    prompter = FakePrompter(confirms=[False])

    detail = lefthook.setup_lefthook(_ctx(tmp_path), prompter, runner)

    assert detail.status == "skipped"
    assert detail.message == "kept existing lefthook.yml"
    assert config.read_text(encoding="utf-8") == "# mine\n"
    assert runner.requests == []
    assert prompter.questions == ["lefthook.yml already exists. Overwrite?"]


def test_setup_reports_install_failure(tmp_path: Path) -> None:
    write_package_json(tmp_path)
    runner = FakeRunner({("npm", "i", "-D", "lefthook@latest"): 1})

    detail = lefthook.setup_lefthook(_ctx(tmp_path), FakePrompter(), runner)

    assert detail.status == "error"
    assert detail.message == "Failed to install lefthook"
    assert not (tmp_path / "lefthook.yml").exists()


def test_setup_reports_hook_install_failure(tmp_path: Path) -> None:
    write_package_json(tmp_path, devDependencies={"lefthook": "1.7.0"})
    runner = FakeRunner({("npx", "lefthook", "install"): 1}, stderr="not a git repository")

    detail = lefthook.setup_lefthook(_ctx(tmp_path, force=True), FakePrompter(), runner)

    assert detail.status == "error"
    assert detail.message == "not a git repository"
    assert (tmp_path / "lefthook.yml").is_file()
