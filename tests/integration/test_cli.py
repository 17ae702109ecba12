"""
Integration tests for the CLI scripts under scripts/.
"""

import importlib.util
from pathlib import Path

import pytest
from typer.testing import CliRunner

SCRIPTS_PATH = Path(__file__).resolve().parents[2] / "scripts"

runner = CliRunner()


def load_script(name: str):
    """Import a script from scripts/ as a module."""
    spec = importlib.util.spec_from_file_location(f"texspace_script_{name}", SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def build_app():
    return load_script("build_document").app


@pytest.fixture(scope="module")
def init_app():
    return load_script("init_workspace").app


@pytest.fixture(scope="module")
def list_app():
    return load_script("list_documents").app


@pytest.mark.integration
def test_generate_prints_source(workspace_root, monkeypatch, build_app):
    monkeypatch.chdir(workspace_root)

    result = runner.invoke(build_app, ["report", "--generate"])

    assert result.exit_code == 0, result.output
    assert "\\documentclass{article}" in result.stdout
    assert result.stdout.index("intro.tex") < result.stdout.index("body.tex")
    assert not (workspace_root / "docs" / "report" / "output.pdf").exists()


@pytest.mark.integration
def test_generate_infers_document_from_cwd(workspace_root, monkeypatch, build_app):
    monkeypatch.chdir(workspace_root / "docs" / "report")

    result = runner.invoke(build_app, ["-g"])

    assert result.exit_code == 0, result.output
    assert "intro.tex" in result.stdout


@pytest.mark.integration
def test_no_document_outside_docs(workspace_root, monkeypatch, build_app):
    monkeypatch.chdir(workspace_root)

    result = runner.invoke(build_app, ["-g"])

    assert result.exit_code == 2


@pytest.mark.integration
def test_missing_document_is_one_line_error(workspace_root, monkeypatch, build_app):
    monkeypatch.chdir(workspace_root)

    result = runner.invoke(build_app, ["missing", "-g"])

    assert result.exit_code == 1
    assert "path not found" in result.output


@pytest.mark.integration
def test_init_then_list(tmp_path, monkeypatch, init_app, list_app):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(init_app, ["workspace", "thesis", "--engine", "xelatex"])
    assert result.exit_code == 0, result.output
    assert 'engine = "xelatex"' in (tmp_path / "thesis" / "workspace.toml").read_text()

    monkeypatch.chdir(tmp_path / "thesis")
    result = runner.invoke(init_app, ["document", "chapter1"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(list_app, [])
    assert result.exit_code == 0, result.output
    assert "chapter1" in result.output


@pytest.mark.integration
def test_init_refuses_nonempty(tmp_path, monkeypatch, init_app):
    (tmp_path / "thesis").mkdir()
    (tmp_path / "thesis" / "draft.tex").write_text("x")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(init_app, ["workspace", "thesis"])

    assert result.exit_code == 1
    assert "not empty" in result.output
