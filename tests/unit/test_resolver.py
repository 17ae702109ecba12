"""Unit tests for upward workspace discovery."""

from pathlib import Path

import pytest

from texspace.contexts.workspace.exceptions import InvalidConfigError, PathNotFoundError
from texspace.contexts.workspace.resolver import find_workspace, find_workspace_root


@pytest.mark.unit
@pytest.mark.parametrize(
    "relative",
    [".", "docs", "docs/report", "docs/report/figures/raw", "prelude"],
)
def test_resolves_from_any_depth(workspace_root, document_template, relative):
    start = workspace_root / relative
    start.mkdir(parents=True, exist_ok=True)

    workspace = find_workspace(start, template=document_template)

    assert workspace.path == workspace_root


@pytest.mark.unit
def test_nearest_marker_wins(tmp_path, make_workspace, document_template):
    outer = make_workspace(tmp_path / "outer")
    inner = make_workspace(outer / "projects" / "inner")
    start = inner / "docs"

    assert find_workspace(start, template=document_template).path == inner
    assert find_workspace(outer / "projects", template=document_template).path == outer


@pytest.mark.unit
def test_nested_marker_below_start_is_ignored(workspace_root, make_workspace):
    """The walk never descends into docs/."""
    make_workspace(workspace_root / "docs" / "report" / "nested")

    assert find_workspace_root(workspace_root / "docs") == workspace_root


@pytest.mark.unit
def test_no_marker_is_not_found(tmp_path):
    start = tmp_path / "a" / "b"
    start.mkdir(parents=True)

    # Only meaningful if nothing above tmp_path is itself a workspace
    if any((parent / "workspace.toml").is_file() for parent in tmp_path.parents):
        pytest.skip("an ancestor of tmp_path holds workspace.toml")

    with pytest.raises(PathNotFoundError) as exc_info:
        find_workspace_root(start)

    assert exc_info.value.path == Path(exc_info.value.path.anchor)


@pytest.mark.unit
def test_missing_start_is_not_found(tmp_path):
    start = tmp_path / "does-not-exist"

    with pytest.raises(PathNotFoundError) as exc_info:
        find_workspace_root(start)

    assert exc_info.value.path == start


@pytest.mark.unit
def test_relative_start_is_made_absolute(workspace_root, monkeypatch):
    monkeypatch.chdir(workspace_root / "docs")

    assert find_workspace_root(Path("report")) == workspace_root


@pytest.mark.unit
def test_marker_directory_does_not_count(tmp_path, make_workspace):
    """A directory named workspace.toml is not a marker file."""
    root = make_workspace(tmp_path / "ws")
    fake = root / "docs" / "x"
    (fake / "workspace.toml").mkdir(parents=True)

    assert find_workspace_root(fake) == root


@pytest.mark.unit
def test_malformed_marker_is_a_hard_stop(tmp_path, make_workspace):
    """A broken workspace.toml stops the search instead of continuing upward."""
    make_workspace(tmp_path / "outer")
    inner = make_workspace(tmp_path / "outer" / "inner", workspace_toml="engine = [\n")

    with pytest.raises(InvalidConfigError):
        find_workspace(inner / "docs")
