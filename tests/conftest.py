"""Shared fixtures: small workspaces built in tmp_path."""

from pathlib import Path

import pytest
from loguru import logger

from texspace.contexts.templating import DocumentTemplate


def write_workspace(root: Path, workspace_toml: str = "", documents: dict = None) -> Path:
    """
    Create a workspace layout under root.

    Args:
        root: Workspace root (created if missing)
        workspace_toml: Content of workspace.toml
        documents: Mapping of document key -> metadata.toml content

    Returns:
        root
    """
    root.mkdir(parents=True, exist_ok=True)
    (root / "workspace.toml").write_text(workspace_toml, encoding="utf-8")
    (root / "prelude").mkdir(exist_ok=True)
    (root / "prelude" / "main.tex").write_text("% prelude\n", encoding="utf-8")
    (root / "docs").mkdir(exist_ok=True)
    for key, metadata in (documents or {}).items():
        doc_dir = root / "docs" / key
        doc_dir.mkdir(parents=True, exist_ok=True)
        (doc_dir / "metadata.toml").write_text(metadata, encoding="utf-8")
        (doc_dir / "main.tex").write_text("Hello.\n", encoding="utf-8")
    return root


@pytest.fixture(scope="session")
def document_template():
    """One compiled template for the whole test session."""
    return DocumentTemplate()


@pytest.fixture
def workspace_root(tmp_path):
    """Workspace with a default document and a two-section report."""
    return write_workspace(
        tmp_path / "ws",
        documents={
            "notes": "",
            "report": 'sections = ["intro.tex", "body.tex"]\n',
        },
    )


@pytest.fixture
def make_workspace():
    """Factory fixture wrapping write_workspace."""
    return write_workspace


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by CLI runs so later tests never write to closed streams."""
    yield
    logger.remove()
