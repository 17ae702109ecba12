"""
Workspace scaffolding.

Creates the fixed directory layout for new workspaces and documents:

    <root>/workspace.toml
    <root>/prelude/main.tex
    <root>/docs/<key>/metadata.toml
    <root>/docs/<key>/main.tex
"""

import shutil
from pathlib import Path
from typing import Optional

from texspace.contexts.templating.registries import DocumentTemplate
from texspace.contexts.workspace.exceptions import WorkspaceExistsError, WorkspaceIOError
from texspace.contexts.workspace.logger import log_scaffold_created
from texspace.contexts.workspace.models import Document, Workspace
from texspace.contexts.workspace.schemas import (
    DEFAULT_DOCUMENT_CLASS,
    DEFAULT_INCLUDE,
    DOCUMENT_METADATA,
    WORKSPACE_MARKER,
    Engine,
)

PRELUDE_STUB = "% Shared preamble: packages and macros used by every document\n"
SECTION_STUB = "% Document body\n"


def _is_nonempty_dir(path: Path) -> bool:
    return path.exists() and (not path.is_dir() or any(path.iterdir()))


def _discard_partial(target_dir: Path, existed: bool) -> None:
    """Remove whatever a failed scaffold left behind in target_dir."""
    if not existed:
        shutil.rmtree(target_dir, ignore_errors=True)
        return
    for child in target_dir.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child, ignore_errors=True)
        else:
            child.unlink(missing_ok=True)


def _toml_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def init_workspace(
    target_dir: Path,
    engine: Optional[Engine] = None,
    template: Optional[DocumentTemplate] = None,
) -> Workspace:
    """
    Scaffold an empty workspace.

    The workspace.toml marker is written last, and a failed scaffold is
    removed again so a retry starts from an empty target.

    Args:
        target_dir: Directory to initialize (created if missing)
        engine: Typesetting engine to record in workspace.toml
        template: Shared document template for the returned workspace

    Returns:
        The newly created Workspace

    Raises:
        WorkspaceExistsError: If target_dir exists and is not empty
        WorkspaceIOError: If the layout cannot be written
    """
    target_dir = Path(target_dir).absolute()
    if _is_nonempty_dir(target_dir):
        raise WorkspaceExistsError(target_dir)

    existed = target_dir.exists()
    marker = "# Workspace settings\n"
    if engine is not None:
        marker += f"engine = {_toml_string(engine.value)}\n"

    try:
        (target_dir / "prelude").mkdir(parents=True)
        (target_dir / "docs").mkdir()
        (target_dir / "prelude" / DEFAULT_INCLUDE).write_text(PRELUDE_STUB, encoding="utf-8")
        (target_dir / WORKSPACE_MARKER).write_text(marker, encoding="utf-8")
    except OSError as e:
        _discard_partial(target_dir, existed)
        raise WorkspaceIOError(target_dir, e) from e

    log_scaffold_created("workspace", target_dir)
    return Workspace.load(target_dir, template=template)


def add_document(
    workspace: Workspace, key: str, document_class: str = DEFAULT_DOCUMENT_CLASS
) -> Document:
    """
    Scaffold a new document under docs/<key>/.

    Raises:
        WorkspaceExistsError: If docs/<key>/ exists and is not empty
        WorkspaceIOError: If the files cannot be written
    """
    doc_dir = workspace.document_dir(key)
    if _is_nonempty_dir(doc_dir):
        raise WorkspaceExistsError(doc_dir)

    existed = doc_dir.exists()
    metadata = f"document_class = {_toml_string(document_class)}\n"
    try:
        doc_dir.mkdir(parents=True, exist_ok=True)
        (doc_dir / DEFAULT_INCLUDE).write_text(SECTION_STUB, encoding="utf-8")
        (doc_dir / DOCUMENT_METADATA).write_text(metadata, encoding="utf-8")
    except OSError as e:
        _discard_partial(doc_dir, existed)
        raise WorkspaceIOError(doc_dir, e) from e

    log_scaffold_created("document", doc_dir)
    return workspace.document(key)
