"""
Workspace and Document models.

A Workspace is a directory holding workspace.toml, a shared prelude/ directory
and one subdirectory per document under docs/. A Document combines a borrowed
Workspace with its own metadata and knows how to render itself.
"""

import dataclasses
from pathlib import Path
from typing import Any, Dict, List, Optional

from texspace.contexts.templating.registries import DocumentTemplate
from texspace.contexts.workspace.config_loader import load_config
from texspace.contexts.workspace.exceptions import (
    InvalidConfigError,
    PathNotFoundError,
    WorkspaceIOError,
)
from texspace.contexts.workspace.logger import log_document_loaded, log_workspace_loaded
from texspace.contexts.workspace.schemas import (
    DOCS_DIR,
    DOCUMENT_METADATA,
    OUTPUT_FILENAME,
    PRELUDE_DIR,
    WORKSPACE_MARKER,
    DocumentMeta,
    WorkspaceMetadata,
)


def resolve_directory(path: Path) -> Path:
    """
    Resolve a directory that must exist to an absolute, symlink-free path.

    Raises:
        PathNotFoundError: If the directory does not exist
        WorkspaceIOError: If it exists but is not a directory, or cannot be resolved
    """
    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as e:
        raise PathNotFoundError(path) from e
    except OSError as e:
        raise WorkspaceIOError(path, e) from e
    if not resolved.is_dir():
        raise WorkspaceIOError(path, NotADirectoryError(20, "Not a directory"))
    return resolved


def as_latex_dir(path: Path) -> str:
    """Format a directory for LaTeX, which concatenates it with bare filenames."""
    return path.as_posix().rstrip("/") + "/"


def validate_document_key(key: str, docs_dir: Optional[Path] = None) -> str:
    """Document keys name a single directory under docs/."""
    if not key or key in (".", "..") or "/" in key or "\\" in key:
        raise InvalidConfigError(f"invalid document key {key!r}", docs_dir)
    return key


class Workspace:
    """
    A loaded workspace: its root path, metadata and shared document template.

    Attributes:
        path: Absolute workspace root
        metadata: Parsed workspace.toml
        template: Compiled document template shared by all documents
    """

    def __init__(
        self,
        path: Path,
        metadata: WorkspaceMetadata,
        template: Optional[DocumentTemplate] = None,
    ):
        self.path = Path(path).absolute()
        self.metadata = metadata
        self.template = template or DocumentTemplate()

    @classmethod
    def load(cls, path: Path, template: Optional[DocumentTemplate] = None) -> "Workspace":
        """
        Load the workspace rooted at path.

        Raises:
            PathNotFoundError: If path holds no workspace.toml
            InvalidConfigError: If workspace.toml is malformed
        """
        path = Path(path).absolute()
        metadata = load_config(path / WORKSPACE_MARKER, WorkspaceMetadata)
        workspace = cls(path, metadata, template)
        log_workspace_loaded(workspace)
        return workspace

    @property
    def prelude_dir(self) -> Path:
        return self.path / PRELUDE_DIR

    @property
    def docs_dir(self) -> Path:
        return self.path / DOCS_DIR

    def document_dir(self, key: str) -> Path:
        return self.docs_dir / validate_document_key(key, self.docs_dir)

    def document(self, key: str) -> "Document":
        """
        Fetch the document with the given key.

        Metadata is read from disk on every call.

        Raises:
            PathNotFoundError: If docs/<key>/metadata.toml does not exist
            InvalidConfigError: If the key or the metadata file is invalid
        """
        metadata = load_config(self.document_dir(key) / DOCUMENT_METADATA, DocumentMeta)
        document = Document(self, key, metadata)
        log_document_loaded(document)
        return document

    def document_keys(self) -> List[str]:
        """Sorted keys of all directories under docs/ holding a metadata file."""
        if not self.docs_dir.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.docs_dir.iterdir()
            if entry.is_dir() and (entry / DOCUMENT_METADATA).is_file()
        )

    def document_key_for(self, path: Path) -> Optional[str]:
        """
        Key of the document whose directory contains path, if any.

        Used to pick a document implicitly when working inside docs/<key>/.
        """
        try:
            relative = Path(path).absolute().relative_to(self.docs_dir)
        except ValueError:
            return None
        return relative.parts[0] if relative.parts else None

    def __repr__(self) -> str:
        return f"Workspace(path={str(self.path)!r}, metadata={self.metadata!r})"


class Document:
    """
    A document inside a workspace.

    Obtain instances through Workspace.document(); the workspace is borrowed,
    not owned.
    """

    def __init__(self, workspace: Workspace, key: str, metadata: DocumentMeta):
        self.workspace = workspace
        self.key = key
        self.metadata = metadata

    @property
    def directory(self) -> Path:
        return self.workspace.document_dir(self.key)

    def build_context(self) -> Dict[str, Any]:
        """
        Construct the rendering context.

        Both prelude/ and docs/<key>/ must exist. Their paths are emitted
        absolute, symlink-resolved and with a trailing slash.

        Raises:
            PathNotFoundError: If either directory is missing
            WorkspaceIOError: If either directory cannot be resolved
        """
        prelude_root = resolve_directory(self.workspace.prelude_dir)
        document_root = resolve_directory(self.directory)
        engine = self.workspace.metadata.engine

        return {
            "workspace": dataclasses.asdict(self.workspace.metadata),
            "metadata": dataclasses.asdict(self.metadata),
            "engine": engine.value if engine else None,
            "document_class": self.metadata.document_class,
            "document_options": list(self.metadata.document_options),
            "prelude_root": as_latex_dir(prelude_root),
            "prelude_includes": list(self.metadata.prelude_includes),
            "document_root": as_latex_dir(document_root),
            "sections": list(self.metadata.sections),
        }

    def generate(self) -> str:
        """Generate the content of the main document file."""
        return self.workspace.template.render(self.build_context())

    def output_path(self) -> Path:
        """
        Canonical location of the compiled PDF.

        Raises:
            PathNotFoundError: If the document directory does not exist
        """
        return resolve_directory(self.directory) / OUTPUT_FILENAME

    def __repr__(self) -> str:
        return f"Document(key={self.key!r}, workspace={str(self.workspace.path)!r})"
