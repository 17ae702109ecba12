"""
Workspace Context

Responsibilities:
- Locates the workspace root from any directory beneath it
- Loads workspace.toml and docs/<key>/metadata.toml into typed metadata
- Builds the rendering context for a document and generates its source
- Scaffolds new workspaces and documents

Owns: Directory layout, config schemas and loading, document model
Never: Invokes the LaTeX engine
"""

from texspace.contexts.workspace.config_loader import load_config
from texspace.contexts.workspace.exceptions import (
    InvalidConfigError,
    PathNotFoundError,
    WorkspaceError,
    WorkspaceExistsError,
    WorkspaceIOError,
)
from texspace.contexts.workspace.models import Document, Workspace
from texspace.contexts.workspace.resolver import find_workspace, find_workspace_root
from texspace.contexts.workspace.scaffold import add_document, init_workspace
from texspace.contexts.workspace.schemas import DocumentMeta, Engine, WorkspaceMetadata

__all__ = [
    # Discovery and loading
    "find_workspace",
    "find_workspace_root",
    "load_config",
    # Models
    "Workspace",
    "Document",
    "WorkspaceMetadata",
    "DocumentMeta",
    "Engine",
    # Scaffolding
    "init_workspace",
    "add_document",
    # Errors
    "WorkspaceError",
    "PathNotFoundError",
    "InvalidConfigError",
    "WorkspaceIOError",
    "WorkspaceExistsError",
]
