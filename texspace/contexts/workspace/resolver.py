"""
Workspace Resolver

Finds the workspace enclosing a directory by walking up the filesystem until
a directory containing workspace.toml is found. Any subdirectory of a
workspace, including a document's own directory, resolves to the same root.

The walk only ever moves upward, so a workspace.toml nested somewhere below
docs/ has no effect on resolution from outside it.
"""

from pathlib import Path
from typing import Optional

from texspace.contexts.templating.registries import DocumentTemplate
from texspace.contexts.workspace.exceptions import PathNotFoundError
from texspace.contexts.workspace.logger import _log_debug
from texspace.contexts.workspace.models import Workspace
from texspace.contexts.workspace.schemas import WORKSPACE_MARKER


def find_workspace_root(start: Path) -> Path:
    """
    Return the nearest ancestor of start (inclusive) holding workspace.toml.

    Args:
        start: Directory to begin the search from (made absolute, symlinks kept)

    Returns:
        Absolute path of the workspace root

    Raises:
        PathNotFoundError: If the filesystem root is reached without a marker,
            or a directory on the way no longer exists
    """
    current = Path(start).absolute()
    while current.exists():
        if (current / WORKSPACE_MARKER).is_file():
            _log_debug(f"Found {WORKSPACE_MARKER} in {current}")
            return current
        if current.parent == current:
            raise PathNotFoundError(current)
        current = current.parent
    raise PathNotFoundError(current)


def find_workspace(start: Path, template: Optional[DocumentTemplate] = None) -> Workspace:
    """
    Locate and load the workspace enclosing start.

    Args:
        start: Directory to begin the search from
        template: Shared document template (a new one is compiled if omitted)

    Raises:
        PathNotFoundError: If no enclosing workspace exists
        InvalidConfigError: If the workspace.toml that was found is malformed
    """
    return Workspace.load(find_workspace_root(start), template=template)
