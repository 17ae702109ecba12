"""Exceptions for the workspace context, each rendering as a one-line diagnostic."""

from pathlib import Path
from typing import Optional


class WorkspaceError(Exception):
    """Base class for user-facing workspace failures."""


class PathNotFoundError(WorkspaceError):
    """
    A workspace root, document, config file or required directory is absent.

    Attributes:
        path: The path that was looked up
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"path not found: {self.path}")


class InvalidConfigError(WorkspaceError, ValueError):
    """
    A config file exists but does not describe a valid workspace or document.

    Attributes:
        message: Human-readable parse or validation diagnostic
        path: Config file that failed to load (None when not file-specific)
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = Path(path) if path is not None else None

        # Keep the diagnostic on one line
        flat = " ".join(str(message).split())
        if self.path is not None:
            super().__init__(f"not a valid workspace: {self.path}: {flat}")
        else:
            super().__init__(f"not a valid workspace: {flat}")


class WorkspaceIOError(WorkspaceError):
    """
    A filesystem operation failed for a reason other than a missing path.

    Attributes:
        path: Path involved in the failed operation
        original_error: The underlying OSError
    """

    def __init__(self, path: Path, original_error: OSError):
        self.path = Path(path)
        self.original_error = original_error
        reason = original_error.strerror or str(original_error)
        super().__init__(f"i/o error: {self.path}: {reason}")


class WorkspaceExistsError(WorkspaceError):
    """
    Scaffolding target already exists and is not empty.

    Attributes:
        path: The non-empty target directory
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"target directory already exists and is not empty: {self.path}")
