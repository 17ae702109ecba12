"""
Workspace context logger.

Provides logging interface for workspace context with automatic [workspace] prefix.
All workspace modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[workspace]"


# Wrapper functions with automatic [workspace] prefix


def _log_success(message: str) -> None:
    """Log success message with [workspace] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [workspace] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [workspace] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level workspace-specific logging helpers


def log_workspace_loaded(workspace) -> None:
    """Log a freshly loaded workspace and its metadata."""
    engine = workspace.metadata.engine
    _log_debug(f"Loaded workspace: {workspace.path}")
    _log_debug(f"  Engine: {engine.value if engine else 'default'}")


def log_document_loaded(document) -> None:
    """Log a freshly loaded document and its metadata."""
    meta = document.metadata
    _log_debug(f"Loaded document: {document.key}")
    _log_debug(f"  Class: {meta.document_class} {list(meta.document_options)}")
    _log_debug(f"  Prelude includes: {list(meta.prelude_includes)}")
    _log_debug(f"  Sections: {list(meta.sections)}")


def log_scaffold_created(kind: str, path: Path) -> None:
    """Log creation of a new workspace or document skeleton."""
    _log_success(f"Created {kind} at {path}")
