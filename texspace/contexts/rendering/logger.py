"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from texspace.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Optional[Path] = None, verbose: bool = False) -> Optional[Path]:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this build session (None logs to console only)
        verbose: Show debug output on the console

    Returns:
        Path to log file, or None

    Example:
        from texspace.contexts.rendering.logger import setup_rendering_logger, _log_info

        setup_rendering_logger(verbose=True)
        _log_info("Starting compilation...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        verbose=verbose,
        extra_provenance={"LaTeX compiler": os.getenv("LATEX_COMPILER", "pdflatex")},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_compilation_start(
    document_key: str, tex_file: Path, compiler: str, num_passes: int, working_dir: Path
) -> None:
    """Log start of compilation with context."""
    _log_info(f"Compiling {document_key} with {compiler}")
    _log_debug(f"  Working directory: {working_dir}")
    _log_debug(f"  Source: {tex_file}")
    _log_debug(f"  Passes: {num_passes}")


def log_compilation_result(
    document_key: str,
    result,  # CompilationResult
    elapsed_time: float,
    verbose: bool = False,
) -> None:
    """
    Log compilation result with diagnostics.

    Args:
        document_key: Document identifier
        result: CompilationResult from compile_latex()
        elapsed_time: Time taken to compile
        verbose: Show detailed warnings/errors (default: False)
    """
    if result.success:
        _log_success(f"{document_key}: {len(result.warnings)} warnings ({elapsed_time:.2f}s)")
    else:
        _log_error(f"{document_key}: {len(result.errors)} errors ({elapsed_time:.2f}s)")
        error_limit = 10 if verbose else 5
        for i, err in enumerate(result.errors[:error_limit], 1):
            _log_error(f"  Error {i}: {err}")
        if len(result.errors) > error_limit:
            _log_error(f"  ... and {len(result.errors) - error_limit} more errors")

    if result.warnings:
        warning_limit = 10 if verbose else 3
        for i, warn in enumerate(result.warnings[:warning_limit], 1):
            _log_debug(f"  Warning {i}: {warn}")
        if len(result.warnings) > warning_limit:
            _log_debug(f"  ... and {len(result.warnings) - warning_limit} more warnings")

    # opt(raw=True) keeps multi-line engine output free of per-line level prefixes
    if verbose or not result.success:
        if result.stdout:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nCOMPILER STDOUT:\n{'=' * 80}\n{result.stdout}\n"
            )
        if result.stderr:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nCOMPILER STDERR:\n{'=' * 80}\n{result.stderr}\n"
            )
