"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    verbose: bool = False,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Optional[Path]:
    """
    Configure loguru for a context with provenance tracking.

    Console output always goes to stderr so that stdout stays free for
    generated document text. A DEBUG-level file sink is added when log_dir
    is given.

    Args:
        context_name: Context identifier (e.g., "render", "workspace")
        log_dir: Directory for this logging session (None disables file logging)
        verbose: Show DEBUG messages on the console
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file, or None when file logging is disabled

    Example:
        from texspace.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="render",
            log_dir=Path("logs/build_20251114_123456"),
            extra_provenance={"LaTeX compiler": "xelatex"}
        )
    """
    # Remove default logger
    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    logger.add(
        sys.stderr,
        format="<level>{level: <7}</level> | <level>{message}</level>",
        level="DEBUG" if verbose else "INFO",
        colorize=True,
    )

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        log_file = log_dir / f"{context_name}.log"
        logger.add(
            log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
        )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (command, working directory, Python version)
    plus any additional context provided. Written at DEBUG so the console
    stays quiet unless verbose output was requested.
    """
    logger.debug("=" * 80)
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
