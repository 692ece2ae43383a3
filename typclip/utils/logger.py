"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.

Console output always goes to stderr: stdout is reserved for the single
success line printed by the CLI.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    console_level: str = "WARNING",
    extra_provenance: dict = None,
    level_colors: dict = {},
) -> Optional[Path]:
    """
    Configure loguru for a context with provenance tracking.

    Sets up a console handler on stderr and, when a log directory is given,
    a DEBUG file handler that starts with an execution provenance header
    (script, command, working directory, Python version, etc.).

    Args:
        context_name: Context identifier (e.g., "render"), used as the log file name
        log_dir: Directory for the log file (None = console only)
        console_level: Minimum level shown on stderr
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file, or None when file logging is disabled

    Example:
        from typclip.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="render",
            log_dir=Path("~/.local/state/typst-clip"),
            extra_provenance={"Typst binding": "0.15.0"}
        )
    """
    # Remove default logger
    logger.remove()

    # Apply level colors (defaults + overrides)
    colors = {**LEVEL_COLORS, **level_colors}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    # Add console handler - colorized by level, terse
    logger.add(
        sys.stderr,
        format="<level>{level: <7}</level> | <level>{message}</level>",
        level=console_level,
        colorize=True,
    )

    if log_dir is None:
        return None

    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    # Add file handler - captures everything (DEBUG level)
    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )

    # Provenance header goes to the file only
    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided. Emitted at DEBUG so that it only
    reaches file sinks under the default console level.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
