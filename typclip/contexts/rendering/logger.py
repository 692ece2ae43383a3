"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

from loguru import logger

from typclip.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def _typst_binding_version() -> str:
    try:
        return version("typst")
    except PackageNotFoundError:
        return "unknown"


def setup_rendering_logger(log_dir: Optional[Path], console_level: str = "WARNING") -> Optional[Path]:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for the render log (None = console only)
        console_level: Minimum level shown on stderr

    Returns:
        Path to log file, or None when file logging is disabled

    Example:
        from typclip.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Starting compilation...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        console_level=console_level,
        extra_provenance={"Typst binding": _typst_binding_version()},
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


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_compilation_start(source: str, ppi: float, package_dirs: list) -> None:
    """Log start of compilation with context."""
    _log_info(f"Compiling snippet ({len(source)} chars of source)")
    _log_debug(f"  PPI: {ppi:g}")
    for directory in package_dirs:
        _log_debug(f"  Package dir: {directory}")
    # Use opt(raw=True) to keep the multi-line source readable in the log file
    logger.opt(raw=True).debug(f"\n{'=' * 80}\nTYPST SOURCE:\n{'=' * 80}\n{source}\n")


def log_compilation_result(
    result,  # CompilationResult
    elapsed_time: float,
) -> None:
    """
    Log compilation result with diagnostics.

    Args:
        result: CompilationResult from compile_source()
        elapsed_time: Time taken to compile
    """
    if result.success:
        _log_success(
            f"Compilation succeeded: {result.page_count} page(s), "
            f"{len(result.warnings)} warnings ({elapsed_time:.2f}s)"
        )
    else:
        _log_error(f"Compilation failed: {len(result.errors)} errors ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")
        for hint in result.hints:
            _log_debug(f"  Hint: {hint}")

    # Typst warnings are surfaced on the console; they rarely stop a render
    warning_limit = 5
    for i, warn in enumerate(result.warnings[:warning_limit], 1):
        _log_warning(f"  Warning {i}: {warn}")
    if len(result.warnings) > warning_limit:
        _log_debug(f"  ... and {len(result.warnings) - warning_limit} more warnings")
