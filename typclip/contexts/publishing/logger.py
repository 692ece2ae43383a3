"""
Publishing context logger.

Provides logging interface for publishing context with automatic [clip] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[clip]"


def _log_info(message: str) -> None:
    """Log info message with [clip] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [clip] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [clip] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")
