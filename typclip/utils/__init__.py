"""
Shared utilities for typst-clip.

Common functionality used across contexts:
- Logger setup with provenance tracking
"""

from typclip.utils.logger import log_provenance, setup_logger

__all__ = ["log_provenance", "setup_logger"]
