"""
Publishing Context

Responsibilities:
- Writes rendered bitmaps onto the system clipboard

Owns: Clipboard access
Never: Compiles or modifies images
"""

from typclip.contexts.publishing.clipboard import publish_image

__all__ = ["publish_image"]
