"""
Clipboard output via copykitten (a binding of the arboard clipboard library).

copykitten acquires the platform clipboard, writes, and releases it within a
single call, so no handle outlives publish_image().
"""

import copykitten

from typclip.contexts.publishing.logger import _log_error, _log_info, _log_success
from typclip.contexts.rendering.bitmap import Bitmap
from typclip.exceptions import ClipboardError


def publish_image(bitmap: Bitmap, detach: bool = False) -> None:
    """
    Replace the clipboard contents with an RGBA image.

    Args:
        bitmap: Pixels to copy
        detach: On Linux, keep serving the clipboard from a background
                process after this one exits (no-op elsewhere)

    Raises:
        ClipboardError: If the clipboard is unavailable or the write fails
    """
    _log_info(f"Copying {bitmap.width}x{bitmap.height} image ({bitmap.size_bytes} bytes)")
    try:
        copykitten.copy_image(bitmap.data, bitmap.width, bitmap.height, detach=detach)
    except copykitten.CopykittenError as e:
        _log_error(f"Clipboard write failed: {e}")
        raise ClipboardError("Could not write image to clipboard", original_error=e) from e
    _log_success("Image written to clipboard")
