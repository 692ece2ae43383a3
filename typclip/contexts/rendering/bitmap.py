"""In-memory RGBA bitmap decoded from a rendered page."""

import io
from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class Bitmap:
    """
    Rendered page pixels.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: Row-major RGBA bytes, 4 per pixel
    """

    width: int
    height: int
    data: bytes

    @classmethod
    def from_png(cls, png_bytes: bytes) -> "Bitmap":
        """Decode PNG bytes into RGBA pixels."""
        with Image.open(io.BytesIO(png_bytes)) as img:
            if img.mode != "RGBA":
                img = img.convert("RGBA")
            return cls(width=img.width, height=img.height, data=img.tobytes())

    @property
    def size_bytes(self) -> int:
        return len(self.data)
