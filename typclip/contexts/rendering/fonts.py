"""
Math font loading.

Exactly one math font is handed to the compiler: New Computer Modern Math
(subfont index 0), shipped as package data under typclip/fonts. Neither
system fonts nor the fonts embedded in the typst distribution are consulted,
so renders look the same on every machine.
"""

from importlib import resources
from pathlib import Path
from typing import Optional

import typst

from typclip.contexts.rendering.logger import _log_debug
from typclip.exceptions import FontLoadError

MATH_FONT_FAMILY = "New Computer Modern Math"
FONT_INDEX = 0

# Relative to the typclip package
BUNDLED_FONT = "fonts/NewCMMath-Regular.otf"


def _load_single_face(font_path: Path, family: Optional[str] = None) -> typst.Fonts:
    if not font_path.is_file():
        raise FontLoadError("Font file not found", font_path=font_path)

    fonts = typst.Fonts(
        include_system_fonts=False, include_embedded_fonts=False, font_paths=[font_path]
    )
    faces = fonts.fonts()
    if not faces:
        raise FontLoadError("Could not parse font", font_path=font_path)
    if len(faces) != 1 or faces[0].index != FONT_INDEX:
        raise FontLoadError(
            f"Expected a single font face at index {FONT_INDEX}, found {len(faces)}",
            font_path=font_path,
        )
    if family is not None and faces[0].family != family:
        raise FontLoadError(
            f"Expected font family '{family}', found '{faces[0].family}'", font_path=font_path
        )

    _log_debug(f"Using font file: {font_path} ({faces[0].family})")
    return fonts


def load_math_font(font_path: Optional[Path] = None) -> typst.Fonts:
    """
    Build the font book used for compilation.

    Args:
        font_path: OpenType math font file to use instead of the bundled one

    Returns:
        typst.Fonts holding exactly one face

    Raises:
        FontLoadError: If the font is missing, cannot be parsed, or is not a
            single face at index 0
    """
    if font_path is not None:
        return _load_single_face(font_path)

    with resources.as_file(resources.files("typclip") / BUNDLED_FONT) as bundled:
        return _load_single_face(Path(bundled), family=MATH_FONT_FAMILY)
