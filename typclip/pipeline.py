"""
Snippet-to-clipboard pipeline.

    snippet -> source -> (font, package check) -> compile -> first page -> bitmap -> clipboard

Every step raises a TypclipError subclass on failure; nothing is retried.
Arguments left as None fall back to typclip.config at call time.
"""

from pathlib import Path
from typing import Optional

from typclip import config
from typclip.contexts.publishing import publish_image
from typclip.contexts.rendering import (
    SCALE,
    Bitmap,
    build_source,
    compile_source,
    first_page,
    load_math_font,
    package_search_roots,
    resolve_source_packages,
)
from typclip.contexts.rendering.logger import _log_debug


def render_snippet(
    snippet: str,
    font_path: Optional[Path] = None,
    package_path: Optional[Path] = None,
    package_cache_path: Optional[Path] = None,
) -> Bitmap:
    """
    Typeset a math snippet and rasterize the first page.

    Args:
        snippet: Typst math markup, embedded verbatim between `$` delimiters
        font_path: Math font file (None = TYPCLIP_FONT_PATH, else the bundled font)
        package_path: Local Typst package dir (None = TYPCLIP_PACKAGE_PATH, else Typst default)
        package_cache_path: Typst package cache dir (None = TYPCLIP_PACKAGE_CACHE_PATH,
            else Typst default)

    Returns:
        Bitmap of the first page at the fixed scale

    Raises:
        FontLoadError: If the math font cannot be loaded
        PackageUnavailableError: If a referenced package is not available offline
        CompilationError: If Typst rejects the document
        EmptyDocumentError: If the document has no pages
    """
    if font_path is None:
        font_path = config.FONT_PATH
    if package_path is None:
        package_path = config.PACKAGE_PATH
    if package_cache_path is None:
        package_cache_path = config.PACKAGE_CACHE_PATH

    source = build_source(snippet)

    fonts = load_math_font(font_path)

    # Typst downloads any package it cannot find locally, so every import
    # in the source (pinned or from the snippet) must already be on disk
    package_path, package_cache_path = package_search_roots(package_path, package_cache_path)
    resolve_source_packages(source, package_path, package_cache_path)

    result = compile_source(
        source,
        fonts,
        package_path=package_path,
        package_cache_path=package_cache_path,
        scale=SCALE,
    )

    bitmap = Bitmap.from_png(first_page(result))
    _log_debug(f"Rendered page 1/{result.page_count}: {bitmap.width}x{bitmap.height}px")
    return bitmap


def copy_snippet_to_clipboard(
    snippet: str,
    font_path: Optional[Path] = None,
    package_path: Optional[Path] = None,
    package_cache_path: Optional[Path] = None,
    detach: Optional[bool] = None,
) -> Bitmap:
    """
    Render a math snippet and place the image on the system clipboard.

    Returns:
        The bitmap that was copied

    Raises:
        Anything render_snippet() raises, plus ClipboardError
    """
    if detach is None:
        detach = config.CLIPBOARD_DETACH

    bitmap = render_snippet(
        snippet,
        font_path=font_path,
        package_path=package_path,
        package_cache_path=package_cache_path,
    )
    publish_image(bitmap, detach=detach)
    return bitmap
