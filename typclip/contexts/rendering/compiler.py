"""
Typst Compilation Module

Compiles an assembled Typst source to per-page PNG images using the typst
Python binding, entirely in memory.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import typst

from typclip.contexts.rendering.logger import log_compilation_result, log_compilation_start
from typclip.exceptions import CompilationError, EmptyDocumentError

# Fixed rasterization scale: pixels per typographic point
SCALE = 3.0
POINTS_PER_INCH = 72.0


@dataclass
class CompilationResult:
    """
    Result of Typst compilation.

    Attributes:
        success: Whether compilation succeeded
        pages: PNG bytes for each page, in document order
        errors: Error messages reported by the compiler
        warnings: Warning messages reported by the compiler
        hints: Hints attached to the errors
    """

    success: bool
    pages: List[bytes] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    hints: List[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)


def _as_page_list(output) -> List[bytes]:
    # typst returns bare bytes for a single page and a list otherwise
    if output is None:
        return []
    if isinstance(output, bytes):
        return [output]
    return list(output)


def compile_source(
    source: str,
    fonts: typst.Fonts,
    package_path: Optional[Path] = None,
    package_cache_path: Optional[Path] = None,
    scale: float = SCALE,
) -> CompilationResult:
    """
    Compile Typst source to PNG pages.

    Pure compilation function - assumes the packages the source imports are
    already resolvable from the given directories.

    Args:
        source: Complete Typst document
        fonts: Font book from load_math_font()
        package_path: Local package dir passed to Typst
        package_cache_path: Package cache dir passed to Typst
        scale: Pixels per point for rasterization

    Returns:
        CompilationResult with pages on success, diagnostics on failure
    """
    ppi = scale * POINTS_PER_INCH
    log_compilation_start(source, ppi, [d for d in (package_path, package_cache_path) if d])

    start_time = time.time()
    try:
        output, warnings = typst.compile_with_warnings(
            source.encode("utf-8"),
            format="png",
            ppi=ppi,
            font_paths=fonts,
            package_path=package_path,
            package_cache_path=package_cache_path,
        )
        result = CompilationResult(
            success=True,
            pages=_as_page_list(output),
            warnings=[w.message for w in warnings],
        )
    except typst.TypstError as e:
        result = CompilationResult(
            success=False,
            errors=[e.message],
            hints=list(e.hints or []),
        )
    except RuntimeError as e:
        # World setup failures (bad root, unreadable package dir) carry no diagnostics
        result = CompilationResult(success=False, errors=[str(e)])

    log_compilation_result(result, elapsed_time=time.time() - start_time)
    return result


def first_page(result: CompilationResult) -> bytes:
    """
    Select the first rendered page.

    Raises:
        CompilationError: If compilation failed
        EmptyDocumentError: If the document has no pages
    """
    if not result.success:
        raise CompilationError(result.errors, result.hints)
    if not result.pages:
        raise EmptyDocumentError()
    return result.pages[0]
