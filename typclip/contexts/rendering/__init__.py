"""
Rendering Context

Responsibilities:
- Embeds the math snippet in the fixed page template
- Resolves every Typst package the document imports from local directories only
- Loads the math font
- Compiles the document and rasterizes its first page

Owns: Typst source assembly, compilation, rasterization
Never: Touches the clipboard
"""

from typclip.contexts.rendering.bitmap import Bitmap
from typclip.contexts.rendering.compiler import (
    SCALE,
    CompilationResult,
    compile_source,
    first_page,
)
from typclip.contexts.rendering.fonts import load_math_font
from typclip.contexts.rendering.packages import (
    PackageSpec,
    find_package_specs,
    package_search_roots,
    parse_package_spec,
    resolve_package,
    resolve_source_packages,
)
from typclip.contexts.rendering.template import PINNED_PACKAGE, build_source

__all__ = [
    "SCALE",
    "PINNED_PACKAGE",
    "Bitmap",
    "CompilationResult",
    "PackageSpec",
    "build_source",
    "compile_source",
    "find_package_specs",
    "first_page",
    "load_math_font",
    "package_search_roots",
    "parse_package_spec",
    "resolve_package",
    "resolve_source_packages",
]
