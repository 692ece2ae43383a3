"""
typst-clip - Typst math snippets straight to the clipboard

Takes a snippet of Typst math markup, wraps it in a fixed single-page document,
compiles it with the Typst compiler, rasterizes the first page and copies the
image onto the system clipboard.

Architecture:
- Rendering Context: template assembly, offline package resolution, font
  loading, compilation and rasterization
- Publishing Context: clipboard output
"""

__version__ = "0.1.0"
