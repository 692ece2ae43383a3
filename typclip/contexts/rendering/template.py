"""
Fixed Typst document template.

The snippet is interpolated verbatim between math delimiters. No escaping is
performed: any Typst syntax in the snippet becomes part of the document.
"""

PINNED_PACKAGE = "@preview/physica:0.9.3"
PAGE_MARGIN = "10pt"

TEMPLATE = (
    "\n"
    f'    #import "{PINNED_PACKAGE}": *\n'
    f"    #set page(margin: {PAGE_MARGIN}, height: auto, width: auto)\n"
    "\n"
    "    $\n"
    "    {snippet}\n"
    "    $"
)


def build_source(snippet: str) -> str:
    """Embed a math snippet in the fixed page template."""
    return TEMPLATE.format(snippet=snippet)
