"""Unit tests for the fixed Typst template."""

import pytest

from typclip.contexts.rendering.template import PINNED_PACKAGE, TEMPLATE, build_source


@pytest.mark.unit
def test_build_source_exact_layout():
    """Test that the snippet lands between math delimiters in the fixed preamble."""
    source = build_source("x^2 + y^2 = z^2")

    assert source == (
        "\n"
        '    #import "@preview/physica:0.9.3": *\n'
        "    #set page(margin: 10pt, height: auto, width: auto)\n"
        "\n"
        "    $\n"
        "    x^2 + y^2 = z^2\n"
        "    $"
    )


@pytest.mark.unit
def test_template_imports_pinned_package():
    """Test that the pinned package import is part of the template."""
    assert f'#import "{PINNED_PACKAGE}": *' in TEMPLATE
    assert PINNED_PACKAGE == "@preview/physica:0.9.3"


@pytest.mark.unit
@pytest.mark.parametrize(
    "snippet",
    [
        "{",
        "#set text(red)",
        'dv(f, x) "text" \\',
        "$ nested $",
        "{snippet}",
        "",
    ],
)
def test_build_source_does_not_escape(snippet):
    """Test that Typst syntax in the snippet is embedded verbatim."""
    source = build_source(snippet)

    assert f"    $\n    {snippet}\n    $" in source
    assert source.count(snippet) >= 1


@pytest.mark.unit
def test_build_source_is_deterministic():
    """Test that identical snippets produce identical sources."""
    assert build_source("a + b") == build_source("a + b")
    assert build_source("a + b") != build_source("a - b")
