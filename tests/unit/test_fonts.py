"""Unit tests for math font loading, with typst.Fonts replaced."""

from importlib import resources
from types import SimpleNamespace

import pytest
import typst

from typclip.contexts.rendering.fonts import BUNDLED_FONT, MATH_FONT_FAMILY, load_math_font
from typclip.exceptions import FontLoadError


class FakeFonts:
    """Records constructor arguments and reports a fixed font list."""

    faces = []

    def __init__(self, include_system_fonts=True, include_embedded_fonts=True, font_paths=[]):
        self.include_system_fonts = include_system_fonts
        self.include_embedded_fonts = include_embedded_fonts
        self.font_paths = font_paths

    def fonts(self):
        return list(self.faces)

    def families(self):
        return sorted({face.family for face in self.faces})


@pytest.fixture
def fake_fonts(monkeypatch):
    monkeypatch.setattr(typst, "Fonts", FakeFonts)
    FakeFonts.faces = []
    return FakeFonts


@pytest.mark.unit
def test_bundled_font_ships_with_package():
    """Test that the math font is installed as package data."""
    bundled = resources.files("typclip") / BUNDLED_FONT

    assert bundled.is_file()
    assert bundled.read_bytes()[:4] == b"OTTO"


@pytest.mark.unit
def test_bundled_font(fake_fonts):
    """Test that the default loads only the bundled font file."""
    fake_fonts.faces = [SimpleNamespace(family=MATH_FONT_FAMILY, index=0)]

    fonts = load_math_font()

    assert fonts.include_system_fonts is False
    assert fonts.include_embedded_fonts is False
    assert [path.name for path in fonts.font_paths] == ["NewCMMath-Regular.otf"]
    assert fonts.families() == [MATH_FONT_FAMILY]


@pytest.mark.unit
def test_bundled_font_wrong_family(fake_fonts):
    """Test the error when the bundled file is not the math font."""
    fake_fonts.faces = [SimpleNamespace(family="Libertinus Serif", index=0)]

    with pytest.raises(FontLoadError, match=MATH_FONT_FAMILY):
        load_math_font()


@pytest.mark.unit
def test_font_file(fake_fonts, tmp_path):
    """Test that an explicit font file is loaded on its own."""
    font_file = tmp_path / "Math.otf"
    font_file.write_bytes(b"OTTO")
    fake_fonts.faces = [SimpleNamespace(family="Custom Math", index=0)]

    fonts = load_math_font(font_file)

    assert fonts.include_system_fonts is False
    assert fonts.include_embedded_fonts is False
    assert fonts.font_paths == [font_file]


@pytest.mark.unit
def test_font_file_missing(fake_fonts, tmp_path):
    """Test the error for a font path that does not exist."""
    with pytest.raises(FontLoadError, match="Font file not found") as exc_info:
        load_math_font(tmp_path / "missing.otf")

    assert exc_info.value.font_path == tmp_path / "missing.otf"


@pytest.mark.unit
def test_font_file_unparseable(fake_fonts, tmp_path):
    """Test the error when no face could be read from the file."""
    font_file = tmp_path / "broken.otf"
    font_file.write_bytes(b"not a font")

    with pytest.raises(FontLoadError, match="Could not parse font"):
        load_math_font(font_file)


@pytest.mark.unit
def test_font_collection_rejected(fake_fonts, tmp_path):
    """Test that a collection with several faces is not accepted."""
    font_file = tmp_path / "Collection.ttc"
    font_file.write_bytes(b"ttcf")
    fake_fonts.faces = [
        SimpleNamespace(family="Custom Math", index=0),
        SimpleNamespace(family="Custom Math", index=1),
    ]

    with pytest.raises(FontLoadError, match="single font face"):
        load_math_font(font_file)
