"""Shared fixtures: stand-ins for the Typst compiler and the clipboard."""

import io
from types import SimpleNamespace

import copykitten
import pytest
import typst
from loguru import logger
from PIL import Image

from typclip.contexts.rendering.template import PINNED_PACKAGE


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test; CliRunner streams are closed afterwards."""
    yield
    logger.remove()


def make_png(width: int = 12, height: int = 8, color=(0, 0, 0, 255), mode: str = "RGBA") -> bytes:
    """Encode a solid-color PNG."""
    if mode != "RGBA":
        color = color[: len(mode)]
    buf = io.BytesIO()
    Image.new(mode, (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_factory():
    return make_png


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def package_dirs(tmp_path):
    """Local package dir holding the pinned package, plus an empty cache dir."""
    package_path = tmp_path / "packages"
    package_cache_path = tmp_path / "cache"
    namespace, rest = PINNED_PACKAGE.lstrip("@").split("/")
    name, version = rest.split(":")

    package_dir = package_path / namespace / name / version
    package_dir.mkdir(parents=True)
    (package_dir / "typst.toml").write_text(f'[package]\nname = "{name}"\nversion = "{version}"\n')
    package_cache_path.mkdir()

    return package_path, package_cache_path


@pytest.fixture
def fake_compiler(monkeypatch, png_bytes):
    """
    Replace typst.compile_with_warnings.

    Set `.output` to what the compiler should return, `.error` to raise,
    and inspect `.calls` for the arguments each compile received.
    """
    state = SimpleNamespace(output=png_bytes, error=None, warnings=[], calls=[])

    def compile_with_warnings(input, **kwargs):
        state.calls.append(SimpleNamespace(source=input.decode("utf-8"), **kwargs))
        if state.error is not None:
            raise state.error
        return state.output, [SimpleNamespace(message=w) for w in state.warnings]

    monkeypatch.setattr(typst, "compile_with_warnings", compile_with_warnings)
    return state


@pytest.fixture
def fake_clipboard(monkeypatch):
    """Replace copykitten.copy_image and record what was copied."""
    state = SimpleNamespace(images=[], error=None)

    def copy_image(content, width, height, *, detach=False):
        if state.error is not None:
            raise state.error
        state.images.append(SimpleNamespace(data=content, width=width, height=height, detach=detach))

    monkeypatch.setattr(copykitten, "copy_image", copy_image)
    return state


@pytest.fixture
def typst_error():
    """Build a TypstError the way the binding populates it."""

    def build(message: str, hints=None) -> Exception:
        err = typst.TypstError(message)
        err.message = message
        err.hints = hints or []
        err.trace = []
        err.diagnostic = f"error: {message}"
        return err

    return build
