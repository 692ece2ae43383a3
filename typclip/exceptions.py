"""Exceptions raised along the snippet-to-clipboard pipeline."""

from pathlib import Path
from typing import List, Optional


class TypclipError(Exception):
    """Base class for every failure the CLI reports to the user."""


class FontLoadError(TypclipError):
    """
    Exception raised when the bundled math font cannot be loaded.

    This is a packaging defect rather than a user error: the font ships with
    the program (or is named explicitly through TYPCLIP_FONT_PATH).

    Attributes:
        font_path: Font file that was tried
    """

    def __init__(self, message: str, font_path: Optional[Path] = None):
        self.font_path = font_path
        if font_path is not None:
            message = f"{message} ({font_path})"
        super().__init__(message)


class PackageUnavailableError(TypclipError):
    """
    Exception raised when a pinned Typst package is not available offline.

    Attributes:
        package: Package reference (e.g., '@preview/physica:0.9.3')
        searched: Package directories that were searched
    """

    def __init__(self, package: str, searched: List[Path]):
        self.package = package
        self.searched = searched

        parts = [f"Package {package} is not available offline"]
        for directory in searched:
            parts.append(f"  searched: {directory}")
        parts.append("Install it into one of these directories, or point TYPCLIP_PACKAGE_PATH at a copy.")

        super().__init__("\n".join(parts))


class CompilationError(TypclipError):
    """
    Exception raised when the Typst compiler rejects the document.

    Attributes:
        diagnostics: Error messages reported by the compiler
        hints: Hints attached to those errors
    """

    def __init__(self, diagnostics: List[str], hints: Optional[List[str]] = None):
        self.diagnostics = diagnostics
        self.hints = hints or []

        parts = ["Typst compilation failed"]
        for diagnostic in diagnostics:
            parts.append(f"  error: {diagnostic}")
        for hint in self.hints:
            parts.append(f"  hint: {hint}")

        super().__init__("\n".join(parts))


class EmptyDocumentError(TypclipError):
    """Exception raised when the compiled document has no pages to render."""

    def __init__(self, message: str = "No pages in document"):
        super().__init__(message)


class ClipboardError(TypclipError):
    """
    Exception raised when the system clipboard cannot be opened or written.

    Attributes:
        original_error: The error reported by the clipboard backend
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        if original_error is not None:
            message = f"{message}: {original_error}"
        super().__init__(message)
