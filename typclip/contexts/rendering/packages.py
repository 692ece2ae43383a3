"""
Offline resolution of Typst packages.

Typst looks for `@namespace/name:version` imports in a local package
directory first, then in its package cache, and downloads into the cache as
a last resort. typst-clip never lets it get that far: every package the
document references, the pinned one and any the snippet imports, has to be
present in one of the two local directories before compilation starts.

Directory layout (same as the Typst CLI):
    <root>/<namespace>/<name>/<version>/typst.toml
"""

import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from typclip.contexts.rendering.logger import _log_debug
from typclip.exceptions import PackageUnavailableError

_PACKAGE_SPEC = (
    r"@(?P<namespace>[a-z0-9][a-z0-9_-]*)/(?P<name>[a-z0-9][a-z0-9_-]*):(?P<version>\d+\.\d+\.\d+)"
)
PACKAGE_SPEC_PATTERN = re.compile(rf"^{_PACKAGE_SPEC}$")

# Package references anywhere in a document, e.g. inside #import strings
PACKAGE_REFERENCE_PATTERN = re.compile(_PACKAGE_SPEC)

PACKAGE_MANIFEST = "typst.toml"


@dataclass(frozen=True)
class PackageSpec:
    """A parsed `@namespace/name:version` package reference."""

    namespace: str
    name: str
    version: str

    @property
    def subdir(self) -> Path:
        return Path(self.namespace) / self.name / self.version

    def __str__(self) -> str:
        return f"@{self.namespace}/{self.name}:{self.version}"


@dataclass(frozen=True)
class PackageLocation:
    """Where a package was found on disk."""

    spec: PackageSpec
    root: Path
    path: Path


def parse_package_spec(text: str) -> PackageSpec:
    """
    Parse a Typst package reference.

    Args:
        text: Reference such as '@preview/physica:0.9.3'

    Returns:
        PackageSpec

    Raises:
        ValueError: If the reference is malformed
    """
    match = PACKAGE_SPEC_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid package reference: {text!r}")
    return PackageSpec(**match.groupdict())


def find_package_specs(source: str) -> List[PackageSpec]:
    """Return every package reference in a Typst source, first occurrence order."""
    specs = []
    for match in PACKAGE_REFERENCE_PATTERN.finditer(source):
        spec = PackageSpec(**match.groupdict())
        if spec not in specs:
            specs.append(spec)
    return specs


def _platform_base_dirs() -> Tuple[Path, Path]:
    """Return the (data, cache) base directories Typst uses on this platform."""
    home = Path.home()

    if sys.platform == "win32":
        data = os.getenv("APPDATA")
        cache = os.getenv("LOCALAPPDATA")
        return (
            Path(data) if data else home / "AppData" / "Roaming",
            Path(cache) if cache else home / "AppData" / "Local",
        )

    if sys.platform == "darwin":
        return home / "Library" / "Application Support", home / "Library" / "Caches"

    # XDG base dirs must be absolute; relative values are ignored
    data = os.getenv("XDG_DATA_HOME")
    cache = os.getenv("XDG_CACHE_HOME")
    data_dir = Path(data) if data and Path(data).is_absolute() else home / ".local" / "share"
    cache_dir = Path(cache) if cache and Path(cache).is_absolute() else home / ".cache"
    return data_dir, cache_dir


def default_package_dirs() -> Tuple[Path, Path]:
    """
    Return Typst's default (local package dir, package cache dir).

    Returns:
        Tuple of (<data>/typst/packages, <cache>/typst/packages)
    """
    data_dir, cache_dir = _platform_base_dirs()
    return data_dir / "typst" / "packages", cache_dir / "typst" / "packages"


def package_search_roots(
    package_path: Optional[Path] = None,
    package_cache_path: Optional[Path] = None,
) -> Tuple[Path, Path]:
    """Fill in Typst's defaults for whichever package directory is not given."""
    default_path, default_cache = default_package_dirs()
    return (
        package_path if package_path is not None else default_path,
        package_cache_path if package_cache_path is not None else default_cache,
    )


def resolve_package(
    spec: PackageSpec,
    package_path: Optional[Path] = None,
    package_cache_path: Optional[Path] = None,
) -> PackageLocation:
    """
    Find a package in the local package directories without touching the network.

    The local package directory is searched before the cache, matching the
    order Typst itself uses.

    Args:
        spec: Package to resolve
        package_path: Local package dir (None = Typst's default data dir)
        package_cache_path: Package cache dir (None = Typst's default cache dir)

    Returns:
        PackageLocation for the first directory holding the package

    Raises:
        PackageUnavailableError: If no searched directory holds the package
    """
    search_roots = list(package_search_roots(package_path, package_cache_path))

    for root in search_roots:
        candidate = root / spec.subdir
        if (candidate / PACKAGE_MANIFEST).is_file():
            _log_debug(f"Resolved {spec} at {candidate}")
            return PackageLocation(spec=spec, root=root, path=candidate)
        _log_debug(f"{spec} not found in {root}")

    raise PackageUnavailableError(str(spec), search_roots)


def resolve_source_packages(
    source: str,
    package_path: Optional[Path] = None,
    package_cache_path: Optional[Path] = None,
) -> List[PackageLocation]:
    """
    Resolve every package a document references, so compiling it never downloads.

    Raises:
        PackageUnavailableError: For the first reference not present locally
    """
    return [
        resolve_package(spec, package_path, package_cache_path)
        for spec in find_package_specs(source)
    ]
