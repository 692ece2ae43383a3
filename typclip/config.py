"""
Runtime configuration.

All settings come from the environment (optionally via a .env file) and are
optional. With nothing set, typst-clip resolves packages from the same
directories the Typst CLI uses, loads the math font embedded in the typst
distribution, and only logs warnings and errors to stderr.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_path(name: str) -> Optional[Path]:
    """Read an env variable as a Path, treating unset and empty the same."""
    value = os.getenv(name)
    return Path(value).expanduser() if value else None


PACKAGE_PATH = _optional_path("TYPCLIP_PACKAGE_PATH")
PACKAGE_CACHE_PATH = _optional_path("TYPCLIP_PACKAGE_CACHE_PATH")
FONT_PATH = _optional_path("TYPCLIP_FONT_PATH")
LOG_DIR = _optional_path("TYPCLIP_LOG_DIR")
LOG_LEVEL = os.getenv("TYPCLIP_LOG_LEVEL", "WARNING").upper()
CLIPBOARD_DETACH = os.getenv("TYPCLIP_CLIPBOARD_DETACH", "false").lower() == "true"
