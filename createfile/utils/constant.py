"""Project-wide constants for convenient reuse."""

from __future__ import annotations

import os
from typing import Final

# Ensure .env is loaded exactly once at import time for the whole project
from .env_loader import load_project_env  # local import to avoid cycles

load_project_env()

# Name created when the CLI is invoked without arguments.
DEFAULT_FILENAME: Final[str] = os.getenv("CREATEFILE_DEFAULT_NAME", "untitled.txt")

# Numbered variants tried after the desired name before giving up.
DEFAULT_MAX_ATTEMPTS: Final[int] = int(os.getenv("CREATEFILE_MAX_ATTEMPTS", "999"))

# Byte limit for a single path component (NAME_MAX on most filesystems).
DEFAULT_MAX_NAME_LENGTH: Final[int] = int(
    os.getenv("CREATEFILE_MAX_NAME_LENGTH", "255")
)
