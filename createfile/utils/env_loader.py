"""Load the project ``.env`` file into ``os.environ`` exactly once.

``python-dotenv`` is used when installed. Without it a minimal ``KEY=VALUE``
parser applies; values already present in the environment always win.
"""

from __future__ import annotations

import os
import pathlib
from functools import lru_cache

try:
    from dotenv import load_dotenv as LOAD_DOTENV
except ImportError:  # pragma: no cover
    # Falls through to _parse_env_file; also the path the tests drive directly.
    LOAD_DOTENV = None  # type: ignore[assignment]

__all__ = ["load_project_env"]

# Repository root resolved relative to this file (utils/env_loader.py → package → repo)
_ENV_FILE = pathlib.Path(__file__).resolve().parents[2] / ".env"


def _parse_env_file(path: pathlib.Path) -> None:
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip().removeprefix("export ").strip()
        value = value.strip().strip("'\"")
        os.environ.setdefault(key, value)


@lru_cache(maxsize=None)
def load_project_env(force: bool = False) -> None:
    """Populate ``os.environ`` from the project ``.env`` file.

    Args:
        force: Bypass the cached result and read the file again.
    """
    if not _ENV_FILE.is_file():
        return
    if LOAD_DOTENV is not None:
        LOAD_DOTENV(dotenv_path=_ENV_FILE, override=False)
    else:
        _parse_env_file(_ENV_FILE)
