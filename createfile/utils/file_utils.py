"""Path helpers built on the allocator."""

from __future__ import annotations

import os
import pathlib
from typing import Union

from createfile.allocator import allocate
from createfile.utils.constant import DEFAULT_MAX_ATTEMPTS

PathLike = Union[str, pathlib.Path]


def get_unique_filename(
    base_path: PathLike,
    overwrite: bool = False,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> pathlib.Path:
    """Generate a unique filename to avoid overwriting existing files.

    If the file does not exist or overwrite is True, returns the original path.
    Otherwise, inserts a numbered suffix like ``(1)``, ``(2)``, etc. before the
    extension.

    Args:
        base_path: The desired file path.
        overwrite: If True, return the original path even if it exists.
        max_attempts: Numbered variants to try before giving up.

    Returns:
        A pathlib.Path that does not exist (unless overwrite=True).

    Raises:
        ExhaustedError: If all numbered variants are taken.
    """
    path = pathlib.Path(base_path)
    if overwrite:
        return path

    name = allocate(
        path.name,
        lambda candidate: os.path.lexists(path.parent / candidate),
        max_attempts=max_attempts,
    )
    return path.parent / name
