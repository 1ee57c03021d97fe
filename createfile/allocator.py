"""Unique filename allocation.

:func:`allocate` finds the first free name for a desired filename by linear
probing: the name itself, then ``stem(1)ext``, ``stem(2)ext`` … up to
*max_attempts*. It never touches the filesystem directly; existence is asked
of a caller-supplied predicate so the same routine drives the CLI, the rename
helper and in-memory tests.

:func:`create_unique` pairs the allocation with an atomic create. Checking and
creating remain two steps, so a concurrent creator can still take the chosen
name in between. The create refuses to clobber in that case and the failure is
reported as :class:`~createfile.exceptions.CreateFailedError` without retrying.
"""

from __future__ import annotations

import logging
from typing import Callable

from createfile.exceptions import (
    CreateFailedError,
    ExhaustedError,
    InvalidNameError,
    NameTooLongError,
)
from createfile.filesystem import FileSystem, LocalFileSystem
from createfile.naming import component_start, generate_candidate, split_name
from createfile.utils.constant import DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_NAME_LENGTH

__all__ = ["allocate", "create_unique", "check_name"]

logger = logging.getLogger(__name__)


def check_name(name: str, max_name_length: int | None = None) -> None:
    """Validate *name* before it is offered to the filesystem.

    Args:
        name: Candidate filename.
        max_name_length: Maximum size in UTF-8 bytes of the final path
            component. ``None`` disables the check.

    Raises:
        InvalidNameError: If *name* is empty, ends in a path separator or
            contains a NUL character.
        NameTooLongError: If the final component exceeds *max_name_length*.
    """
    if not name:
        raise InvalidNameError("filename must not be empty")
    if "\0" in name:
        raise InvalidNameError(f"filename {name!r} contains a NUL character")
    component = name[component_start(name):]
    if not component:
        raise InvalidNameError(f"filename {name!r} has no final component")
    if (
        max_name_length is not None
        and len(component.encode("utf-8")) > max_name_length
    ):
        raise NameTooLongError(name, max_name_length)


def allocate(
    desired: str,
    exists: Callable[[str], bool],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    max_name_length: int | None = None,
) -> str:
    """Return the first name derived from *desired* that *exists* reports free.

    Args:
        desired: The preferred filename, returned as-is when free.
        exists: Predicate telling whether a name is already taken.
        max_attempts: How many numbered candidates to try after *desired*.
        max_name_length: Optional byte limit for the final path component.

    Returns:
        *desired* or its first free numbered variant.

    Raises:
        ExhaustedError: If *desired* and all *max_attempts* variants are taken.
        NameTooLongError: If a name to be probed exceeds *max_name_length*.
        InvalidNameError: If *desired* is empty or contains a NUL character.
        ValueError: If *max_attempts* is negative.
    """
    if max_attempts < 0:
        raise ValueError(f"max_attempts must be >= 0, got {max_attempts}")
    check_name(desired, max_name_length)

    if not exists(desired):
        logger.debug("%s is free", desired)
        return desired

    parsed = split_name(desired)
    for n in range(1, max_attempts + 1):
        candidate = generate_candidate(parsed, n)
        check_name(candidate, max_name_length)
        if not exists(candidate):
            logger.debug("%s is taken, allocated %s", desired, candidate)
            return candidate
        logger.debug("%s is taken", candidate)

    raise ExhaustedError(desired, max_attempts)


def create_unique(
    desired: str,
    fs: FileSystem | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    max_name_length: int | None = DEFAULT_MAX_NAME_LENGTH,
) -> str:
    """Allocate a free name for *desired* and create it.

    Args:
        desired: The preferred filename.
        fs: Filesystem collaborator. Defaults to the local filesystem.
        max_attempts: How many numbered candidates to try.
        max_name_length: Optional byte limit for the final path component.

    Returns:
        The name of the file that was created.

    Raises:
        ExhaustedError: If no free name exists within *max_attempts*.
        CreateFailedError: If creating the allocated name fails.
    """
    if fs is None:
        fs = LocalFileSystem()
    name = allocate(desired, fs.exists, max_attempts, max_name_length)
    try:
        return fs.create(name)
    except OSError as exc:
        raise CreateFailedError(name, exc.strerror or str(exc)) from exc
