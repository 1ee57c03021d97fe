"""Filesystem collaborator used by the allocator and the CLIs."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol, Union

__all__ = ["FileSystem", "LocalFileSystem"]

PathLike = Union[str, Path]

logger = logging.getLogger(__name__)

# Read/write, never clobber an existing entry.
_CREATE_FLAGS = os.O_CREAT | os.O_EXCL | os.O_RDWR | getattr(os, "O_BINARY", 0)


class FileSystem(Protocol):
    """Capabilities the allocator needs from its host filesystem."""

    def exists(self, name: str) -> bool: ...

    def create(self, name: str) -> str: ...

    def rename(self, old: str, new: str) -> None: ...


class LocalFileSystem:
    """Operate on the local OS, optionally relative to *root*.

    Args:
        root: Directory that relative names are resolved against. ``None``
            uses the process working directory.
    """

    def __init__(self, root: PathLike | None = None) -> None:
        self.root = Path(root) if root is not None else None

    def _resolve(self, name: str) -> str:
        if self.root is None:
            return name
        return os.path.join(self.root, name)

    def exists(self, name: str) -> bool:
        """Return ``True`` if *name* is taken by any directory entry.

        Dangling symlinks count as taken since creating over them would fail.
        """
        return os.path.lexists(self._resolve(name))

    def create(self, name: str) -> str:
        """Atomically create *name* as an empty read/write file.

        Returns:
            The name that was created, unchanged.

        Raises:
            FileExistsError: If *name* appeared since it was last checked.
            OSError: For any other reason the OS refuses the create.
        """
        fd = os.open(self._resolve(name), _CREATE_FLAGS, 0o666)
        os.close(fd)
        logger.debug("Created %s", name)
        return name

    def rename(self, old: str, new: str) -> None:
        os.rename(self._resolve(old), self._resolve(new))
        logger.debug("Renamed %s -> %s", old, new)
