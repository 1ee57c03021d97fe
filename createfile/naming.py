"""Filename splitting and numbered candidate generation.

A desired name such as ``report.txt`` is split once into a stem and an
extension, and numbered candidates are built by inserting ``(n)`` between the
two: ``report(1).txt``, ``report(2).txt`` and so on.

Only the final path component is considered when looking for the extension
separator, so dots in directory names never split a name. A dot at position 0
of that component (``.bashrc``) marks a hidden file, not an extension.
"""

from __future__ import annotations

import operator
import os
from typing import NamedTuple

__all__ = [
    "ParsedName",
    "component_start",
    "split_name",
    "to_decimal",
    "generate_candidate",
]

_SEPARATORS = frozenset(filter(None, ("/", os.sep, os.altsep)))


class ParsedName(NamedTuple):
    """A filename split at its extension separator.

    ``stem + extension`` always reconstructs the original name exactly.
    """

    stem: str
    extension: str = ""


def component_start(name: str) -> int:
    """Return the index at which the final path component of *name* begins."""
    return max((name.rfind(sep) for sep in _SEPARATORS), default=-1) + 1


def split_name(name: str) -> ParsedName:
    """Split *name* into stem and extension at the last dot.

    Args:
        name: Filename, optionally prefixed by directories.

    Returns:
        The parsed name. The extension keeps its leading dot and is empty when
        the final component has no dot past its first character.

    Examples:
        >>> split_name("archive.tar.gz")
        ParsedName(stem='archive.tar', extension='.gz')
        >>> split_name(".bashrc")
        ParsedName(stem='.bashrc', extension='')
    """
    start = component_start(name)
    dot = name.rfind(".", start + 1)
    if dot == -1:
        return ParsedName(name, "")
    return ParsedName(name[:dot], name[dot:])


def to_decimal(n: int) -> str:
    """Render *n* as minimal decimal text (``-`` for negatives, ``"0"`` for zero)."""
    return format(operator.index(n), "d")


def generate_candidate(parsed: ParsedName, n: int) -> str:
    """Build the ``n``-th numbered candidate, ``stem(n)extension``.

    Raises:
        ValueError: If *n* is smaller than 1.
    """
    if n < 1:
        raise ValueError(f"candidate number must be >= 1, got {n}")
    return f"{parsed.stem}({to_decimal(n)}){parsed.extension}"
