"""Exceptions raised while allocating and creating files."""

from __future__ import annotations

__all__ = [
    "CreateFileError",
    "ExhaustedError",
    "CreateFailedError",
    "InvalidNameError",
    "NameTooLongError",
]


class CreateFileError(Exception):
    """Base exception for all createfile errors."""


class ExhaustedError(CreateFileError):
    """Raised when every numbered variant of a name is already taken.

    Attributes:
        name: The desired filename.
        max_attempts: Number of numbered candidates that were tried.
    """

    def __init__(self, name: str, max_attempts: int) -> None:
        self.name = name
        self.max_attempts = max_attempts
        super().__init__(
            f"too many files with similar names to {name!r} "
            f"(tried {max_attempts} numbered variant(s))"
        )


class CreateFailedError(CreateFileError):
    """Raised when the filesystem refuses to create a name believed free."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"couldn't create file {name!r}: {reason}")


class InvalidNameError(CreateFileError, ValueError):
    """Raised for names the filesystem can never accept (empty, embedded NUL)."""


class NameTooLongError(InvalidNameError):
    """Raised when a name component exceeds the configured byte limit."""

    def __init__(self, name: str, limit: int) -> None:
        self.name = name
        self.limit = limit
        super().__init__(f"name {name!r} exceeds {limit} bytes")
