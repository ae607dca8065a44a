"""Exceptions raised by the Single Take sorter."""

from __future__ import annotations


class CleanerError(Exception):
    """Base exception for cleaner errors."""


class DirectoryNotFoundError(CleanerError):
    """Raised when the source directory is missing or not a directory."""


class TrashDirectoryCreateError(CleanerError):
    """Raised when the trash subdirectory cannot be created."""


class MoveFailedError(CleanerError):
    """Raised when a single file cannot be moved into the trash directory.

    Attributes:
        name: File name that failed to move.
        reason: Human readable cause.
    """

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Failed to move {name}: {reason}")
        self.name = name
        self.reason = reason
