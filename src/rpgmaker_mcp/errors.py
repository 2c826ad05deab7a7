"""Exception hierarchy shared by the persistence layer and the tools."""

from __future__ import annotations

from pathlib import Path


class DatabaseError(RuntimeError):
    """Base exception for failures touching the project's files."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ReadFailure(DatabaseError):
    """Raised when a file is missing, unreadable, or not the expected shape."""


class WriteFailure(DatabaseError):
    """Raised when a file could not be replaced; the previous content survives."""


class ValidationRejection(DatabaseError, ValueError):
    """Raised when a requested mutation would break a collection invariant."""


__all__ = ["DatabaseError", "ReadFailure", "ValidationRejection", "WriteFailure"]
