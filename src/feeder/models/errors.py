"""Error types raised by the line relay."""

from __future__ import annotations


class FeederError(Exception):
    """Base class for failures the CLI reports as ``Error: <message>``."""


class SourceOpenError(FeederError):
    """The phase 1 file could not be opened for reading."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class MissingFileError(SourceOpenError, FileNotFoundError):
    """The phase 1 file does not exist."""

    def __init__(self, path: str):
        super().__init__(path, f"File not found: {path}")


class UnreadableFileError(SourceOpenError):
    """The phase 1 file exists but cannot be opened (directory, permissions)."""

    def __init__(self, path: str, reason: str):
        super().__init__(path, f"File not readable: {path} ({reason})")
        self.reason = reason


__all__ = [
    "FeederError",
    "MissingFileError",
    "SourceOpenError",
    "UnreadableFileError",
]
