"""Error types and result models."""

from .errors import (
    FeederError,
    MissingFileError,
    SourceOpenError,
    UnreadableFileError,
)
from .report import RelayReport

__all__ = [
    "FeederError",
    "MissingFileError",
    "RelayReport",
    "SourceOpenError",
    "UnreadableFileError",
]
