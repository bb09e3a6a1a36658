"""Summary model for a single relay run."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RelayReport(BaseModel):
    """Line counts for both phases of a run.

    Only counters are kept; relayed line content is never retained.
    """

    source: Optional[str] = None
    file_lines: int = Field(default=0, ge=0)
    stdin_lines: int = Field(default=0, ge=0)

    @property
    def total_lines(self) -> int:
        return self.file_lines + self.stdin_lines

    def __str__(self) -> str:
        source = self.source or "<none>"
        return (
            f"source={source} file_lines={self.file_lines} "
            f"stdin_lines={self.stdin_lines} total={self.total_lines}"
        )


__all__ = ["RelayReport"]
