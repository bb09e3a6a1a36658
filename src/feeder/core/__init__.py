"""Feeder core logic, separated from CLI presentation.

- streaming: line-level read/write primitives
- relay: the two-phase file-then-stdin relay
"""

from .relay import relay_file, relay_stdin, run
from .streaming import iter_lines, relay_lines, write_line

__all__ = [
    "iter_lines",
    "relay_file",
    "relay_lines",
    "relay_stdin",
    "run",
    "write_line",
]
