"""Line relay: echo an optional file, then relay stdin until end of stream.

Control flow is strictly sequential. Phase 1 (file echo) runs only when a
path is given and completes before phase 2 (stdin relay) starts. A file
that cannot be opened aborts the run before any stdin line is consumed.
"""

import logging
import sys
from typing import Optional, Sequence, TextIO

from ..models.errors import MissingFileError, UnreadableFileError
from ..models.report import RelayReport
from .streaming import iter_lines, relay_lines

logger = logging.getLogger(__name__)


def relay_file(path: str, output_stream: TextIO) -> int:
    """Echo every line of the file at path to output stream.

    The handle is scoped to this call and closed on every exit path,
    including an error raised mid-read. Bytes that are not valid UTF-8
    are carried as surrogate escapes, so an output stream using
    ``errors="surrogateescape"`` writes them back unchanged.

    Args:
        path: File to read
        output_stream: Output stream to write to

    Returns:
        Number of lines written

    Raises:
        MissingFileError: If path does not exist
        UnreadableFileError: If path exists but cannot be opened
    """
    try:
        # Only "\n" ends a line; stray "\r" and undecodable bytes pass through
        handle = open(
            path, encoding="utf-8", errors="surrogateescape", newline=""
        )
    except FileNotFoundError as e:
        raise MissingFileError(path) from e
    except OSError as e:
        raise UnreadableFileError(path, e.strerror or str(e)) from e

    with handle:
        return relay_lines(iter_lines(handle), output_stream)


def relay_stdin(input_stream: TextIO, output_stream: TextIO) -> int:
    """Relay lines from input stream until it reports end of stream."""
    return relay_lines(iter_lines(input_stream), output_stream)


def run(
    args: Sequence[str],
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
) -> int:
    """Run both relay phases and return the exit status.

    Args:
        args: Positional arguments; the first one, if any, is the file path
        input_stream: Phase 2 source (default: sys.stdin)
        output_stream: Destination for every line (default: sys.stdout)

    Returns:
        0 once the input stream is exhausted

    Raises:
        SourceOpenError: If the file cannot be opened. Raised before
            phase 2 begins.
    """
    input_stream = input_stream if input_stream is not None else sys.stdin
    output_stream = output_stream if output_stream is not None else sys.stdout

    report = RelayReport(source=args[0] if args else None)

    if len(args) > 1:
        logger.debug("Ignoring extra arguments: %s", list(args[1:]))

    if report.source is not None:
        logger.debug("Phase 1: echoing %s", report.source)
        report.file_lines = relay_file(report.source, output_stream)
        logger.debug("Phase 1 done: %d lines", report.file_lines)

    logger.debug("Phase 2: relaying stdin")
    report.stdin_lines = relay_stdin(input_stream, output_stream)
    logger.debug("Phase 2 done: end of stream after %d lines", report.stdin_lines)

    logger.debug("Relay finished: %s", report)
    return 0
