"""Line stream utilities.

Utilities shared by both relay phases:
- iter_lines: lazy, one-line-at-a-time reading
- write_line: write one line and flush
- relay_lines: copy an iterable of lines to an output stream
"""

from typing import Iterable, Iterator, TextIO


def iter_lines(input_stream: TextIO) -> Iterator[str]:
    """Yield lines from input stream without their trailing newline.

    Reads with ``readline`` so nothing beyond the current line is requested,
    and stops at the first empty read (end of stream). A final line with no
    trailing newline is yielded as-is.

    Args:
        input_stream: Text stream to read from
    """
    for line in iter(input_stream.readline, ""):
        if line.endswith("\n"):
            line = line[:-1]
        yield line


def write_line(line: str, output_stream: TextIO) -> None:
    """Write a single line followed by exactly one newline, then flush."""
    output_stream.write(line + "\n")
    output_stream.flush()


def relay_lines(lines: Iterable[str], output_stream: TextIO) -> int:
    """Write every line to output stream in order.

    Args:
        lines: Lines without terminators
        output_stream: Output stream to write to

    Returns:
        Number of lines written
    """
    count = 0
    for line in lines:
        write_line(line, output_stream)
        count += 1
    return count
