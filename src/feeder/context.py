"""Feeder context for passing resolved streams and settings to commands."""

import logging
import os
import sys
from typing import Optional, TextIO

import click

LOG_LEVEL_ENV = "FEEDER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def resolve_log_level(level_option: Optional[str] = None) -> int:
    """Resolve the log level for the feeder logger.

    Resolution order:
    1. Explicit level name (used by tests and embedding callers)
    2. $FEEDER_LOG_LEVEL environment variable
    3. WARNING

    Reads fresh from the environment each time. Unknown names fall back to
    WARNING rather than failing, since logging never affects the relay.
    """
    name = level_option or os.environ.get(LOG_LEVEL_ENV)
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


class _FeederHandler(logging.StreamHandler):
    """Stderr handler installed by configure_logging."""


def configure_logging(level: int) -> logging.Logger:
    """Route ``feeder.*`` log records to the current stderr.

    Replaces any handler installed by a previous call, so repeated
    invocations in one process (tests) always log to the live sys.stderr.
    Stdout is reserved for relayed lines and never receives log output.
    """
    logger = logging.getLogger("feeder")
    for handler in list(logger.handlers):
        if isinstance(handler, _FeederHandler):
            logger.removeHandler(handler)

    handler = _FeederHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def passthrough_errors(stream: TextIO) -> TextIO:
    """Switch a text stream to ``surrogateescape`` error handling.

    Undecodable input bytes then survive a read/write round trip instead
    of raising, matching how phase 1 decodes the file. Streams without
    ``reconfigure`` (StringIO and friends) are returned untouched.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")
    return stream


class FeederContext:
    def __init__(self):
        self.input_stream: TextIO = passthrough_errors(sys.stdin)
        self.output_stream: TextIO = passthrough_errors(sys.stdout)
        self.log_level: int = resolve_log_level()


pass_context = click.make_pass_decorator(FeederContext, ensure=True)
