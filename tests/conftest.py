"""Pytest configuration and shared fixtures."""

import logging
import sys

import pytest
from click.testing import CliRunner

from feeder.cli import cli

FEEDER_CLI = [sys.executable, "-m", "feeder.cli.main"]


@pytest.fixture(autouse=True)
def clear_log_level(monkeypatch):
    """Keep a developer's $FEEDER_LOG_LEVEL out of test output."""
    monkeypatch.delenv("FEEDER_LOG_LEVEL", raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional stdin text.

    Usage:
        result = invoke(["prelude.txt"], input_data="z\\n")
        result.exit_code, result.stdout, result.stderr
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def feeder_cli():
    """Command prefix for running feeder as a real subprocess."""
    return list(FEEDER_CLI)


@pytest.fixture
def prelude(tmp_path):
    """Provide a small file with two newline-terminated lines."""
    path = tmp_path / "prelude.txt"
    path.write_text("x\ny\n")
    return path


@pytest.fixture
def missing_path(tmp_path):
    """Provide a path that does not exist."""
    return tmp_path / "nope" / "missing.txt"


@pytest.fixture(autouse=True)
def reset_feeder_logger():
    """Drop handlers bound to a finished CliRunner's stderr."""
    yield
    logger = logging.getLogger("feeder")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
