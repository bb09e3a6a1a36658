"""Command-line entry point for feeder.

The click command is resolved on first access to ``cli``. The
``feeder.cli.main`` module, which ``python -m feeder.cli.main`` and the
``feeder`` console script run, is therefore not imported as a side
effect of importing this package.
"""

__all__ = ["cli"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name == "cli":
        from .main import cli

        return cli
    raise AttributeError(name)
