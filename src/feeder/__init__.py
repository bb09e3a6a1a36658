"""Feeder: echo a program file, then relay stdin, one line at a time."""

__all__ = ["__version__"]

__version__ = "0.0.1"
