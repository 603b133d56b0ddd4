"""Dalia - generate shell `cd` aliases from a list of directories."""

__version__ = "0.3.0"

from dalia.cli import app, main

__all__ = ["app", "main", "__version__"]
