"""Exceptions raised by dalia."""

from __future__ import annotations

from pathlib import Path


class DaliaError(Exception):
    """Base class for every dalia error."""


class ConfigNotFoundError(DaliaError):
    """The configuration file is missing or cannot be read."""

    def __init__(self, path: Path, reason: str = "no such file"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read configuration file {self.path}: {reason}")


class MalformedLineError(DaliaError):
    """A configuration line does not follow the line grammar."""

    def __init__(self, reason: str, line_number: int = 0, line: str = ""):
        self.reason = reason
        self.line_number = line_number
        self.line = line
        if line_number:
            super().__init__(f"line {line_number}: {reason}")
        else:
            super().__init__(reason)
