"""
In-memory data model for dalia.

Everything here is created fresh for each run from the configuration text
and thrown away afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ConfigEntry:
    """One non-blank, non-comment line of the configuration file."""

    path: str
    custom_name: Optional[str] = None
    line_number: int = 0
    expand: bool = False  # `[*]` lines
    raw: str = field(default="", compare=False, repr=False)


@dataclass(frozen=True)
class AliasDefinition:
    name: str
    path: str


@dataclass(frozen=True)
class LineError:
    line_number: int
    line: str
    reason: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.reason}"


@dataclass
class ParseResult:
    """Aliases and rejected lines, both in source order."""

    aliases: List[AliasDefinition] = field(default_factory=list)
    errors: List[LineError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def names(self) -> List[str]:
        return [a.name for a in self.aliases]
