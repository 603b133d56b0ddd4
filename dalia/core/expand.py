"""
Directory expansion for `[*]` lines.

`[*]/some/dir` defines one alias for each immediate child directory of
/some/dir. Files and hidden entries are ignored; child directories whose
names cannot be used as alias names are reported and skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from dalia.core.parser import SEPARATOR, ErrorHandler, is_alias_name
from dalia.errors import MalformedLineError
from dalia.model import AliasDefinition, ConfigEntry


def to_filesystem_path(path: str) -> Path:
    """Resolve a configured path the way the shell would for `cd`."""
    return Path(path.replace("\\ ", " ")).expanduser()


def expand_directory(
    entry: ConfigEntry, on_skip: Optional[ErrorHandler] = None
) -> List[AliasDefinition]:
    """
    Expand a `[*]` entry into aliases for its child directories.

    Args:
        entry: Entry with `expand` set
        on_skip: Receives an error for each child directory that cannot
            become an alias; without it the first such error is raised

    Returns:
        Aliases sorted by child name; paths keep the configured prefix
        (including any ~) followed by the child name

    Raises:
        MalformedLineError: If the path is not an existing directory, or a
            child is unusable and no `on_skip` handler was given
    """
    directory = to_filesystem_path(entry.path)
    if not directory.is_dir():
        raise MalformedLineError(
            f"'{entry.path}' is not a directory", entry.line_number, entry.raw
        )

    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name.lower())
    except OSError as e:
        raise MalformedLineError(
            f"cannot list '{entry.path}': {e.strerror or e}", entry.line_number, entry.raw
        ) from e

    prefix = entry.path.rstrip(SEPARATOR)
    aliases = []
    for child in children:
        if child.name.startswith(".") or not child.is_dir():
            continue
        if not is_alias_name(child.name):
            error = MalformedLineError(
                f"skipped directory '{child.name}': not usable as an alias name",
                entry.line_number,
                entry.raw,
            )
            if on_skip is None:
                raise error
            on_skip(error)
            continue
        aliases.append(
            AliasDefinition(name=child.name.lower(), path=f"{prefix}{SEPARATOR}{child.name}")
        )
    return aliases
