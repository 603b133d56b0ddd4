"""
Config parser and alias generator.

The configuration file has one entry per line:

    /some/absolute/path             -> alias path='cd /some/absolute/path'
    [name]/some/absolute/path       -> alias name='cd /some/absolute/path'
    [*]/some/directory              -> one alias per child directory

Blank lines and `#` comments are ignored. Paths must start with `/` or `~`
and are kept exactly as written; tilde and backslash escapes are left for
the shell that evaluates the generated aliases.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Iterator, Optional, Tuple

from dalia.errors import MalformedLineError
from dalia.model import AliasDefinition, ConfigEntry, LineError, ParseResult

COMMENT = "#"
HOME = "~"
ROOT = "/"
SEPARATOR = "/"
EXPAND_MARKER = "*"

# Same character set the original alias lexer accepted for custom names.
CUSTOM_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")

# Names taken from directories may also use these; anything else could be
# read by the shell as an operator, quote, expansion or redirection.
DERIVED_NAME_RE = re.compile(r"^[A-Za-z0-9_.~+@%,:-]+$")

ErrorHandler = Callable[[MalformedLineError], None]

# Receives the entry and a handler for children it has to skip.
Expander = Callable[[ConfigEntry, ErrorHandler], Iterable[AliasDefinition]]


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, line) pairs, numbered from 1."""
    for number, line in enumerate(text.splitlines(), start=1):
        yield number, line


def parse_line(line: str, line_number: int = 0) -> Optional[ConfigEntry]:
    """
    Parse a single configuration line.

    Args:
        line: Raw line text (without the trailing newline)
        line_number: 1-based position in the file, used for error reporting

    Returns:
        A ConfigEntry, or None for blank and comment lines

    Raises:
        MalformedLineError: If the line has an unterminated bracket or the
            path is empty or not absolute
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT):
        return None

    custom_name: Optional[str] = None
    expand = False
    candidate = stripped

    if stripped.startswith("["):
        close = stripped.find("]", 1)
        if close == -1:
            raise MalformedLineError("unterminated '[' in custom name", line_number, line)
        custom_name = stripped[1:close].strip()
        candidate = stripped[close + 1:].lstrip()
        if custom_name == EXPAND_MARKER:
            custom_name = None
            expand = True

    if not candidate:
        raise MalformedLineError("missing path", line_number, line)
    if not candidate.startswith((HOME, ROOT)):
        raise MalformedLineError(
            f"path '{candidate}' is not absolute (must start with '/' or '~')",
            line_number,
            line,
        )

    return ConfigEntry(
        path=candidate,
        custom_name=custom_name or None,
        line_number=line_number,
        expand=expand,
        raw=line,
    )


def basename(path: str) -> str:
    """Return the final path segment, ignoring trailing separators."""
    trimmed = path.rstrip(SEPARATOR)
    segment = trimmed.rsplit(SEPARATOR, 1)[-1]
    # A bare home marker has no name of its own.
    if segment == HOME:
        return ""
    return segment


def is_alias_name(name: str) -> bool:
    """Check a directory name can be used unquoted as an alias name."""
    return bool(DERIVED_NAME_RE.match(name))


def derive_name(entry: ConfigEntry) -> str:
    """
    Work out the alias name for an entry.

    A custom name wins when present; otherwise the lowercase basename of the
    path is used.

    Raises:
        MalformedLineError: If the custom name has characters outside
            letters, digits, '_' and '-', or the basename is empty or unusable
            as an alias name
    """
    if entry.custom_name:
        if not CUSTOM_NAME_RE.match(entry.custom_name):
            raise MalformedLineError(
                f"invalid alias name '{entry.custom_name}' "
                "(use letters, digits, '_' or '-')",
                entry.line_number,
                entry.raw,
            )
        return entry.custom_name.lower()

    name = basename(entry.path)
    if not name:
        raise MalformedLineError(
            f"cannot derive an alias name from '{entry.path}'",
            entry.line_number,
            entry.raw,
        )
    if not is_alias_name(name):
        raise MalformedLineError(
            f"'{name}' cannot be used as an alias name; add a custom [name]",
            entry.line_number,
            entry.raw,
        )
    return name.lower()


def to_alias(entry: ConfigEntry) -> AliasDefinition:
    """Build the alias for a plain (non-expanding) entry."""
    return AliasDefinition(name=derive_name(entry), path=entry.path)


class ConfigEntries:
    """
    Lazy, restartable view of the entries in a configuration text.

    Each iteration re-reads the text from the start. Malformed lines are
    handed to `on_error` and skipped; without a handler they propagate.
    """

    def __init__(
        self,
        text: str,
        on_error: Optional[ErrorHandler] = None,
    ):
        self.text = text
        self.on_error = on_error

    def __iter__(self) -> Iterator[ConfigEntry]:
        for number, line in iter_lines(self.text):
            try:
                entry = parse_line(line, number)
            except MalformedLineError as e:
                if self.on_error is None:
                    raise
                self.on_error(e)
                continue
            if entry is not None:
                yield entry


def _locate(error: MalformedLineError, entry: ConfigEntry) -> MalformedLineError:
    if error.line_number:
        return error
    return MalformedLineError(error.reason, entry.line_number, entry.raw)


def parse(
    text: str,
    *,
    strict: bool = False,
    expander: Optional[Expander] = None,
) -> ParseResult:
    """
    Turn configuration text into alias definitions.

    Malformed lines are skipped and recorded in `ParseResult.errors`, so one
    bad line never costs the user the rest of their aliases.

    Args:
        text: Full contents of the configuration file
        strict: Raise on the first malformed line instead of skipping it
        expander: Called for `[*]` entries to list the aliases they expand
            to, along with a handler for children that cannot become
            aliases. Without one, such lines are reported as errors.

    Returns:
        ParseResult with aliases and errors in source order

    Raises:
        MalformedLineError: Only when `strict` is set
    """
    result = ParseResult()

    def reject(error: MalformedLineError) -> None:
        if strict:
            raise error
        result.errors.append(LineError(error.line_number, error.line, error.reason))

    for entry in ConfigEntries(text, on_error=reject):
        try:
            if entry.expand:
                if expander is None:
                    raise MalformedLineError("directory expansion is not available")
                children = expander(entry, lambda error: reject(_locate(error, entry)))
                result.aliases.extend(children)
            else:
                result.aliases.append(to_alias(entry))
        except MalformedLineError as e:
            reject(_locate(e, entry))

    return result
