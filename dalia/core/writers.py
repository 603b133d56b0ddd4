"""
Output writers for generated aliases.

`render` produces the text meant for `eval "$(dalia aliases)"`. Paths are
wrapped in single quotes as-is; a path that itself contains a single quote
will produce a broken alias line (see `dalia config validate`).
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List

import yaml

from dalia.model import AliasDefinition

ALIAS_LINE_RE = re.compile(r"^alias (?P<name>[^=\s]+)='cd (?P<path>.*)'$")


def render_alias(definition: AliasDefinition) -> str:
    """Format one alias as `alias name='cd path'`."""
    return f"alias {definition.name}='cd {definition.path}'"


def render(definitions: Iterable[AliasDefinition]) -> str:
    """
    Render alias definitions as shell source.

    Args:
        definitions: Aliases in the order they should be defined

    Returns:
        Newline-separated alias lines (no trailing newline); empty string
        when there is nothing to define
    """
    return "\n".join(render_alias(d) for d in definitions)


def extract_cd_targets(text: str) -> List[str]:
    """Recover the `cd` targets from text produced by `render`."""
    targets = []
    for line in text.splitlines():
        match = ALIAS_LINE_RE.match(line)
        if match:
            targets.append(match.group("path"))
    return targets


def render_yaml(definitions: Iterable[AliasDefinition]) -> str:
    """
    Dump aliases as a YAML name -> path mapping.

    Later definitions of the same name replace earlier ones, as they would
    in the shell.
    """
    table: Dict[str, str] = {}
    for d in definitions:
        table[d.name] = d.path
    return yaml.dump(table, default_flow_style=False, sort_keys=False, allow_unicode=True)
