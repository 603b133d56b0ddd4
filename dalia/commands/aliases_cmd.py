"""Aliases command: print one `alias name='cd path'` line per configured directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from dalia.commands.common import print_error, print_line_errors
from dalia.core.config import read_config
from dalia.core.expand import expand_directory
from dalia.core.parser import parse
from dalia.core.writers import render
from dalia.errors import ConfigNotFoundError, MalformedLineError


def aliases(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Read this file instead of $DALIA_CONFIG_PATH/config",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on the first malformed line instead of skipping it"
    ),
) -> None:
    """
    Generate shell aliases for each directory listed in DALIA_CONFIG_PATH/config.

    Meant to be evaluated by the shell:

        eval "$(dalia aliases)"
    """
    try:
        text = read_config(config_file)
    except ConfigNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1)

    try:
        result = parse(text, strict=strict, expander=expand_directory)
    except MalformedLineError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_line_errors(result.errors)

    output = render(result.aliases)
    if output:
        typer.echo(output)
