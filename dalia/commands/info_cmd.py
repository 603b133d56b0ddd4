"""Version and help commands."""

from __future__ import annotations

from typing import Optional

import typer

from dalia.core.config import DALIA_CONFIG_ENV_VAR

USAGE = f"""Usage: dalia <command> [arguments]

Commands:
    aliases: Generates all shell aliases for each configured directory at {DALIA_CONFIG_ENV_VAR}
    config: Inspect and validate the configuration file
    version: The current build version
    help: Prints this usage message

Examples:
    $ eval "$(dalia aliases)"

Environment:
{DALIA_CONFIG_ENV_VAR}
    The directory where dalia looks for alias configurations. Defaults to $HOME/.dalia.
    Put the alias configurations in a file named `config` there.

Use "dalia help <command>" for more information about that command."""

ALIASES_USAGE = f"""Usage: dalia aliases [--config FILE] [--strict]

Description:
    Generates shell aliases for each directory listed in {DALIA_CONFIG_ENV_VAR}/config.
    Only aliases that change directory are generated, each of the form
    `alias name='cd /some/path'`.

    The simplest entry is an absolute path (starting with / or ~). The alias is
    named after the last directory of the path, lowercased. A custom name can be
    given in square brackets before the path; it is lowercased too.

    An entry starting with [*] expands to one alias for every directory directly
    inside the given path. Files are ignored.

    Blank lines and lines starting with # are ignored. Lines that cannot be
    parsed are skipped with a warning on stderr unless --strict is given.

Examples:
    Simple path
    /some/path => alias path='cd /some/path'

    Custom name
    [my-path]/some/path => alias my-path='cd /some/path'

    Directory expansion
    [*]/some/path =>
        alias one='cd /some/path/one'
        alias two='cd /some/path/two'

    when /some/path contains the directories one and two."""

CONFIG_USAGE = """Usage: dalia config <path|show|validate|export>

Description:
    path:     Print where dalia looks for its configuration file
    show:     Show the aliases the configuration defines
    validate: Check every line and exit non-zero if any line is rejected
    export:   Write the alias table as YAML"""

VERSION_USAGE = """Usage: dalia version

Description:
    Prints the current version of dalia."""

HELP_USAGE = """Usage: dalia help [command]

Description:
    Prints usage for dalia or for a single command."""

COMMAND_USAGE = {
    "aliases": ALIASES_USAGE,
    "config": CONFIG_USAGE,
    "version": VERSION_USAGE,
    "help": HELP_USAGE,
}


def version() -> None:
    """Print the current version."""
    from dalia import __version__

    typer.echo(f"dalia version {__version__}")


def help_command(
    command: Optional[str] = typer.Argument(None, help="Command to describe"),
) -> None:
    """Print usage for dalia or one of its commands."""
    if command is None:
        typer.echo(USAGE)
        return

    usage = COMMAND_USAGE.get(command)
    if usage is None:
        typer.echo(f"dalia: unknown command: {command}", err=True)
        raise typer.Exit(1)
    typer.echo(usage)
