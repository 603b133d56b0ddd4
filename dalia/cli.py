#!/usr/bin/env python3
"""
Dalia - shell cd aliases from a directory list
Main CLI entry point
"""

from __future__ import annotations

import typer

from dalia.commands import aliases_cmd, config_cmd, info_cmd

app = typer.Typer(
    name="dalia",
    help="Generate shell cd aliases from a list of directories",
    no_args_is_help=True,
    add_completion=False,
)

app.command(name="aliases", help="Print alias statements for every configured directory")(
    aliases_cmd.aliases
)
app.command(name="version", help="Print the current version")(info_cmd.version)
app.command(name="help", help="Print usage for dalia or one of its commands")(
    info_cmd.help_command
)

app.add_typer(config_cmd.app, name="config", help="Inspect and validate the configuration file")


@app.callback()
def callback() -> None:
    """
    Dalia - shell cd aliases from a directory list

    Usage in a shell profile:
      eval "$(dalia aliases)"
    """
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
