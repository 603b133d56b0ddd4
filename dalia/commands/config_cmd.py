"""Config command for dalia CLI."""

from collections import Counter
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dalia.commands.common import print_error, print_line_errors
from dalia.core.config import get_config_path, read_config
from dalia.core.expand import expand_directory
from dalia.core.parser import parse
from dalia.core.writers import render_yaml
from dalia.errors import ConfigNotFoundError
from dalia.model import ParseResult

app = typer.Typer()
console = Console()


def _load(config_file: Optional[Path]) -> ParseResult:
    try:
        text = read_config(config_file)
    except ConfigNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1)
    return parse(text, expander=expand_directory)


@app.command("path")
def path():
    """Show where the configuration file is looked up."""
    config_path = get_config_path()
    typer.echo(str(config_path))
    if not config_path.exists():
        typer.echo("(file does not exist yet)", err=True)


@app.command("show")
def show(
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file to read"),
):
    """Show the aliases the configuration defines."""
    result = _load(config_file)

    if not result.aliases:
        console.print("[dim]No aliases defined.[/]")
    else:
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Alias", style="green")
        table.add_column("Directory")
        for alias in result.aliases:
            table.add_row(escape(alias.name), escape(alias.path))
        console.print(table)
        console.print(f"  Aliases: [cyan]{len(result.aliases)}[/]")

    print_line_errors(result.errors)


def find_problems(result: ParseResult) -> List[str]:
    """Aliases that would render as broken shell code."""
    problems = []
    for alias in result.aliases:
        if "'" in alias.path:
            problems.append(
                f"alias '{alias.name}': path contains a single quote and will not be quoted correctly"
            )
    return problems


def find_duplicates(result: ParseResult) -> List[str]:
    counts = Counter(result.names())
    return [name for name, count in counts.items() if count > 1]


@app.command("validate")
def validate(
    config_file: Optional[Path] = typer.Argument(None, help="Config file to validate"),
):
    """Validate a configuration file."""
    result = _load(config_file)
    problems = find_problems(result)

    for name in find_duplicates(result):
        console.print(
            f"[yellow]note:[/] '{escape(name)}' is defined more than once; the last definition wins"
        )

    if result.errors or problems:
        print_line_errors(result.errors)
        for problem in problems:
            console.print(f"[bold red]❌[/] {escape(problem)}")
        raise typer.Exit(1)

    console.print(f"[bold green]✔[/] Configuration is valid: {len(result.aliases)} alias(es)")


@app.command("export")
def export(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write YAML here instead of stdout"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file to read"),
):
    """Export the alias table as YAML."""
    result = _load(config_file)
    print_line_errors(result.errors)
    text = render_yaml(result.aliases)

    if output is None:
        typer.echo(text, nl=False)
        return

    with open(output, "w", encoding="utf-8") as f:
        f.write(text)
    console.print(f"[bold green]✔[/] Aliases exported to [underline]{escape(str(output))}[/]")
