"""CLI for cron-parser - expand a cron expression into the times it matches."""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cron_parser import __version__
from cron_parser.cron_parse import CronParseError, EXPRESSION_FORMAT, ParsedCron, format_report, parse_cron
from cron_parser.fields import COMMAND_LABEL

app = typer.Typer(
    name="cron-parser",
    help="Expand a cron expression into the values each field matches.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

USAGE = f'Usage: cron-parser "{EXPRESSION_FORMAT}"'
EXAMPLE = 'Example: cron-parser "*/15 0 1,15 * 1-5 /usr/bin/find"'


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(lambda msg: typer.echo(msg, err=True, nl=False), level="DEBUG" if verbose else "WARNING")
    if verbose:
        logger.enable("cron_parser")
    else:
        logger.disable("cron_parser")


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"cron-parser-cli {__version__}")
        raise typer.Exit()


def _render_table(parsed: ParsedCron) -> Table:
    table = Table()
    table.add_column("Field", style="cyan")
    table.add_column("Values")

    for f in parsed.fields:
        table.add_row(f.spec.name, " ".join(str(v) for v in f.values))
    table.add_row(COMMAND_LABEL, escape(parsed.command))
    return table


@app.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
def main(
    expression: Annotated[Optional[list[str]], typer.Argument(help="Cron expression: 5 time fields followed by a command")] = None,
    table: Annotated[bool, typer.Option("--table", "-t", help="Render the result as a table")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", envvar="CRON_PARSER_VERBOSE", help="Log field expansion")] = False,
    version: Annotated[Optional[bool], typer.Option("--version", "-v", callback=_version_callback, is_eager=True)] = None,
) -> None:
    """Parse a cron expression and print the expanded fields."""
    _configure_logging(verbose)

    if not expression:
        err_console.print("[red]Error:[/red] No cron expression provided")
        err_console.print(escape(USAGE), soft_wrap=True)
        err_console.print(escape(EXAMPLE), soft_wrap=True)
        raise typer.Exit(1)

    line = " ".join(expression)
    logger.debug(f"Parsing {line!r}")

    try:
        parsed = parse_cron(line)
    except CronParseError as e:
        err_console.print(f"[red]Error parsing cron expression:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if table:
        console.print(_render_table(parsed))
    else:
        typer.echo(format_report(parsed))


if __name__ == "__main__":
    app()
