"""Command-line interface for the cron expression parser."""

import logging
from typing import Annotated, Optional

import typer

from cronparser.errors import CronParseError
from cronparser.formatter import format_schedule
from cronparser.logging import configure_logging
from cronparser.parser import parse
from cronparser.settings import CronSettings, CronSettingsKwargs

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cronparser",
    help="Expand a cron expression into the concrete times it fires at.",
    add_completion=False,
)


@app.command()
def main(
    expression: Annotated[
        str,
        typer.Argument(help='Cron expression followed by a command, e.g. "*/15 0 1,15 * 1-5 /usr/bin/find"'),
    ],
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="Logging level name, overrides CRONPARSER_LOG_LEVEL"),
    ] = None,
) -> None:
    """Print every field of EXPRESSION expanded into its values, one field per line."""
    overrides: CronSettingsKwargs = {}
    if log_level is not None:
        overrides["log_level"] = log_level

    try:
        settings = CronSettings.load(**overrides)
        configure_logging(settings.log_level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2) from e

    try:
        schedule = parse(expression)
    except CronParseError as e:
        logger.debug("Rejected expression %r", expression, exc_info=True)
        typer.echo(f"Error: failed to parse cron expression: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(format_schedule(schedule, label_width=settings.label_width))
