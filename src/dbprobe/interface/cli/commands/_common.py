"""Helpers shared by the subcommands."""

import logging

import typer

from dbprobe.application.container import Container
from dbprobe.domain.errors import DBProbeError
from ..context import CLIOptions, err_console

logger = logging.getLogger(__name__)

EXIT_ABSENT = 1
EXIT_ERROR = 2


def container_from(ctx: typer.Context) -> Container:
    """Build the container from the global options, exiting on bad config."""
    options: CLIOptions = ctx.obj
    try:
        return options.build_container()
    except ValueError as e:
        err_console.print(f"[red]❌ Configuration error:[/red] {e}")
        raise typer.Exit(EXIT_ERROR)


def exit_on_error(e: DBProbeError) -> typer.Exit:
    """Report a harness error and return the Exit to raise."""
    logger.debug("Command failed", exc_info=e)
    err_console.print(f"[red]❌ Error:[/red] {e}")
    return typer.Exit(EXIT_ERROR)
