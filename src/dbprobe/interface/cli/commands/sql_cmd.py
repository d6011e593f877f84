"""
sql command - run one statement and print the raw client output.
"""

from typing import Optional

import typer

from dbprobe.domain.errors import DBProbeError
from ..context import console, err_console
from ._common import EXIT_ABSENT, container_from, exit_on_error


def sql(
    ctx: typer.Context,
    statement: str = typer.Argument(..., help="SQL statement; must not contain single quotes."),
    database: Optional[str] = typer.Option(None, "--database", "-D", help="Database to select."),
):
    """
    Run a SQL statement in the pod and print the client output.
    """
    container = container_from(ctx)
    try:
        executor = container.executor
    except DBProbeError as e:
        raise exit_on_error(e)

    if database:
        result = executor.execute_sql_for_db(database, statement)
    else:
        result = executor.execute_sql(statement)

    console.print(result.output, end="", markup=False, highlight=False, soft_wrap=True)
    if result.error is not None:
        err_console.print(f"[red]❌ {result.error}[/red]")
        raise typer.Exit(EXIT_ABSENT)
