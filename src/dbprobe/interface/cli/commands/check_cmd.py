"""
Existence check commands.

Exit code 0 when the entity exists, 1 when it does not, 2 when the check
itself could not run.
"""

from typing import Callable

import typer

from dbprobe.application.db_test_helper import MySQLDBTestHelper
from dbprobe.domain.errors import DBProbeError
from ..context import console
from ._common import EXIT_ABSENT, container_from, exit_on_error


def _report(ctx: typer.Context, label: str, check: Callable[[MySQLDBTestHelper], bool]) -> None:
    container = container_from(ctx)
    try:
        found = check(container.helper)
    except DBProbeError as e:
        raise exit_on_error(e)

    if found:
        console.print(f"[green]✅ {label} exists[/green]")
        return
    console.print(f"[yellow]✗ {label} not found[/yellow]")
    raise typer.Exit(EXIT_ABSENT)


def has_db(
    ctx: typer.Context,
    db: str = typer.Argument(..., help="Database name."),
):
    """Check that a database exists."""
    _report(ctx, f"database '{db}'", lambda helper: helper.has_db(db))


def has_table(
    ctx: typer.Context,
    db: str = typer.Argument(..., help="Database name."),
    table: str = typer.Argument(..., help="Table name."),
):
    """Check that a table exists in a database."""
    _report(ctx, f"table '{db}.{table}'", lambda helper: helper.has_db_table(db, table))


def has_value(
    ctx: typer.Context,
    db: str = typer.Argument(..., help="Database name."),
    table: str = typer.Argument(..., help="Table name."),
    column: str = typer.Argument(..., help="Column name."),
    value: str = typer.Argument(..., help="Value to look for."),
):
    """Check that a column of a table holds a value."""
    _report(
        ctx,
        f"value '{value}' in '{db}.{table}.{column}'",
        lambda helper: helper.has_db_table_value(db, table, column, value),
    )
