"""
ensure command - recreate a database holding one table with one value.
"""

import typer

from dbprobe.domain.errors import DBProbeError
from ..context import console
from ._common import container_from, exit_on_error


def ensure(
    ctx: typer.Context,
    db: str = typer.Argument(..., help="Database name (dropped first if present)."),
    table: str = typer.Argument(..., help="Table name."),
    column: str = typer.Argument(..., help="Primary key column name."),
    value: str = typer.Argument(..., help="Value to insert."),
):
    """
    Drop and recreate DB with TABLE holding exactly one row VALUE in COLUMN.
    """
    container = container_from(ctx)
    try:
        container.helper.ensure_db_table_value(db, table, column, value)
    except DBProbeError as e:
        raise exit_on_error(e)
    console.print(f"[green]✅ '{db}.{table}.{column}' holds '{value}'[/green]")
