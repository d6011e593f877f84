"""
CLI application.

Manual probing of a live MySQL pod with the same transport and checks the
test helper uses.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from dbprobe.infrastructure.logging_config import setup_logging
from .commands.check_cmd import has_db, has_table, has_value
from .commands.ensure_cmd import ensure
from .commands.password_cmd import password
from .commands.sql_cmd import sql
from .context import CLIOptions

app = typer.Typer(
    name="dbprobe",
    help="🔎 Black-box MySQL state checks over kubectl exec",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_dir: Path = typer.Option(
        Path("config"), "--config-dir", help="Directory containing harness.json."
    ),
    namespace: Optional[str] = typer.Option(None, "--namespace", "-n", help="Pod namespace."),
    pod: Optional[str] = typer.Option(None, "--pod", "-p", help="Pod running MySQL."),
    container: Optional[str] = typer.Option(None, "--container", "-c", help="MySQL container name."),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="MySQL username."),
    mysql_password: Optional[str] = typer.Option(
        None, "--password", help="MySQL password (read from the pod when omitted)."
    ),
    timeout: Optional[int] = typer.Option(None, "--timeout", help="kubectl exec timeout in seconds."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every kubectl command."),
):
    """
    🔎 dbprobe - assert facts about a MySQL pod without connecting to it

    Every command runs the mysql client inside the pod through
    `kubectl exec` and parses its text output.
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = CLIOptions(
        config_dir=config_dir,
        namespace=namespace,
        pod=pod,
        container=container,
        user=user,
        password=mysql_password,
        timeout=timeout,
        verbose=verbose,
    )


app.command("sql")(sql)
app.command("password")(password)
app.command("has-db")(has_db)
app.command("has-table")(has_table)
app.command("has-value")(has_value)
app.command("ensure")(ensure)


if __name__ == "__main__":
    app()
