"""
password command - print the root password read from the pod environment.
"""

import typer

from dbprobe.domain.errors import DBProbeError
from dbprobe.infrastructure.credentials import get_mysql_password
from ..context import console
from ._common import container_from, exit_on_error


def password(ctx: typer.Context):
    """
    Print the MySQL root password from the container environment.
    """
    config = container_from(ctx).config
    try:
        value = get_mysql_password(
            config.target,
            variable=config.settings.password_variable,
            timeout=config.settings.command_timeout,
        )
    except DBProbeError as e:
        raise exit_on_error(e)
    console.print(value, markup=False, highlight=False, soft_wrap=True)
