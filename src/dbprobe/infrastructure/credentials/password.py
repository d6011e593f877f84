"""
Read the MySQL root password from the pod's environment.

The server container is started with the root password in its environment
(MYSQL_ROOT_PASSWORD by default), so tests can discover it instead of
carrying it in config.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Optional

from dbprobe.domain.config import ExecTarget
from dbprobe.domain.errors import CommandExecutionError, CredentialLookupError
from dbprobe.infrastructure.kubectl import KubectlExec
from dbprobe.infrastructure.output_parsing import parse_env_value

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_VARIABLE = "MYSQL_ROOT_PASSWORD"


def read_env_variable(
    target: ExecTarget,
    variable: str,
    timeout: Optional[int] = None,
    runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
) -> str:
    """
    Return the value of ``variable`` in the target container's environment.

    Runs on a bare KubectlExec rather than KubectlSimpleSQLExecutor.execute_cmd:
    the lookup happens before any credential exists to build an executor with.

    Args:
        target: Pod/container to inspect
        variable: Environment variable name
        timeout: Seconds before kubectl is killed
        runner: Replacement for subprocess.run, used by tests

    Raises:
        CredentialLookupError: If kubectl fails or the variable is not set
    """
    kubectl = KubectlExec(target, timeout=timeout, runner=runner)
    try:
        output = kubectl.run(f"env | grep {variable}").raise_for_error()
    except CommandExecutionError as e:
        logger.error("Error reading %s from %s: %s", variable, target.display_name, e)
        raise CredentialLookupError(
            f"Could not read {variable} from {target.display_name}: {e}"
        ) from e

    try:
        return parse_env_value(output)
    except ValueError as e:
        raise CredentialLookupError(
            f"{variable} not found in environment of {target.display_name}"
        ) from e


def get_mysql_password(
    target: ExecTarget,
    variable: str = DEFAULT_PASSWORD_VARIABLE,
    timeout: Optional[int] = None,
    runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
) -> str:
    """Get the MySQL root password from a running pod."""
    password = read_env_variable(target, variable, timeout=timeout, runner=runner)
    logger.debug("Read %s from %s", variable, target.display_name)
    return password
