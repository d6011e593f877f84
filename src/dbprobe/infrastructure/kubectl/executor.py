"""
SQL executors.

SimpleSQLExecutor is the seam the test helper depends on: run a statement,
optionally with a database selected, and get the client's raw text back.
Callers parse the output as they need.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Callable, Optional

from dbprobe.domain.config import Credential, ExecTarget
from dbprobe.domain.models import ExecutionResult
from .command_builder import build_client_command
from .exec_runner import KubectlExec

logger = logging.getLogger(__name__)


class SimpleSQLExecutor(ABC):
    """
    Executes SQL statements against a MySQL server and returns the full output.

    SQL errors and transport errors are not distinguished: both come back as
    ``result.error`` with the output kept for diagnostics.
    """

    @abstractmethod
    def execute_sql(self, statement: str) -> ExecutionResult:
        """Execute a statement with no database selected."""

    @abstractmethod
    def execute_sql_for_db(self, database: str, statement: str) -> ExecutionResult:
        """Execute a statement with ``database`` selected."""


class KubectlSimpleSQLExecutor(SimpleSQLExecutor):
    """
    Runs the mysql client inside the pod through kubectl exec.

    Needs nothing on the test host but a kubectl that can reach the
    cluster.
    """

    def __init__(
        self,
        target: ExecTarget,
        credential: Credential,
        timeout: Optional[int] = None,
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
    ) -> None:
        self.target = target
        self.credential = credential
        self._exec = KubectlExec(target, timeout=timeout, runner=runner)

    def execute_sql(self, statement: str) -> ExecutionResult:
        """Execute the statement using kubectl exec."""
        return self._run_sql(statement)

    def execute_sql_for_db(self, database: str, statement: str) -> ExecutionResult:
        """Execute the statement against ``database`` using kubectl exec."""
        return self._run_sql(statement, database=database)

    def execute_cmd(self, command: str) -> ExecutionResult:
        """Execute an arbitrary shell command in the MySQL container."""
        return self._exec.run(command, secret=self.credential.get_password())

    def _run_sql(self, statement: str, database: Optional[str] = None) -> ExecutionResult:
        if "'" in statement:
            logger.warning(
                "Statement contains a single quote and will break the client command: %s",
                statement,
            )
        command = build_client_command(
            self.target.client_path,
            self.credential,
            statement,
            database=database,
        )
        return self._exec.run(command, secret=self.credential.get_password())
