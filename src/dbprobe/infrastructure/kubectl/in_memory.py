"""
In-memory SQL executor with canned responses.

Lets the test helper be exercised without spawning processes.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, NamedTuple, Optional, Tuple, Union

from dbprobe.domain.errors import CommandExecutionError
from dbprobe.domain.models import ExecutionResult
from .executor import SimpleSQLExecutor

Response = Union[str, ExecutionResult]


class SQLCall(NamedTuple):
    """One recorded call: database is None for unscoped statements."""

    database: Optional[str]
    statement: str


class InMemorySQLExecutor(SimpleSQLExecutor):
    """
    Replays canned responses keyed by ``(database, statement)``.

    Several responses registered for the same key are returned in order;
    the last one repeats once the others are used up. Unknown statements
    get ``default``.
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[Optional[str], str], Response]] = None,
        default: Response = "",
    ) -> None:
        self._responses: Dict[Tuple[Optional[str], str], Deque[ExecutionResult]] = {}
        self._default = self._coerce(default)
        self.calls: List[SQLCall] = []
        for key, response in (responses or {}).items():
            self._responses.setdefault(key, deque()).append(self._coerce(response))

    def add_response(
        self,
        statement: str,
        output: str = "",
        database: Optional[str] = None,
        error: Optional[Union[str, CommandExecutionError]] = None,
    ) -> "InMemorySQLExecutor":
        """Queue a response; returns self so calls can be chained."""
        if isinstance(error, str):
            error = CommandExecutionError(error, output=output, exit_code=1)
        result = ExecutionResult(output=output, error=error)
        self._responses.setdefault((database, statement), deque()).append(result)
        return self

    def execute_sql(self, statement: str) -> ExecutionResult:
        return self._respond(None, statement)

    def execute_sql_for_db(self, database: str, statement: str) -> ExecutionResult:
        return self._respond(database, statement)

    @property
    def statements(self) -> List[str]:
        """Statements executed so far, in order."""
        return [call.statement for call in self.calls]

    def _respond(self, database: Optional[str], statement: str) -> ExecutionResult:
        self.calls.append(SQLCall(database, statement))
        queue = self._responses.get((database, statement))
        if not queue:
            return self._default
        if len(queue) > 1:
            return queue.popleft()
        return queue[0]

    @staticmethod
    def _coerce(response: Response) -> ExecutionResult:
        if isinstance(response, ExecutionResult):
            return response
        return ExecutionResult(output=response)
