"""
Exception hierarchy for dbprobe.

Transport failures are carried inside ExecutionResult rather than raised;
the exceptions here are raised only where a caller cannot continue.
"""

from __future__ import annotations

from typing import List, Optional


class DBProbeError(Exception):
    """Base class for all dbprobe errors."""


class CommandExecutionError(DBProbeError):
    """
    A remote invocation failed to run or exited non-zero.

    The mysql client reports SQL errors through its exit status, so a
    syntax error and an unreachable pod both end up here.
    """

    def __init__(
        self,
        message: str,
        command: Optional[List[str]] = None,
        exit_code: Optional[int] = None,
        output: str = "",
    ) -> None:
        super().__init__(message)
        self.command = list(command or [])
        self.exit_code = exit_code
        self.output = output

    def __str__(self) -> str:
        base = super().__str__()
        if self.exit_code is not None:
            return f"{base} (exit code {self.exit_code})"
        return base


class CredentialLookupError(DBProbeError):
    """The credential variable could not be read from the container environment."""


class FixtureAbortError(DBProbeError):
    """
    Raised by the non-pytest abort callable when a fixture cannot be verified.

    Under pytest the helper aborts through ``pytest.fail`` instead.
    """
