"""
Run a shell command inside a pod container via kubectl exec.

One process per call. Failures are logged and returned in the
ExecutionResult, never raised.
"""

from __future__ import annotations

import logging
import subprocess
import time
from typing import Callable, Optional, Union

from dbprobe.domain.config import ExecTarget
from dbprobe.domain.errors import CommandExecutionError
from dbprobe.domain.models import ExecutionResult
from .command_builder import build_exec_command, redact_command

logger = logging.getLogger(__name__)


def _as_text(output: Optional[Union[str, bytes]]) -> str:
    # TimeoutExpired carries bytes even when text=True was requested
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


class KubectlExec:
    """Executes shell commands in one container of one pod."""

    def __init__(
        self,
        target: ExecTarget,
        timeout: Optional[int] = None,
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
    ) -> None:
        """
        Args:
            target: Namespace/pod/container to exec into
            timeout: Seconds before the kubectl process is killed (None waits)
            runner: Replacement for subprocess.run, used by tests
        """
        self.target = target
        self.timeout = timeout
        self._runner = runner or subprocess.run

    def run(self, shell_command: str, secret: Optional[str] = None) -> ExecutionResult:
        """
        Run ``shell_command`` and return its combined output.

        Args:
            shell_command: Command line handed to ``bash -c``
            secret: Substring masked in the command recorded on the result and in logs

        Returns:
            ExecutionResult with ``error`` set on spawn failure, timeout or non-zero exit
        """
        argv = build_exec_command(self.target, shell_command)
        display = redact_command(argv, secret)
        logger.debug("Executing on %s: %s", self.target.display_name, " ".join(display))

        start = time.time()
        output = ""
        error: Optional[CommandExecutionError] = None
        try:
            completed = self._runner(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            output = _as_text(e.output)
            error = CommandExecutionError(
                f"Command timed out after {self.timeout}s", command=display, output=output
            )
        except OSError as e:
            error = CommandExecutionError(
                f"Failed to start {argv[0]}: {e}", command=display
            )
        else:
            output = _as_text(completed.stdout)
            if completed.returncode != 0:
                error = CommandExecutionError(
                    "Command exited non-zero",
                    command=display,
                    exit_code=completed.returncode,
                    output=output,
                )

        duration_ms = int((time.time() - start) * 1000)
        if error is not None:
            logger.error("Failed to execute command: %s: %s", " ".join(display), error)
            if output:
                logger.debug("Output of failed command:\n%s", output)

        return ExecutionResult(
            output=output,
            error=error,
            command=display,
            duration_ms=duration_ms,
        )
