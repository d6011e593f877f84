"""
Transport result model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from dbprobe.domain.errors import CommandExecutionError


@dataclass(frozen=True)
class ExecutionResult:
    """
    Outcome of one remote invocation.

    ``output`` is stdout and stderr combined in the order the process wrote
    them. It stays populated when ``error`` is set so callers can log it.
    """

    output: str = ""
    error: Optional[CommandExecutionError] = None
    command: List[str] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> str:
        """Return the output, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.output
