"""
kubectl exec transport.

Runs shell and SQL commands inside the MySQL container of a pod and hands
back the combined output.
"""

from .command_builder import build_client_command, build_exec_command, redact_command
from .exec_runner import KubectlExec
from .executor import KubectlSimpleSQLExecutor, SimpleSQLExecutor
from .in_memory import InMemorySQLExecutor, SQLCall

__all__ = [
    "InMemorySQLExecutor",
    "KubectlExec",
    "KubectlSimpleSQLExecutor",
    "SQLCall",
    "SimpleSQLExecutor",
    "build_client_command",
    "build_exec_command",
    "redact_command",
]
