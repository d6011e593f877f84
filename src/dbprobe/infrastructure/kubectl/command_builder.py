"""Build kubectl exec argument lists and mysql client command lines."""

from typing import List, Optional

from dbprobe.domain.config import Credential, ExecTarget

REDACTED = "***"


def build_exec_command(target: ExecTarget, shell_command: str) -> List[str]:
    """
    Build the argv for running ``shell_command`` inside the target container.

    Shape: ``kubectl -n <ns> exec <pod> -c <container> -- bash -c <command>``.
    The shell command is passed as a single argv element, so no outer
    quoting is added here.
    """
    return [
        target.kubectl,
        "-n",
        target.namespace,
        "exec",
        target.pod,
        "-c",
        target.container,
        "--",
        target.shell,
        "-c",
        shell_command,
    ]


def build_client_command(
    client_path: str,
    credential: Credential,
    statement: str,
    database: Optional[str] = None,
) -> str:
    """
    Build the mysql client invocation run by the remote shell.

    The statement is wrapped in single quotes and nothing is escaped:
    statements, database names and values must not contain single quotes
    or newlines.
    """
    parts = [
        client_path,
        f"-u{credential.username}",
        f"-p{credential.get_password()}",
    ]
    if database is not None:
        parts.append(f"-D{database}")
    parts.append(f"-e '{statement}'")
    return " ".join(parts)


def redact_command(argv: List[str], secret: Optional[str]) -> List[str]:
    """Return a copy of argv with every occurrence of secret masked."""
    if not secret:
        return list(argv)
    return [arg.replace(secret, REDACTED) for arg in argv]
