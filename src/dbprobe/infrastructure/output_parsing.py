"""
Parsing of mysql client text output.

The client runs in batch mode (``-e`` with no TTY), which prints one row per
line with no borders, padding or quoting, and the column header as the first
line. Matching relies on that format: if the client ever decorates its
output these checks give false negatives.

The ``mysql: [Warning] Using a password on the command line interface can be
insecure.`` line that the client prints on stderr is harmless here since it
never equals a database, table or value.
"""

from typing import List


def split_rows(output: str) -> List[str]:
    """Split output on ``\\n`` exactly; carriage returns and spaces are kept."""
    return output.split("\n")


def has_row_column_value(output: str, value: str) -> bool:
    """
    Return True iff some row of ``output`` is exactly ``value``.

    No substring matching and no trimming: ``"foobar"`` does not match
    ``"foo"`` and ``" foo"`` does not match ``"foo"``.
    """
    return any(row == value for row in split_rows(output))


def parse_env_value(output: str) -> str:
    """
    Extract the value from ``NAME=value`` output of ``env | grep NAME``.

    Everything after the first ``=`` is the value, surrounding whitespace
    stripped.

    Raises:
        ValueError: If the output has no ``=``
    """
    _, sep, value = output.partition("=")
    if not sep:
        raise ValueError("no NAME=value pair in output")
    return value.strip()
