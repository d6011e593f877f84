"""
CLI main entry point.
"""


def main() -> int:
    """
    Main entry point for the dbprobe CLI.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    # Import here so `import dbprobe` does not pull in typer
    from .app import app
    app()
    return 0
