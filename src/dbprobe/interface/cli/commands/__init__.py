"""
dbprobe subcommands.
"""
