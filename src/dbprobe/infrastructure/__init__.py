"""
Infrastructure layer.

Everything that touches the outside world: kubectl processes, config files
and logging handlers.
"""
