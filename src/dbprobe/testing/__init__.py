"""
pytest integration for dbprobe.
"""
