"""
dbprobe CLI package.
"""
