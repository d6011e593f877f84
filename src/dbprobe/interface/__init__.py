"""
Interface layer: the dbprobe command line.
"""
