"""
Domain layer.

Pure value types and exceptions shared by the transport and helper layers.
"""
