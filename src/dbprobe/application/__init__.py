"""
Application layer: test fixtures and wiring built on the SQL transport.
"""
