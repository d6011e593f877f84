"""
Configuration infrastructure package.
"""

from .repository import ConfigRepository, HARNESS_CONFIG_NAME

__all__ = ["ConfigRepository", "HARNESS_CONFIG_NAME"]
