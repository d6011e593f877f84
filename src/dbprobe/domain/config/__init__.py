"""
Configuration domain package.

This package contains the pydantic models describing where the MySQL pod
lives, how to authenticate, and how the harness behaves.
"""

from .harness_settings import HarnessSettings
from .models import Credential, ExecTarget, HarnessConfig

__all__ = [
    "Credential",
    "ExecTarget",
    "HarnessConfig",
    "HarnessSettings",
]
