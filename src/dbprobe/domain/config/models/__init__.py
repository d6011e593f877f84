"""
Configuration domain models package.
"""

from .credential import Credential
from .exec_target import ExecTarget
from .harness_config import HarnessConfig

__all__ = [
    "Credential",
    "ExecTarget",
    "HarnessConfig",
]
