"""
Harness settings domain model.

Controls process timeouts, credential discovery, and logging for a
harness run.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class HarnessSettings(BaseModel):
    """
    Runtime settings for the harness.

    None of these change command construction; they only tune how the
    external process is run and how results are reported.
    """

    command_timeout: Optional[int] = Field(
        default=None,
        description="Seconds to wait for a kubectl exec call (None waits indefinitely)",
        ge=1,
        le=3600
    )

    password_variable: str = Field(
        default="MYSQL_ROOT_PASSWORD",
        description="Container environment variable holding the root password"
    )

    log_level: str = Field(
        default="INFO",
        description="Console log level"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for a DEBUG-level log file"
    )

    @field_validator('command_timeout')
    @classmethod
    def warn_on_long_timeout(cls, v: Optional[int]) -> Optional[int]:
        """Flag timeouts long enough to stall a test suite."""
        if v is not None and v > 600:
            logger.warning("kubectl exec timeout of %ss is very high - a hung pod will stall the suite", v)
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any standard logging level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('password_variable')
    @classmethod
    def validate_password_variable(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Password variable name cannot be empty")
        return v.strip()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)
