"""
Credential domain model.

This module defines the Credential entity passed to the mysql client as
``-u``/``-p`` arguments.
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class Credential(BaseModel):
    """
    Domain model for MySQL credentials.

    The password is held as a SecretStr so it never shows up in reprs or
    log lines by accident.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field("root", description="MySQL username")
    password: SecretStr = Field(..., description="MySQL password")

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty."""
        if not v or not v.strip():
            raise ValueError("Username cannot be empty")
        return v.strip()

    def get_password(self) -> str:
        """Get the plain text password."""
        return self.password.get_secret_value()  # pylint: disable=no-member
