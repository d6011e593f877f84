"""
Harness configuration root model.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from dbprobe.domain.config.harness_settings import HarnessSettings
from .credential import Credential
from .exec_target import ExecTarget


class HarnessConfig(BaseModel):
    """
    Everything needed to build an executor and a helper.

    When ``credential`` is omitted the root password is read from the
    container environment at wiring time.
    """

    model_config = ConfigDict(extra="ignore")

    target: ExecTarget = Field(..., description="Pod to exec into")
    credential: Optional[Credential] = Field(None, description="Explicit MySQL credential")
    username: str = Field("root", description="Username paired with a looked-up password")
    settings: HarnessSettings = Field(default_factory=HarnessSettings, description="Runtime settings")
