"""
Exec target domain model.

Identifies the container that kubectl exec reaches and the client binary
run inside it.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExecTarget(BaseModel):
    """
    Domain model for a namespace/pod/container triple.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    namespace: str = Field("default", description="Kubernetes namespace of the pod")
    pod: str = Field(..., description="Pod name, e.g. mycluster-0")
    container: str = Field("mysql", description="Container running the MySQL server")
    kubectl: str = Field("kubectl", description="kubectl binary name or path")
    client_path: str = Field("/bin/mysql", description="mysql client path inside the container")
    shell: str = Field("bash", description="Shell used to run the client command")

    @field_validator('namespace', 'pod', 'container', 'kubectl', 'client_path', 'shell')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty strings; kubectl would misparse the argument list."""
        if not v or not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()

    @property
    def display_name(self) -> str:
        """Human-readable target for log lines."""
        return f"{self.namespace}/{self.pod}[{self.container}]"
