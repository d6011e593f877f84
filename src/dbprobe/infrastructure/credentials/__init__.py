"""
Credential discovery from the running container.
"""

from dbprobe.infrastructure.credentials.password import get_mysql_password, read_env_variable

__all__ = ["get_mysql_password", "read_env_variable"]
