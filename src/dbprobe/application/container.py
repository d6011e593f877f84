"""
Dependency container.

Wires a HarnessConfig into an executor and a test helper, looking up the
root password from the pod when the config carries no credential.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional

from dbprobe.domain.config import Credential, HarnessConfig
from dbprobe.infrastructure.config import ConfigRepository
from dbprobe.infrastructure.credentials import get_mysql_password
from dbprobe.infrastructure.kubectl import KubectlSimpleSQLExecutor
from .db_test_helper import FailFunc, MySQLDBTestHelper

logger = logging.getLogger(__name__)


class Container:
    """
    Lazily builds and caches the harness components.
    """

    def __init__(
        self,
        config: Optional[HarnessConfig] = None,
        config_dir: Optional[Path] = None,
        fail: Optional[FailFunc] = None,
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
    ):
        """
        Initialize the container.

        Args:
            config: Explicit configuration; loaded from config_dir when omitted
            config_dir: Directory holding harness.json
            fail: Abort callable handed to the helper (pytest.fail when None)
            runner: Replacement for subprocess.run, used by tests
        """
        self.config_dir = config_dir or Path.cwd() / "config"
        self._config = config
        self._fail = fail
        self._runner = runner

        self._config_repository: Optional[ConfigRepository] = None
        self._credential: Optional[Credential] = None
        self._executor: Optional[KubectlSimpleSQLExecutor] = None
        self._helper: Optional[MySQLDBTestHelper] = None

    @property
    def config_repository(self) -> ConfigRepository:
        """Get the configuration repository."""
        if self._config_repository is None:
            self._config_repository = ConfigRepository(self.config_dir)
        return self._config_repository

    @property
    def config(self) -> HarnessConfig:
        """Get the harness configuration."""
        if self._config is None:
            self._config = self.config_repository.load_harness_config()
        return self._config

    @property
    def credential(self) -> Credential:
        """Get the MySQL credential, reading the password from the pod if needed."""
        if self._credential is None:
            if self.config.credential is not None:
                self._credential = self.config.credential
            else:
                logger.info(
                    "No credential configured; reading %s from %s",
                    self.config.settings.password_variable,
                    self.config.target.display_name,
                )
                password = get_mysql_password(
                    self.config.target,
                    variable=self.config.settings.password_variable,
                    timeout=self.config.settings.command_timeout,
                    runner=self._runner,
                )
                self._credential = Credential(username=self.config.username, password=password)
        return self._credential

    @property
    def executor(self) -> KubectlSimpleSQLExecutor:
        """Get the kubectl SQL executor."""
        if self._executor is None:
            self._executor = KubectlSimpleSQLExecutor(
                self.config.target,
                self.credential,
                timeout=self.config.settings.command_timeout,
                runner=self._runner,
            )
        return self._executor

    @property
    def helper(self) -> MySQLDBTestHelper:
        """Get the database test helper."""
        if self._helper is None:
            self._helper = MySQLDBTestHelper(self.executor, fail=self._fail)
        return self._helper
