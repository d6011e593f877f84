"""
Shared CLI state: global options and the container built from them.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

from rich.console import Console

from dbprobe.application.container import Container
from dbprobe.domain.config import Credential, ExecTarget, HarnessConfig
from dbprobe.domain.errors import FixtureAbortError
from dbprobe.infrastructure.config import ConfigRepository
from dbprobe.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def raise_abort(message: str) -> NoReturn:
    """Abort callable for the helper outside pytest."""
    raise FixtureAbortError(message)


@dataclass
class CLIOptions:
    """Global options given before the subcommand."""

    config_dir: Path
    namespace: Optional[str] = None
    pod: Optional[str] = None
    container: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    timeout: Optional[int] = None
    verbose: bool = False

    def load_config(self) -> HarnessConfig:
        """
        Load harness.json when present and apply command line overrides.

        Raises:
            ValueError: If no config file exists and --pod was not given
        """
        repository = ConfigRepository(self.config_dir)
        try:
            config = repository.load_harness_config()
        except FileNotFoundError:
            if not self.pod:
                raise ValueError(
                    f"No harness config in {self.config_dir}; pass --pod (and --namespace)"
                ) from None
            config = HarnessConfig(target=ExecTarget(pod=self.pod))

        target_updates = {
            key: value
            for key, value in (
                ("namespace", self.namespace),
                ("pod", self.pod),
                ("container", self.container),
            )
            if value
        }
        if target_updates:
            config = config.model_copy(
                update={"target": ExecTarget(**{**config.target.model_dump(), **target_updates})}
            )

        # --user, then the file credential's username, then the lookup username
        username = self.user or (
            config.credential.username if config.credential is not None else config.username
        )
        password = self.password or (
            config.credential.get_password() if config.credential is not None else None
        )
        config = config.model_copy(update={"username": username})
        if password is not None:
            config = config.model_copy(
                update={"credential": Credential(username=username, password=password)}
            )
        if self.timeout:
            settings = config.settings.model_copy(update={"command_timeout": self.timeout})
            config = config.model_copy(update={"settings": settings})
        return config

    def configure_logging(self, config: HarnessConfig) -> None:
        """Apply the configured log level and file; --verbose forces DEBUG."""
        level = logging.DEBUG if self.verbose else config.settings.log_level_value
        setup_logging(level, log_file=config.settings.log_file)

    def build_container(self) -> Container:
        config = self.load_config()
        self.configure_logging(config)
        return Container(config=config, config_dir=self.config_dir, fail=raise_abort)
