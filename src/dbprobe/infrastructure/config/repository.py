"""
Configuration repository for loading and saving config files.

This module provides the infrastructure layer for configuration persistence.
It handles file I/O operations and validation into the domain models.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from dbprobe.domain.config import HarnessConfig

logger = logging.getLogger(__name__)

HARNESS_CONFIG_NAME = "harness"


def _strip_comments(jsonc_content: str) -> str:
    """Drop full-line ``//`` comments from JSONC content."""
    return "\n".join(
        line for line in jsonc_content.splitlines()
        if not line.lstrip().startswith("//")
    )


class ConfigRepository:
    """
    Repository for configuration file operations.

    Handles loading and saving of configuration files with support for
    JSON and JSONC formats.
    """

    def __init__(self, config_dir: Path):
        """
        Initialize the config repository.

        Args:
            config_dir: Base directory for configuration files
        """
        self.config_dir = Path(config_dir)

    def load_json_file(self, filename: str, allow_jsonc: bool = True) -> Dict[str, Any]:
        """
        Load a JSON or JSONC file.

        Args:
            filename: Name of the file to load (without extension)
            allow_jsonc: Whether to try JSONC if JSON is missing

        Returns:
            Parsed JSON data as dictionary

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file cannot be parsed
        """
        json_path = self.config_dir / f"{filename}.json"
        jsonc_path = self.config_dir / f"{filename}.jsonc"

        if json_path.exists():
            try:
                with open(json_path, 'r', encoding='utf-8') as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                logger.error("Failed to parse JSON file %s: %s", json_path, e)
                raise ValueError(f"Invalid JSON in {json_path}") from e

        if allow_jsonc and jsonc_path.exists():
            try:
                with open(jsonc_path, 'r', encoding='utf-8') as f:
                    return json.loads(_strip_comments(f.read()))
            except json.JSONDecodeError as e:
                logger.error("Failed to parse JSONC file %s: %s", jsonc_path, e)
                raise ValueError(f"Invalid JSONC in {jsonc_path}") from e

        raise FileNotFoundError(
            f"Config file '{filename}.json' or '{filename}.jsonc' not found in {self.config_dir}"
        )

    def save_json_file(self, filename: str, data: Dict[str, Any]) -> Path:
        """
        Save data to a JSON file, creating the config directory if needed.

        Returns:
            Path of the written file
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.config_dir / f"{filename}.json"
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(json.dumps(data, indent=2, ensure_ascii=False))
        return filepath

    def load_harness_config(self) -> HarnessConfig:
        """
        Load and validate the harness configuration.

        Raises:
            FileNotFoundError: If no harness config file exists
            ValueError: If the file is invalid
        """
        data = self.load_json_file(HARNESS_CONFIG_NAME)
        try:
            config = HarnessConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid harness configuration: {e}") from e
        logger.debug("Loaded harness config for %s", config.target.display_name)
        return config

    def save_harness_config(self, config: HarnessConfig) -> Path:
        """Save the harness configuration. Credentials are never written."""
        data = config.model_dump(mode="json", exclude={"credential"})
        return self.save_json_file(HARNESS_CONFIG_NAME, data)
