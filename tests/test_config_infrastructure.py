"""
Tests for the config domain models and repository.
"""

import json
import shutil
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from dbprobe.domain.config import Credential, ExecTarget, HarnessConfig, HarnessSettings
from dbprobe.infrastructure.config import ConfigRepository

MINIMAL = {"target": {"namespace": "e2e", "pod": "mycluster-0"}}


class TestConfigModels:

    def test_exec_target_defaults(self):
        target = ExecTarget(pod="mycluster-0")
        assert target.namespace == "default"
        assert target.container == "mysql"
        assert target.kubectl == "kubectl"
        assert target.client_path == "/bin/mysql"
        assert target.shell == "bash"
        assert target.display_name == "default/mycluster-0[mysql]"

    def test_exec_target_rejects_blank_pod(self):
        with pytest.raises(ValidationError):
            ExecTarget(pod="  ")

    def test_credential_masks_password(self):
        credential = Credential(username=" root ", password="s3cr3t")
        assert credential.username == "root"
        assert credential.get_password() == "s3cr3t"
        assert "s3cr3t" not in repr(credential)

    def test_credential_rejects_empty_username(self):
        with pytest.raises(ValidationError):
            Credential(username="", password="x")

    def test_settings_defaults(self):
        settings = HarnessSettings()
        assert settings.command_timeout is None
        assert settings.password_variable == "MYSQL_ROOT_PASSWORD"
        assert settings.log_level_value == 20

    def test_settings_normalizes_log_level(self):
        assert HarnessSettings(log_level="debug").log_level == "DEBUG"

    def test_settings_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            HarnessSettings(log_level="chatty")

    def test_settings_rejects_zero_timeout(self):
        with pytest.raises(ValidationError):
            HarnessSettings(command_timeout=0)


class TestConfigRepository:
    """Test cases for ConfigRepository."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.repo = ConfigRepository(self.temp_dir)

    def teardown_method(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def test_load_json_file_success(self):
        (self.temp_dir / "test.json").write_text(json.dumps({"key": "value"}))
        assert self.repo.load_json_file("test") == {"key": "value"}

    def test_load_jsonc_strips_comments(self):
        (self.temp_dir / "test.jsonc").write_text('{\n  // pod to probe\n  "key": "value"\n}\n')
        assert self.repo.load_json_file("test") == {"key": "value"}

    def test_load_json_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            self.repo.load_json_file("nonexistent")

    def test_load_invalid_json(self):
        (self.temp_dir / "test.json").write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            self.repo.load_json_file("test")

    def test_load_harness_config(self):
        data = {
            **MINIMAL,
            "credential": {"username": "root", "password": "s3cr3t"},
            "settings": {"command_timeout": 60},
        }
        (self.temp_dir / "harness.json").write_text(json.dumps(data))

        config = self.repo.load_harness_config()

        assert config.target.pod == "mycluster-0"
        assert config.credential.get_password() == "s3cr3t"
        assert config.settings.command_timeout == 60

    def test_load_harness_config_without_credential(self):
        (self.temp_dir / "harness.json").write_text(json.dumps(MINIMAL))
        config = self.repo.load_harness_config()
        assert config.credential is None
        assert config.username == "root"

    def test_load_harness_config_invalid(self):
        (self.temp_dir / "harness.json").write_text(json.dumps({"target": {}}))
        with pytest.raises(ValueError, match="Invalid harness configuration"):
            self.repo.load_harness_config()

    def test_save_harness_config_omits_credential(self):
        config = HarnessConfig(
            target=ExecTarget(namespace="e2e", pod="mycluster-0"),
            credential=Credential(username="root", password="s3cr3t"),
        )
        path = self.repo.save_harness_config(config)

        assert "s3cr3t" not in path.read_text()
        reloaded = self.repo.load_harness_config()
        assert reloaded.target == config.target
        assert reloaded.credential is None

    def test_save_creates_missing_directory(self):
        repo = ConfigRepository(self.temp_dir / "nested" / "config")
        path = repo.save_json_file("test", {"a": 1})
        assert path.exists()
