"""
Tests for the dbprobe CLI.

subprocess.run is patched with a function that routes the mysql command
line to FakeMySQLExecutor, so commands run end to end without kubectl.
"""

import json
import logging
import re
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from dbprobe.interface.cli.app import app
from tests.shared.helpers import FakeMySQLExecutor, completed

RUN = "dbprobe.infrastructure.kubectl.exec_runner.subprocess.run"
_CLIENT = re.compile(r"^/bin/mysql -u(\S+) -p(\S+)(?: -D(\S+))? -e '(.*)'$", re.DOTALL)


class KubectlStub:
    """Stands in for subprocess.run, answering like kubectl exec would."""

    def __init__(self, password="s3cr3t"):
        self.server = FakeMySQLExecutor()
        self.password = password
        self.argv = []

    def __call__(self, argv, **kwargs):
        self.argv.append(argv)
        command = argv[-1]
        if command.startswith("env | grep "):
            return completed(f"{command.split()[-1]}={self.password}\n")
        match = _CLIENT.match(command)
        if not match:
            return completed("bash: command not found\n", returncode=127)
        _, _, database, statement = match.groups()
        if database:
            result = self.server.execute_sql_for_db(database, statement)
        else:
            result = self.server.execute_sql(statement)
        return completed(result.output, returncode=0 if result.succeeded else 1)


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def kubectl():
    stub = KubectlStub()
    with patch(RUN, side_effect=stub):
        yield stub


def invoke(runner, *args):
    return runner.invoke(app, ["--pod", "mycluster-0", "--namespace", "e2e", *args])


def test_has_db_present(runner, kubectl):
    kubectl.server.databases["testdb"] = {}
    result = invoke(runner, "has-db", "testdb")
    assert result.exit_code == 0
    assert "exists" in result.output


def test_has_db_absent(runner, kubectl):
    result = invoke(runner, "has-db", "testdb")
    assert result.exit_code == 1
    assert "not found" in result.output


def test_looked_up_password_is_used(runner, kubectl):
    invoke(runner, "has-db", "testdb")
    assert kubectl.argv[0][-1] == "env | grep MYSQL_ROOT_PASSWORD"
    assert "-ps3cr3t" in kubectl.argv[1][-1]
    assert kubectl.argv[1][:5] == ["kubectl", "-n", "e2e", "exec", "mycluster-0"]


def test_explicit_password_skips_lookup(runner, kubectl):
    invoke(runner, "--password", "other", "--user", "admin", "has-db", "testdb")
    assert len(kubectl.argv) == 1
    assert kubectl.argv[0][-1].startswith("/bin/mysql -uadmin -pother ")


def test_ensure_then_has_value(runner, kubectl):
    result = invoke(runner, "ensure", "testdb", "t1", "id", "abc")
    assert result.exit_code == 0, result.output
    assert kubectl.server.databases["testdb"]["t1"].rows == ["abc"]

    assert invoke(runner, "has-table", "testdb", "t1").exit_code == 0
    assert invoke(runner, "has-value", "testdb", "t1", "id", "abc").exit_code == 0
    assert invoke(runner, "has-value", "testdb", "t1", "id", "xyz").exit_code == 1


def test_check_error_exits_2(runner, kubectl):
    result = invoke(runner, "has-table", "nodb", "t1")
    assert result.exit_code == 2
    assert "Error checking database table 'nodb.t1'" in result.output


def test_sql_prints_raw_output(runner, kubectl):
    kubectl.server.databases["testdb"] = {}
    result = invoke(runner, "sql", "show databases;")
    assert result.exit_code == 0
    assert "\ntestdb\n" in result.output


def test_sql_error_exits_1(runner, kubectl):
    result = invoke(runner, "sql", "show tables;", "--database", "nodb")
    assert result.exit_code == 1
    assert "Unknown database 'nodb'" in result.output


def test_password_command(runner, kubectl):
    result = invoke(runner, "password")
    assert result.exit_code == 0
    assert "s3cr3t" in result.output


def test_missing_pod_is_configuration_error(runner, tmp_path):
    result = runner.invoke(app, ["--config-dir", str(tmp_path), "has-db", "testdb"])
    assert result.exit_code == 2
    assert "Configuration error" in result.output


def test_config_file_with_overrides(runner, kubectl, tmp_path):
    (tmp_path / "harness.json").write_text(json.dumps({
        "target": {"namespace": "prod", "pod": "db-0", "container": "server"},
        "credential": {"username": "root", "password": "fromfile"},
    }))
    result = runner.invoke(app, ["--config-dir", str(tmp_path), "--namespace", "e2e", "has-db", "mysql"])

    assert result.exit_code == 0
    assert kubectl.argv[0][:7] == ["kubectl", "-n", "e2e", "exec", "db-0", "-c", "server"]
    assert "-pfromfile" in kubectl.argv[0][-1]


def _write_config(config_dir, credential=None, settings=None):
    data = {"target": {"namespace": "e2e", "pod": "db-0"}}
    if credential is not None:
        data["credential"] = credential
    if settings is not None:
        data["settings"] = settings
    (config_dir / "harness.json").write_text(json.dumps(data))


def test_user_override_replaces_file_credential_username(runner, kubectl, tmp_path):
    _write_config(tmp_path, credential={"username": "root", "password": "fromfile"})
    result = runner.invoke(app, ["--config-dir", str(tmp_path), "--user", "admin", "has-db", "mysql"])

    assert result.exit_code == 0, result.output
    assert kubectl.argv[0][-1].startswith("/bin/mysql -uadmin -pfromfile ")


def test_password_override_keeps_file_credential_username(runner, kubectl, tmp_path):
    _write_config(tmp_path, credential={"username": "app", "password": "fromfile"})
    result = runner.invoke(app, ["--config-dir", str(tmp_path), "--password", "x", "has-db", "mysql"])

    assert result.exit_code == 0, result.output
    assert kubectl.argv[0][-1].startswith("/bin/mysql -uapp -px ")


def test_user_override_applies_to_looked_up_password(runner, kubectl, tmp_path):
    _write_config(tmp_path)
    runner.invoke(app, ["--config-dir", str(tmp_path), "--user", "admin", "has-db", "mysql"])

    assert kubectl.argv[0][-1] == "env | grep MYSQL_ROOT_PASSWORD"
    assert kubectl.argv[1][-1].startswith("/bin/mysql -uadmin -ps3cr3t ")


def test_configured_log_file_is_written(runner, kubectl, tmp_path):
    log_file = tmp_path / "logs" / "dbprobe.log"
    _write_config(
        tmp_path,
        credential={"username": "root", "password": "fromfile"},
        settings={"log_level": "DEBUG", "log_file": str(log_file)},
    )
    result = runner.invoke(app, ["--config-dir", str(tmp_path), "has-db", "mysql"])

    assert result.exit_code == 0, result.output
    for handler in logging.getLogger().handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Executing on e2e/db-0[mysql]" in text
    assert "fromfile" not in text


def test_configured_log_level_filters_console(runner, kubectl, tmp_path):
    _write_config(
        tmp_path,
        credential={"username": "root", "password": "fromfile"},
        settings={"log_level": "ERROR"},
    )
    result = runner.invoke(app, ["--config-dir", str(tmp_path), "has-db", "mysql"])
    assert "Executing on" not in result.output

    verbose = runner.invoke(app, ["--config-dir", str(tmp_path), "--verbose", "has-db", "mysql"])
    assert "Executing on" in verbose.output
