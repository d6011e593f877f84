"""
dbprobe - MySQL state assertions for Kubernetes integration tests.

Verifies live database state ("does database X exist", "does table Y hold
value Z") without a database connection. Every interaction is a
``kubectl exec`` into the MySQL container and the client's text output is
parsed line by line.

Usage:
    from dbprobe import ExecTarget, Credential, KubectlSimpleSQLExecutor, MySQLDBTestHelper

    target = ExecTarget(namespace="e2e", pod="mycluster-0")
    executor = KubectlSimpleSQLExecutor(target, Credential(username="root", password="..."))
    helper = MySQLDBTestHelper(executor)
    helper.ensure_db_table_value("testdb", "t1", "id", "abc")
"""

__version__ = "0.1.0"

from dbprobe.application.db_test_helper import DBTestHelper, MySQLDBTestHelper
from dbprobe.domain.config import Credential, ExecTarget, HarnessConfig, HarnessSettings
from dbprobe.infrastructure.kubectl import InMemorySQLExecutor, KubectlSimpleSQLExecutor, SimpleSQLExecutor

__all__ = [
    "Credential",
    "DBTestHelper",
    "ExecTarget",
    "HarnessConfig",
    "HarnessSettings",
    "InMemorySQLExecutor",
    "KubectlSimpleSQLExecutor",
    "MySQLDBTestHelper",
    "SimpleSQLExecutor",
    "__version__",
]
