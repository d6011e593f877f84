"""
Database test helper.

Creates and checks the basic MySQL entities an integration test needs
(database, single-column table, row) through a SimpleSQLExecutor.

Every mutating operation re-queries to confirm its effect. Any execution
error or failed confirmation aborts the calling test through the injected
``fail`` callable (``pytest.fail`` by default): a test must never carry on
against state that was not verified. Nothing is retried or rolled back.

Names and values are concatenated into SQL and shell text unescaped, so they
must not contain quotes or newlines.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, NoReturn, Optional

import pytest

from dbprobe.infrastructure.kubectl import SimpleSQLExecutor
from dbprobe.infrastructure.output_parsing import has_row_column_value

logger = logging.getLogger(__name__)

FailFunc = Callable[[str], NoReturn]


class DBTestHelper(ABC):
    """Quickly create and check some basic database entities."""

    @abstractmethod
    def create_db(self, db: str) -> None: ...

    @abstractmethod
    def has_db(self, db: str) -> bool: ...

    @abstractmethod
    def delete_db(self, db: str) -> None: ...

    @abstractmethod
    def create_db_table(self, db: str, table: str, column: str) -> None: ...

    @abstractmethod
    def has_db_table(self, db: str, table: str) -> bool: ...

    @abstractmethod
    def create_db_table_value(self, db: str, table: str, column: str, value: str) -> None: ...

    @abstractmethod
    def has_db_table_value(self, db: str, table: str, column: str, value: str) -> bool: ...

    @abstractmethod
    def ensure_db_table_value(self, db: str, table: str, column: str, value: str) -> None: ...


class MySQLDBTestHelper(DBTestHelper):
    """MySQL implementation of DBTestHelper."""

    def __init__(self, executor: SimpleSQLExecutor, fail: Optional[FailFunc] = None) -> None:
        """
        Args:
            executor: Transport used for every statement
            fail: Called with a message to abort the test; must not return
        """
        self.ex = executor
        self._fail = fail or pytest.fail

    def _abort(self, message: str) -> NoReturn:
        logger.error(message)
        self._fail(message)
        # fail callables must not return
        raise AssertionError(message)

    def create_db(self, db: str) -> None:
        """Create a database and verify it exists."""
        result = self.ex.execute_sql(f"create database {db};")
        if result.error is not None:
            self._abort(f"Error creating database '{db}': {result.error}")
        if not self.has_db(db):
            self._abort(f"Error database '{db}' was not created.")
        logger.info("Created database '%s'", db)

    def has_db(self, db: str) -> bool:
        """Return True if the database exists."""
        result = self.ex.execute_sql("show databases;")
        if result.error is not None:
            self._abort(f"Error checking database '{db}' existence: {result.error}")
        return has_row_column_value(result.output, db)

    def delete_db(self, db: str) -> None:
        """Drop the database if it exists and verify it is gone."""
        if not self.has_db(db):
            logger.debug("Database '%s' does not exist; nothing to delete", db)
            return
        result = self.ex.execute_sql(f"drop database {db};")
        if result.error is not None:
            self._abort(f"Error deleting database '{db}': {result.error}")
        if self.has_db(db):
            self._abort(f"Error database '{db}' was not deleted.")
        logger.info("Deleted database '%s'", db)

    def create_db_table(self, db: str, table: str, column: str) -> None:
        """Create a table with one varchar primary key column and verify it exists."""
        result = self.ex.execute_sql_for_db(
            db, f"create table {table} ({column} varchar(256) NOT NULL PRIMARY KEY);"
        )
        if result.error is not None:
            self._abort(f"Error creating database table '{db}.{table}': {result.error}")
        if not self.has_db_table(db, table):
            self._abort(f"Error database table '{db}.{table}' was not created.")
        logger.info("Created table '%s.%s'", db, table)

    def has_db_table(self, db: str, table: str) -> bool:
        """Return True if the table exists in the database."""
        result = self.ex.execute_sql_for_db(db, "show tables;")
        if result.error is not None:
            self._abort(f"Error checking database table '{db}.{table}' existence: {result.error}")
        return has_row_column_value(result.output, table)

    def create_db_table_value(self, db: str, table: str, column: str, value: str) -> None:
        """Insert a value and verify the table contains it."""
        result = self.ex.execute_sql_for_db(
            db, f'insert into {table} ({column}) values("{value}");'
        )
        if result.error is not None:
            self._abort(
                f"Error inserting value '{value}' into database table '{db}.{table}.{column}': {result.error}"
            )
        if not self.has_db_table_value(db, table, column, value):
            self._abort(f"Error database table '{db}.{table}.{column}' did not contain value '{value}'.")
        logger.info("Inserted '%s' into '%s.%s.%s'", value, db, table, column)

    def has_db_table_value(self, db: str, table: str, column: str, value: str) -> bool:
        """Return True if some row of the column equals the value."""
        result = self.ex.execute_sql_for_db(db, f"select {column} from {table};")
        if result.error is not None:
            self._abort(
                f"Error checking database table '{db}.{table}.{column}' for value '{value}': {result.error}"
            )
        return has_row_column_value(result.output, value)

    def ensure_db_table_value(self, db: str, table: str, column: str, value: str) -> None:
        """
        Recreate the database so it holds exactly one table with exactly one row.

        Any existing database with this name is dropped first, so repeated
        calls leave the same state.
        """
        if self.has_db(db):
            self.delete_db(db)
        self.create_db(db)
        self.create_db_table(db, table, column)
        self.create_db_table_value(db, table, column, value)
