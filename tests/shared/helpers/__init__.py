"""Shared test helpers."""

from tests.shared.helpers.fake_mysql import FakeMySQLExecutor, completed

__all__ = ["FakeMySQLExecutor", "completed"]
