"""Adapter test fixtures."""

from __future__ import annotations

import asyncio
import os

import pytest

from sqlgate.adapters._base import ConnectionConfig, DatabaseType
from sqlgate.adapters.duckdb import DuckDBAdapter


@pytest.fixture
def duckdb_adapter():
    """Connected in-memory DuckDBAdapter, torn down after each test."""
    adapter = DuckDBAdapter()
    config = ConnectionConfig(name="test", db_type=DatabaseType.DUCKDB, params={"path": ":memory:"})
    asyncio.run(adapter.connect(config))
    yield adapter
    asyncio.run(adapter.close())


@pytest.fixture(scope="session")
def mysql_params():
    return {
        "host": os.environ.get("SQLGATE_MYSQL_HOST", "localhost"),
        "port": os.environ.get("SQLGATE_MYSQL_PORT", "3306"),
        "user": os.environ.get("SQLGATE_MYSQL_USER", "root"),
        "password": os.environ.get("SQLGATE_MYSQL_PASSWORD", ""),
        "database": os.environ.get("SQLGATE_MYSQL_DATABASE", "sqlgate_test"),
    }


@pytest.fixture
def mysql_adapter(mysql_params):
    """Connected MySQLAdapter, torn down after each test."""
    from sqlgate.adapters.mysql import MySQLAdapter

    adapter = MySQLAdapter()
    config = ConnectionConfig(name="mysql-test", db_type=DatabaseType.MYSQL, params=mysql_params)
    asyncio.run(adapter.connect(config))
    yield adapter
    asyncio.run(adapter.close())
