"""Integration tests for DuckDB adapter: runs real queries in-memory."""

import asyncio

import pytest

from sqlgate.adapters._base import (
    AdapterConnectionError,
    AdapterExecutionError,
    DatabaseAdapter,
    DatabaseType,
)
from sqlgate.adapters.duckdb import DuckDBAdapter


@pytest.fixture
def adapter(duckdb_adapter):
    asyncio.run(duckdb_adapter.execute("CREATE TABLE users (id INTEGER NOT NULL, name VARCHAR)"))
    asyncio.run(duckdb_adapter.execute("CREATE TABLE orders (id INTEGER, user_id INTEGER)"))
    asyncio.run(duckdb_adapter.execute("INSERT INTO users VALUES (1, 'ada'), (2, 'grace')"))
    return duckdb_adapter


def test_satisfies_protocol(adapter):
    assert isinstance(adapter, DatabaseAdapter)


def test_execute_simple(adapter):
    result = asyncio.run(adapter.execute("SELECT 1 AS x, 'hello' AS y"))
    assert result.columns == ["x", "y"]
    assert result.row_count == 1
    assert result.rows == [{"x": 1, "y": "hello"}]
    assert result.duration_ms is not None


def test_execute_table(adapter):
    result = asyncio.run(adapter.execute("SELECT id, name FROM users ORDER BY id"))
    assert result.rows == [{"id": 1, "name": "ada"}, {"id": 2, "name": "grace"}]
    assert result.row_count == 2


def test_execute_error(adapter):
    with pytest.raises(AdapterExecutionError, match="Failed to execute query"):
        asyncio.run(adapter.execute("SELECT * FROM missing_table"))


def test_describe_schema_all(adapter):
    meta = asyncio.run(adapter.describe_schema())
    names = [t.name for t in meta.tables]
    assert names == ["orders", "users"]
    assert meta.relationships == []


def test_describe_schema_columns(adapter):
    meta = asyncio.run(adapter.describe_schema(table_name="users"))
    (table,) = meta.tables
    assert table.schema == "main"
    assert [c.name for c in table.columns] == ["id", "name"]
    assert table.columns[0].is_nullable is False
    assert table.columns[1].is_nullable is True


def test_describe_schema_keyword(adapter):
    meta = asyncio.run(adapter.describe_schema(keyword="ord"))
    assert [t.name for t in meta.tables] == ["orders"]


def test_describe_schema_no_match(adapter):
    meta = asyncio.run(adapter.describe_schema(table_name="nope"))
    assert meta.tables == []


def test_not_connected():
    a = DuckDBAdapter()
    assert not a.is_connected()
    with pytest.raises(AdapterConnectionError, match="not established"):
        asyncio.run(a.execute("SELECT 1"))
    with pytest.raises(AdapterConnectionError):
        asyncio.run(a.describe_schema())


def test_close_is_idempotent(duckdb_adapter):
    asyncio.run(duckdb_adapter.close())
    asyncio.run(duckdb_adapter.close())
    assert not duckdb_adapter.is_connected()


def test_dialect(adapter):
    assert adapter.dialect() == "duckdb"


def test_db_type(adapter):
    assert adapter.db_type() == DatabaseType.DUCKDB
