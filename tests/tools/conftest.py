"""Tool test fixtures: a populated in-memory DuckDB and a scripted fake adapter."""

from __future__ import annotations

import asyncio

import pytest

from sqlgate.adapters._base import (
    ConnectionConfig,
    DatabaseType,
    ExecutionResult,
    SchemaMetadata,
)
from sqlgate.adapters.duckdb import DuckDBAdapter


@pytest.fixture
def shop():
    adapter = DuckDBAdapter()
    config = ConnectionConfig(name="shop", db_type=DatabaseType.DUCKDB)
    asyncio.run(adapter.connect(config))
    asyncio.run(adapter.execute("CREATE TABLE users (id INTEGER, name VARCHAR)"))
    asyncio.run(adapter.execute("CREATE TABLE orders (id INTEGER, user_id INTEGER)"))
    asyncio.run(adapter.execute("INSERT INTO users VALUES (1, 'ada'), (2, 'grace')"))
    yield adapter
    asyncio.run(adapter.close())


class FakeAdapter:
    """Adapter whose execute/describe_schema raise a preset error and record calls."""

    def __init__(self, error: Exception | None = None, *, connected: bool = True) -> None:
        self.error = error
        self.connected = connected
        self.executed: list[str] = []

    async def connect(self, config: ConnectionConfig) -> None:
        self.connected = True

    async def close(self) -> None:
        self.connected = False

    def is_connected(self) -> bool:
        return self.connected

    async def execute(self, sql: str) -> ExecutionResult:
        self.executed.append(sql)
        if self.error is not None:
            raise self.error
        return ExecutionResult(columns=["x"], rows=[{"x": 1}], row_count=1, duration_ms=0.1)

    async def describe_schema(
        self, *, table_name: str | None = None, keyword: str | None = None
    ) -> SchemaMetadata:
        if self.error is not None:
            raise self.error
        return SchemaMetadata()

    def db_type(self) -> DatabaseType:
        return DatabaseType.MYSQL

    def dialect(self) -> str:
        return "mysql"


@pytest.fixture
def fake_adapter():
    return FakeAdapter
