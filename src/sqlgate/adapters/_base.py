"""Database adapter protocol: the abstraction boundary between the gate and drivers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


class DatabaseType(enum.Enum):
    MYSQL = "mysql"
    DUCKDB = "duckdb"


@dataclass
class ConnectionConfig:
    name: str
    db_type: DatabaseType
    params: dict[str, str] = field(default_factory=dict)


@dataclass
class ExecutionResult:
    """Query execution result."""

    columns: list[str]
    rows: list[dict[str, object]]
    row_count: int
    duration_ms: float | None = None


class AdapterError(Exception):
    """Raised by adapters for connection/execution failures."""


class AdapterConnectionError(AdapterError):
    """The database could not be reached, or no connection is open."""


class AdapterExecutionError(AdapterError):
    """The database rejected or failed to run a statement."""


@dataclass
class ColumnInfo:
    name: str
    data_type: str
    is_nullable: bool = True
    key: str | None = None  # PRI, UNI, MUL
    default: object | None = None
    extra: str | None = None  # auto_increment, ...


@dataclass
class TableInfo:
    schema: str | None
    name: str
    columns: list[ColumnInfo] = field(default_factory=list)


@dataclass
class Relationship:
    table: str
    column: str
    referenced_table: str
    referenced_column: str
    constraint_name: str


@dataclass
class SchemaMetadata:
    tables: list[TableInfo] = field(default_factory=list)
    relationships: list[Relationship] = field(default_factory=list)


@runtime_checkable
class DatabaseAdapter(Protocol):
    async def connect(self, config: ConnectionConfig) -> None: ...
    async def close(self) -> None: ...
    def is_connected(self) -> bool: ...
    async def execute(self, sql: str) -> ExecutionResult: ...
    async def describe_schema(
        self, *, table_name: str | None = None, keyword: str | None = None
    ) -> SchemaMetadata: ...
    def db_type(self) -> DatabaseType: ...
    def dialect(self) -> str: ...
