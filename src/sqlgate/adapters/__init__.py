"""Database adapters: implementations of the DatabaseAdapter protocol."""

from sqlgate.adapters._base import (
    AdapterConnectionError,
    AdapterError,
    AdapterExecutionError,
    ColumnInfo,
    ConnectionConfig,
    DatabaseAdapter,
    DatabaseType,
    ExecutionResult,
    Relationship,
    SchemaMetadata,
    TableInfo,
)

__all__ = [
    "AdapterConnectionError",
    "AdapterError",
    "AdapterExecutionError",
    "ColumnInfo",
    "ConnectionConfig",
    "DatabaseAdapter",
    "DatabaseType",
    "ExecutionResult",
    "Relationship",
    "SchemaMetadata",
    "TableInfo",
]
