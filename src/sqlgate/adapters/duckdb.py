"""DuckDB adapter: local/in-memory, great for testing and local analytics."""

from __future__ import annotations

import time

import duckdb as _duckdb

from sqlgate.adapters._base import (
    AdapterConnectionError,
    AdapterExecutionError,
    ColumnInfo,
    ConnectionConfig,
    DatabaseType,
    ExecutionResult,
    SchemaMetadata,
    TableInfo,
)


class DuckDBAdapter:
    """DuckDB adapter, in-process, no server needed."""

    def __init__(self) -> None:
        self._conn: _duckdb.DuckDBPyConnection | None = None

    async def connect(self, config: ConnectionConfig) -> None:
        path = config.params.get("path") or ":memory:"
        try:
            self._conn = _duckdb.connect(path, config={"custom_user_agent": "sqlgate/0.1.0"})
        except Exception as e:
            raise AdapterConnectionError(f"DuckDB connection failed: {e}") from e

    async def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def is_connected(self) -> bool:
        return self._conn is not None

    def _ensure_conn(self) -> _duckdb.DuckDBPyConnection:
        if self._conn is None:
            raise AdapterConnectionError("Database connection is not established")
        return self._conn

    async def execute(self, sql: str) -> ExecutionResult:
        conn = self._ensure_conn()

        t0 = time.monotonic()
        try:
            result = conn.execute(sql)
            columns = [desc[0] for desc in result.description] if result.description else []
            rows_raw = result.fetchall() if result.description else []
        except Exception as e:
            raise AdapterExecutionError(f"Failed to execute query: {e}") from e
        duration_ms = (time.monotonic() - t0) * 1000

        rows = [dict(zip(columns, row, strict=True)) for row in rows_raw]

        return ExecutionResult(
            columns=columns,
            rows=rows,
            row_count=len(rows),
            duration_ms=duration_ms,
        )

    async def describe_schema(
        self, *, table_name: str | None = None, keyword: str | None = None
    ) -> SchemaMetadata:
        conn = self._ensure_conn()
        tables: list[TableInfo] = []

        sql = (
            "SELECT table_schema, table_name "
            "FROM information_schema.tables "
            "WHERE table_schema NOT IN ('pg_catalog', 'information_schema')"
        )
        args: list[str] = []
        if keyword:
            sql += " AND table_name LIKE ?"
            args.append(f"%{keyword}%")
        if table_name:
            sql += " AND table_name = ?"
            args.append(table_name)
        sql += " ORDER BY table_schema, table_name"

        try:
            table_rows = conn.execute(sql, args).fetchall()

            for schema, name in table_rows:
                col_rows = conn.execute(
                    "SELECT column_name, data_type, is_nullable, column_default "
                    "FROM information_schema.columns "
                    "WHERE table_schema = ? AND table_name = ? "
                    "ORDER BY ordinal_position",
                    [schema, name],
                ).fetchall()
                columns = [
                    ColumnInfo(
                        name=col_name,
                        data_type=data_type,
                        is_nullable=(nullable == "YES"),
                        default=default,
                    )
                    for col_name, data_type, nullable, default in col_rows
                ]
                tables.append(TableInfo(schema=schema, name=name, columns=columns))
        except Exception as e:
            raise AdapterExecutionError(f"DuckDB introspection failed: {e}") from e

        return SchemaMetadata(tables=tables)

    def db_type(self) -> DatabaseType:
        return DatabaseType.DUCKDB

    def dialect(self) -> str:
        return "duckdb"
