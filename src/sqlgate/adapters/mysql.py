"""MySQL adapter: execution and INFORMATION_SCHEMA introspection via PyMySQL."""

from __future__ import annotations

import logging
import time

import pymysql
import pymysql.cursors

from sqlgate.adapters._base import (
    AdapterConnectionError,
    AdapterExecutionError,
    ColumnInfo,
    ConnectionConfig,
    DatabaseType,
    ExecutionResult,
    Relationship,
    SchemaMetadata,
    TableInfo,
)

logger = logging.getLogger(__name__)

_TABLES_SQL = (
    "SELECT TABLE_NAME AS table_name "
    "FROM INFORMATION_SCHEMA.TABLES "
    "WHERE TABLE_SCHEMA = DATABASE()"
)

_COLUMNS_SQL = (
    "SELECT COLUMN_NAME AS name, DATA_TYPE AS type, IS_NULLABLE AS nullable, "
    "COLUMN_KEY AS `key`, COLUMN_DEFAULT AS `default`, EXTRA AS extra "
    "FROM INFORMATION_SCHEMA.COLUMNS "
    "WHERE TABLE_SCHEMA = DATABASE() AND TABLE_NAME = %s "
    "ORDER BY ORDINAL_POSITION"
)

_RELATIONSHIPS_SQL = (
    "SELECT TABLE_NAME AS table_name, COLUMN_NAME AS column_name, "
    "REFERENCED_TABLE_NAME AS referenced_table, "
    "REFERENCED_COLUMN_NAME AS referenced_column, "
    "CONSTRAINT_NAME AS constraint_name "
    "FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE "
    "WHERE TABLE_SCHEMA = DATABASE() "
    "AND REFERENCED_TABLE_SCHEMA = DATABASE() "
    "AND REFERENCED_TABLE_NAME IS NOT NULL"
)


class MySQLAdapter:
    """MySQL adapter using PyMySQL with dict rows."""

    def __init__(self) -> None:
        self._conn: pymysql.connections.Connection | None = None

    async def connect(self, config: ConnectionConfig) -> None:
        params = config.params
        host = params.get("host", "localhost")
        port = params.get("port", "3306")
        database = params.get("database", "")
        try:
            self._conn = pymysql.connect(
                host=host,
                port=int(port),
                user=params.get("user", "root"),
                password=params.get("password", ""),
                database=database or None,
                cursorclass=pymysql.cursors.DictCursor,
                autocommit=True,
                program_name="sqlgate",
            )
        except (pymysql.MySQLError, ValueError) as e:
            raise AdapterConnectionError(f"Failed to connect to MySQL database: {e}") from e
        logger.info("Connected to MySQL database: %s at %s:%s", database, host, port)

    async def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("Disconnected from MySQL database")

    def is_connected(self) -> bool:
        return self._conn is not None

    def _ensure_conn(self) -> pymysql.connections.Connection:
        if self._conn is None:
            raise AdapterConnectionError("Database connection is not established")
        return self._conn

    def _fetch(self, sql: str, args: tuple | None = None) -> tuple[list[str], list[dict]]:
        conn = self._ensure_conn()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, args)
                if cur.description is None:
                    return [], []
                columns = [desc[0] for desc in cur.description]
                return columns, list(cur.fetchall())
        except pymysql.OperationalError as e:
            # 2006/2013: server gone away / lost connection mid-query.
            if e.args and e.args[0] in (2006, 2013):
                raise AdapterConnectionError(f"Lost connection to MySQL: {e}") from e
            raise AdapterExecutionError(f"Failed to execute query: {e}") from e
        except pymysql.MySQLError as e:
            raise AdapterExecutionError(f"Failed to execute query: {e}") from e

    async def execute(self, sql: str) -> ExecutionResult:
        t0 = time.monotonic()
        columns, rows = self._fetch(sql)
        duration_ms = (time.monotonic() - t0) * 1000

        return ExecutionResult(
            columns=columns,
            rows=rows,
            row_count=len(rows),
            duration_ms=duration_ms,
        )

    async def describe_schema(
        self, *, table_name: str | None = None, keyword: str | None = None
    ) -> SchemaMetadata:
        tables_sql = _TABLES_SQL
        tables_args: list[str] = []
        if keyword:
            tables_sql += " AND TABLE_NAME LIKE %s"
            tables_args.append(f"%{keyword}%")
        if table_name:
            tables_sql += " AND TABLE_NAME = %s"
            tables_args.append(table_name)
        tables_sql += " ORDER BY TABLE_NAME"

        _, table_rows = self._fetch(tables_sql, tuple(tables_args))

        tables: list[TableInfo] = []
        for table_row in table_rows:
            name = table_row["table_name"]
            _, col_rows = self._fetch(_COLUMNS_SQL, (name,))
            columns = [
                ColumnInfo(
                    name=col["name"],
                    data_type=col["type"],
                    is_nullable=(col["nullable"] == "YES"),
                    key=col["key"] or None,
                    default=col["default"],
                    extra=col["extra"] or None,
                )
                for col in col_rows
            ]
            tables.append(TableInfo(schema=None, name=name, columns=columns))

        rel_sql = _RELATIONSHIPS_SQL
        rel_args: list[str] = []
        if table_name:
            rel_sql += " AND (TABLE_NAME = %s OR REFERENCED_TABLE_NAME = %s)"
            rel_args += [table_name, table_name]
        if keyword:
            rel_sql += " AND (TABLE_NAME LIKE %s OR REFERENCED_TABLE_NAME LIKE %s)"
            rel_args += [f"%{keyword}%", f"%{keyword}%"]

        _, rel_rows = self._fetch(rel_sql, tuple(rel_args))
        relationships = [
            Relationship(
                table=r["table_name"],
                column=r["column_name"],
                referenced_table=r["referenced_table"],
                referenced_column=r["referenced_column"],
                constraint_name=r["constraint_name"],
            )
            for r in rel_rows
        ]

        return SchemaMetadata(tables=tables, relationships=relationships)

    def db_type(self) -> DatabaseType:
        return DatabaseType.MYSQL

    def dialect(self) -> str:
        return "mysql"
