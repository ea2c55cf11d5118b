"""CTE-aware table extraction using sqlglot scope analysis."""

from __future__ import annotations

import sqlglot
from sqlglot import exp
from sqlglot.optimizer.scope import traverse_scope

DEFAULT_DIALECT = "mysql"


def extract_tables(sql: str, *, dialect: str | None = DEFAULT_DIALECT) -> list[str]:
    """Extract all referenced physical table names from a SQL string.

    Resolves CTEs, so only real tables are returned, as a sorted list of
    ``schema.table`` or ``table`` names. The listing is informational: any
    parse failure yields an empty list.
    """
    try:
        statement = sqlglot.parse_one(sql, dialect=dialect)
    except Exception:
        # Includes RecursionError on deeply nested input.
        return []
    if statement is None:
        return []

    try:
        scopes = list(traverse_scope(statement))
    except Exception:
        # Scope analysis rejects some valid-but-unusual shapes; fall back.
        return _walk_tables(statement)

    if not scopes:
        return _walk_tables(statement)

    cte_names: set[str] = set()
    for scope in scopes:
        if scope.is_cte:
            cte_names.add(scope.expression.parent.alias)

    source_tables: set[str] = set()
    for scope in scopes:
        for table in scope.tables:
            if table.name not in cte_names:
                source_tables.add(_qualified_name(table))

    return sorted(source_tables)


def _walk_tables(statement: exp.Expression) -> list[str]:
    tables: set[str] = set()
    for node in statement.walk():
        if isinstance(node, exp.Table) and node.name:
            tables.add(_qualified_name(node))
    return sorted(tables)


def _qualified_name(table: exp.Table) -> str:
    if table.db:
        return f"{table.db}.{table.name}"
    return table.name
