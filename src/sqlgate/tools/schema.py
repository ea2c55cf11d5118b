"""The `schema` tool: tables, columns, and foreign-key relationships."""

from __future__ import annotations

from sqlgate.adapters._base import (
    AdapterConnectionError,
    AdapterError,
    DatabaseAdapter,
    SchemaMetadata,
)
from sqlgate.tools._types import ErrorType, ToolFailure, log_failure


def schema_to_dict(meta: SchemaMetadata) -> dict[str, object]:
    doc: dict[str, object] = {
        "tables": [
            {
                "tableName": t.name,
                "columns": [
                    {
                        "name": c.name,
                        "type": c.data_type,
                        "nullable": c.is_nullable,
                        "key": c.key,
                        "default": c.default,
                        "extra": c.extra,
                    }
                    for c in t.columns
                ],
            }
            for t in meta.tables
        ],
    }
    if meta.relationships:
        doc["relationships"] = [
            {
                "table": r.table,
                "column": r.column,
                "referencedTable": r.referenced_table,
                "referencedColumn": r.referenced_column,
                "constraintName": r.constraint_name,
            }
            for r in meta.relationships
        ]
    return doc


async def schema_tool(
    adapter: DatabaseAdapter,
    *,
    table_name: str | None = None,
    keyword: str | None = None,
) -> dict[str, object] | ToolFailure:
    """Describe the connected database, optionally narrowed to one table or a name keyword."""
    if not adapter.is_connected():
        failure = ToolFailure(ErrorType.VALIDATION_ERROR, "Database is not connected")
        log_failure(failure)
        return failure

    try:
        meta = await adapter.describe_schema(table_name=table_name, keyword=keyword)
    except AdapterConnectionError as e:
        failure = ToolFailure(ErrorType.DATABASE_CONNECTION_ERROR, str(e), details=e.__cause__)
    except AdapterError as e:
        failure = ToolFailure(ErrorType.QUERY_EXECUTION_ERROR, str(e), details=e.__cause__)
    except Exception as e:
        failure = ToolFailure(ErrorType.INTERNAL_ERROR, f"Unexpected error: {e}", details=e)
    else:
        return schema_to_dict(meta)

    log_failure(failure)
    return failure
