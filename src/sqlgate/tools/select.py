"""The `select` tool: guard, then execute, then return rows."""

from __future__ import annotations

from sqlgate.adapters._base import (
    AdapterConnectionError,
    AdapterError,
    DatabaseAdapter,
    ExecutionResult,
)
from sqlgate.policy import validate
from sqlgate.querylog import log_query
from sqlgate.tools._types import ErrorType, ToolFailure, log_failure


async def select_tool(
    adapter: DatabaseAdapter,
    query: str,
    *,
    db: str | None = None,
) -> list[dict[str, object]] | ToolFailure:
    """Run a read-only query through the guard and the adapter.

    The query reaches ``adapter.execute`` only when the guard accepts it;
    rejections come back as a VALIDATION_ERROR carrying the guard's reason.
    Every call is written to the query log.
    """
    result = validate(query)
    if not result.accepted:
        failure = ToolFailure(ErrorType.VALIDATION_ERROR, result.reason or "Invalid SQL query")
        return _fail(failure, query, db=db, code=str(result.code), reason=result.reason)

    if not adapter.is_connected():
        failure = ToolFailure(ErrorType.VALIDATION_ERROR, "Database is not connected")
        return _fail(failure, query, db=db, tables=result.tables)

    try:
        exec_result: ExecutionResult = await adapter.execute(result.query)
    except AdapterConnectionError as e:
        failure = ToolFailure(ErrorType.DATABASE_CONNECTION_ERROR, str(e), details=e.__cause__)
        return _fail(failure, query, db=db, tables=result.tables)
    except AdapterError as e:
        failure = ToolFailure(ErrorType.QUERY_EXECUTION_ERROR, str(e), details=e.__cause__)
        return _fail(failure, query, db=db, tables=result.tables)
    except Exception as e:
        failure = ToolFailure(ErrorType.INTERNAL_ERROR, f"Unexpected error: {e}", details=e)
        return _fail(failure, query, db=db, tables=result.tables)

    log_query(
        sql=query,
        accepted=True,
        db=db,
        tables=result.tables,
        row_count=exec_result.row_count,
        duration_ms=exec_result.duration_ms,
    )
    return exec_result.rows


def _fail(
    failure: ToolFailure,
    query: str,
    *,
    db: str | None,
    code: str | None = None,
    reason: str | None = None,
    tables: list[str] | None = None,
) -> ToolFailure:
    log_failure(failure)
    log_query(
        sql=query,
        accepted=reason is None,
        db=db,
        reason=reason,
        code=code,
        tables=tables,
        error=failure.message,
    )
    return failure
