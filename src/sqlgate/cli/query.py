"""The `query` command: guard → connect → execute pipeline.

Rejected queries never open a database connection.
"""

from __future__ import annotations

import asyncio
import json

import click

from sqlgate.adapters._base import AdapterError, ConnectionConfig
from sqlgate.adapters._registry import get_adapter
from sqlgate.cli._output import format_result, format_rows
from sqlgate.cli._shared import db_option, fail, resolve_db, resolve_sql_stdin
from sqlgate.diagnostics.render import render_json
from sqlgate.errors import ConfigError
from sqlgate.policy import validate
from sqlgate.querylog import cleanup_old_logs, log_query
from sqlgate.tools import ToolFailure, select_tool


async def _run_query(sql: str, config: ConnectionConfig, *, output_format: str) -> int:
    """Run the pipeline. Returns exit code."""
    # Step 1: Guard
    result = validate(sql)
    if not result.accepted:
        if output_format == "json":
            envelope: dict[str, object] = {"decision": "deny"}
            envelope.update(render_json(result))
            click.echo(json.dumps(envelope, indent=2))
        else:
            click.echo("decision: deny")
            click.echo(format_result(result, output_format="text"))
        log_query(
            sql=sql,
            accepted=False,
            db=config.name,
            reason=result.reason,
            code=str(result.code),
        )
        return 1

    # Step 2: Connect adapter
    adapter = get_adapter(config.db_type)()
    await adapter.connect(config)

    # Step 3: Execute through the select tool
    try:
        rows = await select_tool(adapter, sql, db=config.name)
    finally:
        await adapter.close()

    if isinstance(rows, ToolFailure):
        if output_format == "json":
            envelope = {"decision": "allow"}
            envelope.update(render_json(result))
            envelope["error"] = rows.to_dict()
            click.echo(json.dumps(envelope, indent=2, default=str))
        else:
            click.echo(f"error: [{rows.error_type.value}] {rows.message}", err=True)
        return 1

    if output_format == "json":
        envelope = {"decision": "allow"}
        envelope.update(render_json(result))
        envelope["columns"] = list(rows[0]) if rows else []
        envelope["rows"] = rows
        envelope["row_count"] = len(rows)
        click.echo(json.dumps(envelope, indent=2, default=str))
    else:
        click.echo(format_rows(rows))
    return 0


@click.command()
@click.argument("sql", required=False)
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin.")
@db_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="json",
    help="Output format.",
)
def query(sql: str | None, from_stdin: bool, db: str | None, output_format: str) -> None:
    """Validate a SELECT and, if accepted, execute it."""
    sql = resolve_sql_stdin(sql, from_stdin)
    cleanup_old_logs()

    try:
        config = resolve_db(db)
    except ConfigError as e:
        fail(f"Configuration error: {e}", output_format=output_format, decision="deny")

    try:
        exit_code = asyncio.run(_run_query(sql, config, output_format=output_format))
    except AdapterError as e:
        fail(str(e), output_format=output_format, decision="deny")

    if exit_code != 0:
        raise SystemExit(exit_code)
