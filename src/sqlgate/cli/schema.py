"""The `schema` command: tables, columns, and relationships of the connected database."""

from __future__ import annotations

import asyncio
import json

import click

from sqlgate.adapters._base import AdapterError, ConnectionConfig
from sqlgate.adapters._registry import get_adapter
from sqlgate.cli._output import format_schema
from sqlgate.cli._shared import db_option, fail, resolve_db
from sqlgate.errors import ConfigError
from sqlgate.tools import ToolFailure, schema_tool


async def _describe(
    config: ConnectionConfig, *, table_name: str | None, keyword: str | None
) -> dict | ToolFailure:
    adapter = get_adapter(config.db_type)()
    await adapter.connect(config)
    try:
        return await schema_tool(adapter, table_name=table_name, keyword=keyword)
    finally:
        await adapter.close()


@click.command("schema")
@click.option("--table", "table_name", default=None, help="Only this table.")
@click.option("--keyword", default=None, help="Only tables whose name contains KEYWORD.")
@db_option
@click.option("--format", "output_format", type=click.Choice(["json", "text"]), default="json")
def schema(table_name: str | None, keyword: str | None, db: str | None, output_format: str) -> None:
    """Show table definitions and foreign-key relationships."""
    try:
        config = resolve_db(db)
    except ConfigError as e:
        fail(f"Configuration error: {e}", output_format=output_format)

    try:
        doc = asyncio.run(_describe(config, table_name=table_name, keyword=keyword))
    except AdapterError as e:
        fail(str(e), output_format=output_format)

    if isinstance(doc, ToolFailure):
        fail(doc.message, output_format=output_format, type=doc.error_type.value)

    if output_format == "json":
        click.echo(json.dumps(doc, indent=2, default=str))
    else:
        click.echo(format_schema(doc))
