"""The `serve` command: run the MCP server over stdio."""

from __future__ import annotations

import asyncio

import click

from sqlgate.adapters._base import AdapterError
from sqlgate.cli._shared import db_option, resolve_db
from sqlgate.errors import ConfigError

# stdout carries the MCP protocol; everything human-facing goes to stderr.
_BANNER = """
┌────────────────────────────────────────┐
│          MySQL MCP Server              │
│                                        │
│  SELECT queries only for security      │
│  Powered by Model Context Protocol     │
└────────────────────────────────────────┘
"""


@click.command()
@db_option
@click.option("--quiet", is_flag=True, help="Do not print the startup banner.")
def serve(db: str | None, quiet: bool) -> None:
    """Serve the `select` and `schema` tools to an MCP client over stdio."""
    from sqlgate.server import serve as run_server

    try:
        config = resolve_db(db)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        raise SystemExit(1) from e

    if not quiet:
        click.echo(_BANNER, err=True)

    try:
        asyncio.run(run_server(config))
    except AdapterError as e:
        click.echo(f"Database connection error: {e}", err=True)
        raise SystemExit(1) from e
    except KeyboardInterrupt:
        pass
