"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from sqlgate.adapters._base import ConnectionConfig, DatabaseType
from sqlgate.config import require_database_config
from sqlgate.errors import ConfigError

db_option = click.option(
    "--db",
    default=None,
    envvar="SQLGATE_DB",
    help="type:key=val,... (e.g. duckdb:path=local.duckdb). Defaults to MYSQL_* env settings.",
)


def resolve_sql_stdin(sql: str | None, from_stdin: bool) -> str:
    """Resolve SQL from positional argument or stdin. Exactly one source required."""
    if sql and from_stdin:
        raise click.UsageError("Provide SQL as an argument or --from-stdin, not both.")
    if from_stdin:
        if sys.stdin.isatty():
            raise click.UsageError("--from-stdin requires piped input (stdin is a terminal).")
        text = sys.stdin.read().strip()
        if not text:
            raise click.UsageError("--from-stdin: stdin was empty.")
        return text
    if not sql:
        raise click.UsageError("Missing argument 'SQL'. Provide SQL or use --from-stdin.")
    return sql


def parse_db(value: str) -> ConnectionConfig:
    """Parse a 'type:key=val,key=val' connection string."""
    if ":" not in value:
        raise ConfigError(f"--db '{value}' is not in 'type:key=val' format")
    db_type_str, params_str = value.split(":", 1)

    try:
        db_type = DatabaseType(db_type_str)
    except ValueError as e:
        valid = ", ".join(t.value for t in DatabaseType)
        raise ConfigError(f"Unknown database type '{db_type_str}'. Valid: {valid}") from e

    params: dict[str, str] = {}
    if params_str:
        for part in params_str.split(","):
            if "=" not in part:
                raise ConfigError(f"Expected key=value pair in --db, got '{part}'")
            k, v = part.split("=", 1)
            params[k.strip()] = v.strip()

    return ConnectionConfig(name=db_type_str, db_type=db_type, params=params)


def resolve_db(value: str | None) -> ConnectionConfig:
    """--db if given, else the MySQL settings from the environment."""
    if value:
        return parse_db(value)
    return require_database_config().to_connection_config()


def fail(message: str, *, output_format: str = "text", **extra: object) -> NoReturn:
    """Report an error in the requested format and exit 1."""
    if output_format == "json":
        click.echo(json.dumps({"error": message, **extra}, indent=2, default=str))
    else:
        click.echo(f"error: {message}", err=True)
    raise SystemExit(1)
