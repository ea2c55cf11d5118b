"""The `validate` command: run SQL through the guard without executing."""

from __future__ import annotations

import click

from sqlgate.cli._output import format_result
from sqlgate.cli._shared import resolve_sql_stdin
from sqlgate.policy import validate as run_guard


@click.command()
@click.argument("sql", required=False)
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)
def validate(sql: str | None, from_stdin: bool, output_format: str) -> None:
    """Check SQL against the read-only policy without executing it."""
    sql = resolve_sql_stdin(sql, from_stdin)
    result = run_guard(sql)
    click.echo(format_result(result, output_format=output_format))
    if not result.accepted:
        raise SystemExit(1)
