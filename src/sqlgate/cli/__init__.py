"""CLI entry point for `sqlgate`."""

from __future__ import annotations

import logging
import sys

import click

from sqlgate.cli.query import query
from sqlgate.cli.schema import schema
from sqlgate.cli.serve import serve
from sqlgate.cli.validate import validate

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(package_name="sqlgate")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="SQLGATE_LOG_LEVEL",
    help="Logging level (logs go to stderr).",
)
def main(log_level: str) -> None:
    """sqlgate: read-only SQL gate for AI agents."""
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


main.add_command(validate)
main.add_command(query)
main.add_command(schema)
main.add_command(serve)
