"""Database configuration from environment variables (and an optional .env file)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from sqlgate.adapters._base import ConnectionConfig, DatabaseType
from sqlgate.errors import ConfigError


@dataclass(frozen=True)
class DatabaseConfig:
    host: str
    port: int | None
    user: str
    password: str
    database: str

    def to_connection_config(self) -> ConnectionConfig:
        return ConnectionConfig(
            name=f"mysql:{self.database}",
            db_type=DatabaseType.MYSQL,
            params={
                "host": self.host,
                "port": str(self.port),
                "user": self.user,
                "password": self.password,
                "database": self.database,
            },
        )


def _parse_port(value: str) -> int | None:
    try:
        return int(value, 10)
    except ValueError:
        return None


def load_database_config(environ: Mapping[str, str] | None = None) -> DatabaseConfig:
    """Read MYSQL_* settings. With no mapping given, .env is loaded into os.environ first.

    Unset and empty variables both fall back to the defaults. An unparsable
    MYSQL_PORT becomes ``port=None`` and is reported by
    :func:`validate_database_config`.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    return DatabaseConfig(
        host=environ.get("MYSQL_HOST") or "localhost",
        port=_parse_port(environ.get("MYSQL_PORT") or "3306"),
        user=environ.get("MYSQL_USER") or "root",
        password=environ.get("MYSQL_PASSWORD") or "",
        database=environ.get("MYSQL_DATABASE") or "test",
    )


def validate_database_config(config: DatabaseConfig) -> str | None:
    """Return the first configuration problem, or None."""
    if not config.host:
        return "MYSQL_HOST is not set"
    if config.port is None:
        return "MYSQL_PORT is not a valid number"
    if not config.user:
        return "MYSQL_USER is not set"
    if not config.database:
        return "MYSQL_DATABASE is not set"
    return None


def require_database_config(environ: Mapping[str, str] | None = None) -> DatabaseConfig:
    """Load and validate, raising ConfigError on the first problem."""
    config = load_database_config(environ)
    problem = validate_database_config(config)
    if problem is not None:
        raise ConfigError(problem)
    return config
