"""Query audit log: daily JSONL files per project, with automatic retention cleanup."""

from __future__ import annotations

import contextlib
import json
import logging
import os
from datetime import UTC, datetime, timedelta
from pathlib import Path

DEFAULT_RETENTION_DAYS = 30
_LOG_ROOT = Path.home() / ".sqlgate" / "logs"

logger = logging.getLogger(__name__)


def _project_slug() -> str:
    """Encode cwd into a directory-safe slug."""
    cwd = os.getcwd()
    return cwd.replace("/", "-").lstrip("-")


def _log_dir() -> Path:
    return _LOG_ROOT / _project_slug()


def _today_file() -> Path:
    today = datetime.now(UTC).strftime("%Y-%m-%d")
    return _log_dir() / f"{today}.jsonl"


def log_query(
    *,
    sql: str,
    accepted: bool,
    db: str | None = None,
    reason: str | None = None,
    code: str | None = None,
    tables: list[str] | None = None,
    row_count: int | None = None,
    duration_ms: float | None = None,
    error: str | None = None,
) -> None:
    """Append a query log entry to today's JSONL file.

    Best-effort: a write failure is logged as a warning, never raised.
    """
    entry = {
        "ts": datetime.now(UTC).isoformat(),
        "db": db,
        "sql": sql,
        "accepted": accepted,
        "reason": reason,
        "code": code,
        "tables": tables or [],
        "row_count": row_count,
        "duration_ms": duration_ms,
        "error": error,
    }

    log_file = _today_file()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError as e:
        # Auditing must never change a tool result.
        logger.warning("Could not write query log %s: %s", log_file, e)


def cleanup_old_logs(*, retention_days: int = DEFAULT_RETENTION_DAYS) -> int:
    """Delete log files older than retention_days. Returns count of deleted files."""
    cutoff = datetime.now(UTC) - timedelta(days=retention_days)
    deleted = 0

    log_dir = _log_dir()
    if not log_dir.exists():
        return 0

    for log_file in log_dir.glob("*.jsonl"):
        try:
            file_date = datetime.strptime(log_file.stem, "%Y-%m-%d").replace(tzinfo=UTC)
        except ValueError:
            continue
        if file_date < cutoff:
            log_file.unlink()
            deleted += 1

    # Remove the project directory once it is empty.
    with contextlib.suppress(OSError):
        log_dir.rmdir()

    return deleted
