"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from sqlgate.diagnostics.render import render_json, render_text
from sqlgate.diagnostics.types import ValidationResult


def format_result(result: ValidationResult, *, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(render_json(result), indent=2)
    return render_text(result)


def format_rows(rows: list[dict[str, object]]) -> str:
    """Simple tabular text output for query rows."""
    columns = list(rows[0]) if rows else []
    lines: list[str] = []
    if columns:
        lines.append(" | ".join(columns))
        lines.append("-+-".join("-" * max(len(c), 5) for c in columns))
        for row in rows:
            lines.append(" | ".join(str(row.get(c, "")) for c in columns))
    lines.append(f"\n({len(rows)} rows)")
    return "\n".join(lines)


def format_schema(doc: dict) -> str:
    lines: list[str] = []
    for table in doc["tables"]:
        lines.append(table["tableName"])
        for c in table["columns"]:
            nullable = "NULL" if c["nullable"] else "NOT NULL"
            line = f"  {c['name']}  {c['type']}  {nullable}"
            if c.get("key"):
                line += f"  {c['key']}"
            if c.get("extra"):
                line += f"  {c['extra']}"
            lines.append(line)
    for r in doc.get("relationships", []):
        lines.append(
            f"{r['table']}.{r['column']} -> {r['referencedTable']}.{r['referencedColumn']}"
            f"  ({r['constraintName']})"
        )
    if not lines:
        return "No tables found."
    return "\n".join(lines)
