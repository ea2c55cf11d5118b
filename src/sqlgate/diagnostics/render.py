"""Render validation results for terminal (text) and agent (JSON) output."""

from __future__ import annotations

from sqlgate.diagnostics.types import Diagnostic, ValidationResult


def render_json(result: ValidationResult) -> dict:
    """Render a ValidationResult as a JSON-serializable dict."""
    return {
        "query": result.query,
        "accepted": result.accepted,
        "reason": result.reason,
        "code": str(result.code) if result.code is not None else None,
        "tables": result.tables,
        "diagnostics": [_diagnostic_to_dict(d) for d in result.diagnostics],
    }


def render_text(result: ValidationResult) -> str:
    """Render a ValidationResult as human-readable text."""
    if result.accepted:
        lines = ["ok: query accepted"]
        if result.tables:
            lines.append(f"  = tables: {', '.join(result.tables)}")
        return "\n".join(lines)

    lines: list[str] = []
    for d in result.diagnostics:
        lines.append(f"{d.level.name.lower()}[{d.code}]: {d.message}")
        if d.span is not None:
            lines.append(f"  --> {d.span.start}..{d.span.end}: {d.span_label}")
        for note in d.notes:
            lines.append(f"  = note: {note}")
    return "\n".join(lines)


def _diagnostic_to_dict(d: Diagnostic) -> dict:
    out: dict = {
        "level": d.level.name.lower(),
        "code": str(d.code),
        "message": d.message,
        "notes": d.notes,
    }
    if d.span is not None:
        out["span"] = {"start": d.span.start, "end": d.span.end, "label": d.span_label}
    return out
