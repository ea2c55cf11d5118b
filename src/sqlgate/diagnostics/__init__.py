"""Diagnostic system: codes, types, and rendering."""

from sqlgate.diagnostics.codes import DiagnosticCode
from sqlgate.diagnostics.types import (
    Diagnostic,
    Level,
    Span,
    ValidationResult,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Level",
    "Span",
    "ValidationResult",
]
