"""Query guard: decide whether a SQL string may reach the database.

The guard is a lexical filter, not a parser. It is one layer of defense in
depth and assumes the database account it fronts is itself read-only.
"""

from __future__ import annotations

from sqlgate.diagnostics import ValidationResult
from sqlgate.policy.safety import (
    check_dangerous_functions,
    check_forbidden_keywords,
    check_injection_patterns,
    check_multiple_statements,
    check_statement_type,
)
from sqlgate.policy.tables import extract_tables

# Order matters: the first failing check decides the reported reason.
_CHECKS = (
    check_statement_type,
    check_multiple_statements,
    check_forbidden_keywords,
    check_dangerous_functions,
    check_injection_patterns,
)


def validate(query: str) -> ValidationResult:
    """Run the guard on a SQL string.

    Steps (first failure wins):
        1. Normalize: strip whitespace, lowercase for comparison
        2. Statement type must be SELECT
        3. No semicolons anywhere
        4. No forbidden keywords outside string literals
        5. No dangerous functions (literals included)
        6. No tautology or comment injection patterns

    Pure and total: no I/O, never raises for any string. The query itself is
    returned untouched on the result; only the verdict depends on the
    normalized copy.
    """
    stripped = query.strip()
    normalized = stripped.lower()
    # Spans are reported against the caller's string, which is only possible
    # while lowercasing keeps every character the same length.
    offset: int | None = None
    if len(normalized) == len(stripped):
        offset = len(query) - len(query.lstrip())

    for check in _CHECKS:
        violation = check(normalized)
        if violation is not None:
            return ValidationResult.reject(
                query, violation.rejection, violation.to_diagnostic(offset)
            )

    return ValidationResult.accept(query, tables=extract_tables(stripped))


def ensure_allowed(query: str) -> str:
    """Return ``query`` unchanged if the guard accepts it, else raise the rejection."""
    return validate(query).raise_for_rejection()


__all__ = ["ensure_allowed", "validate"]
