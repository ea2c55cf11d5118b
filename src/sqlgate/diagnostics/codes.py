"""Stable, searchable rejection code registry.

Ranges:
- Q02xx  Statement safety (multi-statement, injection heuristics, functions)
- Q03xx  Statement classification (type allowlist, keyword blocklist)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiagnosticCode:
    value: int

    def __str__(self) -> str:
        return f"Q{self.value:04d}"


# Statement safety (Q02xx)
MULTIPLE_STATEMENTS = DiagnosticCode(202)
SUSPICIOUS_PATTERN = DiagnosticCode(205)
DANGEROUS_FUNCTION = DiagnosticCode(206)

# Classification (Q03xx)
INVALID_STATEMENT_TYPE = DiagnosticCode(301)
FORBIDDEN_KEYWORD = DiagnosticCode(303)
