"""Guard checks: each inspects the normalized (stripped, lowercased) query."""

from __future__ import annotations

import re
from dataclasses import dataclass

from sqlgate.diagnostics import Diagnostic, Span
from sqlgate.errors import (
    DangerousFunction,
    ForbiddenKeyword,
    InvalidStatementType,
    MultipleStatements,
    QueryRejected,
    SuspiciousPattern,
)
from sqlgate.policy.masking import mask_literals
from sqlgate.policy.rules import (
    DANGEROUS_FUNCTION_PATTERNS,
    FORBIDDEN_KEYWORD_PATTERNS,
    INJECTION_PATTERNS,
)

_SELECT_RE = re.compile(r"select\b")


@dataclass(frozen=True)
class Violation:
    """A failed check: the rejection plus where it matched, if anywhere."""

    rejection: QueryRejected
    span: Span | None = None
    label: str = ""
    note: str | None = None

    def to_diagnostic(self, offset: int | None = 0) -> Diagnostic:
        """Build the error diagnostic. ``offset=None`` omits the span."""
        diag = Diagnostic.error(self.rejection.code, self.rejection.reason)
        if self.span is not None and offset is not None:
            diag.at(Span(self.span.start + offset, self.span.end + offset), self.label)
        if self.note is not None:
            diag.note(self.note)
        return diag


def check_statement_type(normalized: str) -> Violation | None:
    """Only statements whose first token is SELECT get through."""
    if _SELECT_RE.match(normalized):
        return None
    first = normalized.split(maxsplit=1)[0] if normalized else ""
    return Violation(
        InvalidStatementType(),
        span=Span(0, len(first)) if first else None,
        label="statement starts here",
        note="this gate only forwards read-only SELECT statements",
    )


def check_multiple_statements(normalized: str) -> Violation | None:
    """Any semicolon, even inside a string literal, blocks the query."""
    pos = normalized.find(";")
    if pos == -1:
        return None
    return Violation(
        MultipleStatements(),
        span=Span(pos, pos + 1),
        label="statement separator",
        note="semicolons are refused everywhere, including inside string literals",
    )


def check_forbidden_keywords(normalized: str) -> Violation | None:
    """Whole-word keyword scan with string literals masked out."""
    masked = mask_literals(normalized)
    for keyword, pattern in FORBIDDEN_KEYWORD_PATTERNS:
        if pattern.search(masked):
            return Violation(
                ForbiddenKeyword(keyword),
                note="keywords inside quoted literals are ignored",
            )
    return None


def check_dangerous_functions(normalized: str) -> Violation | None:
    """Whole-word function scan over the unmasked query.

    Literals are deliberately not masked here so a call such as
    ``load_file('/etc/passwd')`` is caught together with its arguments.
    """
    for name, pattern in DANGEROUS_FUNCTION_PATTERNS:
        m = pattern.search(normalized)
        if m is not None:
            return Violation(
                DangerousFunction(name),
                span=Span(m.start(), m.end()),
                label="dangerous function",
            )
    return None


def check_injection_patterns(normalized: str) -> Violation | None:
    """Tautologies after OR/AND and SQL comment markers."""
    for label, pattern in INJECTION_PATTERNS:
        m = pattern.search(normalized)
        if m is not None:
            return Violation(
                SuspiciousPattern(),
                span=Span(m.start(), m.end()),
                label=label,
            )
    return None
