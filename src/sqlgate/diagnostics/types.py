"""Diagnostic values and the guard's validation result.

Every policy check in the guard produces at most one error-level
``Diagnostic``. The first one found decides the verdict; the
``ValidationResult`` bundles it with the rejection it maps to so callers can
render it for humans, serialize it for agents, or raise it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sqlgate.diagnostics.codes import DiagnosticCode

if TYPE_CHECKING:
    from sqlgate.errors import QueryRejected


class Level(enum.IntEnum):
    """Guard verdicts are binary, so every diagnostic is an error."""

    ERROR = 2


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def slice(self, sql: str) -> str:
        return sql[self.start : self.end]


@dataclass
class Diagnostic:
    level: Level
    code: DiagnosticCode
    message: str
    span: Span | None = None
    span_label: str | None = None
    notes: list[str] = field(default_factory=list)

    # -- Builder classmethods ---------------------------------------------------

    @classmethod
    def error(cls, code: DiagnosticCode, message: str) -> Diagnostic:
        return cls(level=Level.ERROR, code=code, message=message)

    # -- Builder chain methods --------------------------------------------------

    def at(self, span: Span, label: str) -> Diagnostic:
        self.span = span
        self.span_label = label
        return self

    def note(self, note: str) -> Diagnostic:
        self.notes.append(note)
        return self


@dataclass
class ValidationResult:
    """Binary verdict of the guard. ``rejection`` is None iff accepted."""

    query: str
    rejection: QueryRejected | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    tables: list[str] = field(default_factory=list)

    @classmethod
    def accept(cls, query: str, *, tables: list[str] | None = None) -> ValidationResult:
        return cls(query=query, tables=tables or [])

    @classmethod
    def reject(
        cls, query: str, rejection: QueryRejected, diagnostic: Diagnostic
    ) -> ValidationResult:
        return cls(query=query, rejection=rejection, diagnostics=[diagnostic])

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def reason(self) -> str | None:
        return self.rejection.reason if self.rejection is not None else None

    @property
    def code(self) -> DiagnosticCode | None:
        return self.rejection.code if self.rejection is not None else None

    def raise_for_rejection(self) -> str:
        """Return the original query, or raise the rejection."""
        if self.rejection is not None:
            raise self.rejection
        return self.query
