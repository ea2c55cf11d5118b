"""Error taxonomy.

``QueryRejected`` and its subclasses form the closed set of policy
rejections produced by the query guard. They are never fatal: the caller
fixes the query and tries again. ``ConfigError`` covers startup problems.
Driver failures live in :mod:`sqlgate.adapters` as ``AdapterError``.
"""

from __future__ import annotations

from sqlgate.diagnostics import codes
from sqlgate.diagnostics.codes import DiagnosticCode


class SqlGateError(Exception):
    """Base class for all sqlgate errors."""


class ConfigError(SqlGateError):
    """Raised when the database configuration is missing or invalid."""


class QueryRejected(SqlGateError):
    """A query was refused by the guard. ``str(exc)`` is the reason text."""

    code: DiagnosticCode

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryRejected):
            return NotImplemented
        return type(self) is type(other) and self.reason == other.reason

    def __hash__(self) -> int:
        return hash((type(self), self.reason))


class InvalidStatementType(QueryRejected):
    code = codes.INVALID_STATEMENT_TYPE

    def __init__(self) -> None:
        super().__init__("Only SELECT queries are allowed")


class MultipleStatements(QueryRejected):
    code = codes.MULTIPLE_STATEMENTS

    def __init__(self) -> None:
        super().__init__("Multiple SQL statements are not allowed")


class ForbiddenKeyword(QueryRejected):
    code = codes.FORBIDDEN_KEYWORD

    def __init__(self, keyword: str) -> None:
        super().__init__(f"Query contains forbidden keyword: {keyword}")
        self.keyword = keyword


class DangerousFunction(QueryRejected):
    code = codes.DANGEROUS_FUNCTION

    def __init__(self, name: str) -> None:
        super().__init__(f"Query contains dangerous function: {name}")
        self.name = name


class SuspiciousPattern(QueryRejected):
    code = codes.SUSPICIOUS_PATTERN

    def __init__(self) -> None:
        super().__init__("Query contains potential SQL injection pattern")
