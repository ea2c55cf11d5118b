"""Tests for diagnostic values and validation results."""

import pytest

from sqlgate.diagnostics import Diagnostic, Level, Span, ValidationResult, codes
from sqlgate.errors import ForbiddenKeyword


def test_diagnostic_code_display():
    assert str(codes.MULTIPLE_STATEMENTS) == "Q0202"
    assert str(codes.SUSPICIOUS_PATTERN) == "Q0205"
    assert str(codes.DANGEROUS_FUNCTION) == "Q0206"
    assert str(codes.INVALID_STATEMENT_TYPE) == "Q0301"
    assert str(codes.FORBIDDEN_KEYWORD) == "Q0303"


def test_span_slice():
    assert Span(7, 12).slice("SELECT Sleep(5)") == "Sleep"


def test_builder_api():
    diag = (
        Diagnostic.error(codes.DANGEROUS_FUNCTION, "Query contains dangerous function: sleep")
        .at(Span(7, 12), "dangerous function")
        .note("first note")
        .note("second note")
    )

    assert diag.level == Level.ERROR
    assert diag.span == Span(7, 12)
    assert diag.span_label == "dangerous function"
    assert diag.notes == ["first note", "second note"]


def test_accept():
    result = ValidationResult.accept("SELECT 1", tables=["t"])
    assert result.accepted
    assert result.reason is None
    assert result.code is None
    assert result.tables == ["t"]
    assert result.raise_for_rejection() == "SELECT 1"


def test_reject():
    rejection = ForbiddenKeyword("drop")
    diag = Diagnostic.error(rejection.code, rejection.reason)
    result = ValidationResult.reject("SELECT drop", rejection, diag)

    assert not result.accepted
    assert result.reason == "Query contains forbidden keyword: drop"
    assert result.code == codes.FORBIDDEN_KEYWORD
    assert result.diagnostics == [diag]
    assert result.tables == []
    with pytest.raises(ForbiddenKeyword):
        result.raise_for_rejection()
