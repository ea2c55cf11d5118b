"""Tests for text and JSON rendering of validation results."""

import json

from sqlgate.diagnostics.render import render_json, render_text
from sqlgate.policy import validate


def test_json_accepted():
    out = render_json(validate("SELECT * FROM users"))
    assert out == {
        "query": "SELECT * FROM users",
        "accepted": True,
        "reason": None,
        "code": None,
        "tables": ["users"],
        "diagnostics": [],
    }


def test_json_rejected_with_span():
    out = render_json(validate("SELECT SLEEP(5)"))
    assert out["accepted"] is False
    assert out["reason"] == "Query contains dangerous function: sleep"
    assert out["code"] == "Q0206"
    (diag,) = out["diagnostics"]
    assert diag["level"] == "error"
    assert diag["span"] == {"start": 7, "end": 12, "label": "dangerous function"}


def test_json_rejected_without_span():
    out = render_json(validate("SELECT * FROM t WHERE drop"))
    (diag,) = out["diagnostics"]
    assert "span" not in diag
    assert diag["notes"] == ["keywords inside quoted literals are ignored"]


def test_json_is_serializable():
    json.dumps(render_json(validate("SELECT 1; SELECT 2")))


def test_text_accepted():
    text = render_text(validate("SELECT * FROM users"))
    assert text.splitlines() == ["ok: query accepted", "  = tables: users"]


def test_text_accepted_without_tables():
    assert render_text(validate("SELECT 1")) == "ok: query accepted"


def test_text_rejected():
    text = render_text(validate("SELECT 1;"))
    lines = text.splitlines()
    assert lines[0] == "error[Q0202]: Multiple SQL statements are not allowed"
    assert lines[1] == "  --> 8..9: statement separator"
    assert lines[2].startswith("  = note: ")
