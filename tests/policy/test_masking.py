"""Test string-literal masking."""

import re

from sqlgate.policy.masking import mask_literals


def test_no_literals_unchanged():
    assert mask_literals("select * from users") == "select * from users"


def test_single_and_double_quotes_masked():
    masked = mask_literals("select * from t where a = 'create' and b = \"drop\"")
    assert "create" not in masked
    assert "drop" not in masked


def test_placeholders_unique_and_ordered():
    masked = mask_literals("select 'a', 'a', \"b\"")
    assert re.findall(r"__literal_(\d+)__", masked) == ["0", "1", "2"]


def test_empty_literal_masked():
    assert "''" not in mask_literals("select ''")


def test_non_greedy():
    masked = mask_literals("select 'x' as update_col, 'y'")
    assert "update_col" in masked


def test_unterminated_quote_left_alone():
    assert mask_literals("select 'oops") == "select 'oops"
