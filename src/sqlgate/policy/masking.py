"""String-literal masking for keyword scans."""

from __future__ import annotations

import itertools
import re

# Non-greedy quote matching; backslash escapes and doubled quotes are not
# understood, an unterminated quote is left as-is.
_LITERAL_RE = re.compile(r"'[^']*'|\"[^\"]*\"")


def mask_literals(sql: str) -> str:
    """Replace every quoted literal with a unique placeholder token.

    The placeholder is padded with spaces so a keyword glued to a literal
    (``insert'x'``) still sits on a word boundary. The result is only ever
    scanned, never executed.
    """
    counter = itertools.count()
    return _LITERAL_RE.sub(lambda _m: f" __literal_{next(counter)}__ ", sql)
