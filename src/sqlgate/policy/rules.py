"""Policy tables: forbidden keywords, dangerous functions, injection heuristics.

Tables are ordered; when several entries match, the first one in table order
is reported. Everything is compiled once at import and never mutated.

Comment detection covers `--` and `/* */` only. MySQL's `#` line comment
is not flagged.
"""

from __future__ import annotations

import re

FORBIDDEN_KEYWORDS: tuple[str, ...] = (
    "insert",
    "update",
    "delete",
    "drop",
    "alter",
    "create",
    "truncate",
    "rename",
    "replace",
    "grant",
    "revoke",
    "shutdown",
    "process",
    "into outfile",
    "into dumpfile",
)

# MySQL functions that read files, stall the server, or leak data through
# error messages, even inside a plain SELECT.
DANGEROUS_FUNCTIONS: tuple[str, ...] = (
    "sleep",
    "benchmark",
    "load_file",
    "load data",
    "sys_eval",
    "extractvalue",
    "updatexml",
)


def word_pattern(term: str) -> re.Pattern[str]:
    """Whole-word, case-insensitive pattern; multi-word terms allow any whitespace."""
    body = r"\s+".join(re.escape(word) for word in term.split())
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


FORBIDDEN_KEYWORD_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (keyword, word_pattern(keyword)) for keyword in FORBIDDEN_KEYWORDS
)

DANGEROUS_FUNCTION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (name, word_pattern(name)) for name in DANGEROUS_FUNCTIONS
)

INJECTION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (
        "tautology after OR/AND",
        re.compile(r"""\b(?:or|and)\s+['"]?\w*['"]?\s*(?:=|\bis\b)\s*['"]?\w*['"]?""", re.IGNORECASE),
    ),
    ("line comment", re.compile(r"--")),
    ("block comment", re.compile(r"/\*|\*/")),
)
