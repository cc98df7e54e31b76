"""Keyword lexicon and keyword case normalization."""

from __future__ import annotations

import re
import string
from typing import Final

# Clause, DML/DDL, type and control-flow words of the SQLplus dialect.
# Repeats are harmless; only membership matters.
KEYWORDS: Final[tuple[str, ...]] = (
    "select",
    "insert",
    "update",
    "delete",
    "from",
    "where",
    "group",
    "by",
    "order",
    "having",
    "limit",
    "offset",
    "join",
    "inner",
    "left",
    "right",
    "full",
    "outer",
    "on",
    "as",
    "and",
    "or",
    "not",
    "null",
    "is",
    "in",
    "exists",
    "case",
    "when",
    "then",
    "else",
    "end",
    "create",
    "table",
    "view",
    "function",
    "procedure",
    "if",
    "begin",
    "commit",
    "rollback",
    "union",
    "all",
    "distinct",
    "with",
    "over",
    "write",
    "partition",
    "into",
    "values",
    "return",
    "returns",
    "declare",
    "set",
    "local",
    "real",
    "integer",
    "function",
    "set",
    "write",
    "record",
    "do",
    "char",
    "abs",
    "max",
    "min",
    "timestamp",
    "update",
)


def _build_keyword_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(word) for word in dict.fromkeys(words))
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


KEYWORD_PATTERN: Final[re.Pattern[str]] = _build_keyword_pattern(KEYWORDS)


_ASCII_UPPER: Final[dict[int, int]] = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(text: str) -> str:
    """Uppercase ASCII letters only; other characters are returned unchanged."""
    return text.translate(_ASCII_UPPER)


def normalize_keywords(text: str, *, uppercase: bool = True) -> str:
    """Uppercase every whole-word keyword occurrence; a no-op when `uppercase` is false."""
    if not uppercase:
        return text
    return KEYWORD_PATTERN.sub(lambda match: ascii_upper(match.group(0)), text)
