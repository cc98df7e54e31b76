"""Per-line whitespace normalization."""

from __future__ import annotations

import re
from typing import Final

COMMA_PATTERN: Final[re.Pattern[str]] = re.compile(r",\s*")
OPERATOR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s*([=<>!]+)\s*")


def normalize_line(line: str) -> str:
    """Trim a physical line, then space commas and comparison operator runs.

    The rewrite is purely textual: commas and operators inside quoted strings
    are respaced too.
    """
    normalized = line.strip()
    normalized = COMMA_PATTERN.sub(", ", normalized)
    normalized = OPERATOR_PATTERN.sub(r" \1 ", normalized)
    return normalized
