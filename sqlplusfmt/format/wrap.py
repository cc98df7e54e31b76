"""Greedy wrapping of over-long lines at clause boundaries."""

from __future__ import annotations

import logging
from typing import Final

logger = logging.getLogger(__name__)

# Tried in this order; the first marker found inside the width wins.
CLAUSE_BREAKS: Final[tuple[str, ...]] = (
    " SELECT ",
    " FROM ",
    " WHERE ",
    " GROUP BY ",
    " ORDER BY ",
    " HAVING ",
    " LIMIT ",
    " OFFSET ",
    " JOIN ",
    " INNER JOIN ",
    " LEFT JOIN ",
)


def find_split(rest: str, width: int) -> int:
    """Return the offset at which `rest` should be cut to respect `width`."""
    for marker in CLAUSE_BREAKS:
        # Only the first occurrence of each marker is considered.
        position = rest.find(marker)
        if 0 < position < width:
            return position

    comma = rest.rfind(",", 0, width)
    if comma >= 0:
        return comma + 1

    return width


def wrap_line(line: str, *, width: int, indent_unit: str) -> str:
    """Split `line` into a head and indented continuation lines joined by `\\n`.

    Markers are matched case-sensitively, so clause splits only apply once
    keywords are uppercase; otherwise the comma and hard-cut fallbacks apply.
    """
    if len(line) <= width:
        return line

    segments: list[str] = []
    rest = line
    while len(rest) > width:
        index = find_split(rest, width)
        head, tail = rest[:index], rest[index:]
        if not segments:
            segments.append(head.rstrip())
        else:
            segments.append(indent_unit + head.strip())
        rest = tail.strip()

    if rest:
        segments.append(indent_unit + rest)

    logger.debug("wrapped %d-character line into %d segments", len(line), len(segments))
    return "\n".join(segments)
