"""Variable declaration extraction."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
import re
from typing import Final, Literal, TypeAlias

from sqlplusfmt.text import SourceRange, split_lines

logger = logging.getLogger(__name__)

DeclarationKind: TypeAlias = Literal["DECLARE", "SET", "LOCAL"]

DECLARATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(DECLARE|SET|LOCAL)\s+([a-zA-Z_][a-zA-Z0-9_]*)",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class DeclaredVariable:
    """One `DECLARE`/`SET`/`LOCAL` occurrence found in the source.

    `end_column` is the identifier's exclusive end offset plus one, so it points
    one column past the usual exclusive end. Editors consuming the rendered
    output rely on this value.
    """

    name: str
    declaration_kind: DeclarationKind
    line: int
    column: int
    end_column: int

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def range(self) -> SourceRange:
        return SourceRange.on_line(self.line, self.column, self.end_column)


def extract_declarations(text: str) -> list[DeclaredVariable]:
    declarations: list[DeclaredVariable] = []
    for line_number, line in enumerate(split_lines(text), start=1):
        for match in DECLARATION_PATTERN.finditer(line):
            declarations.append(
                DeclaredVariable(
                    name=match.group(2),
                    declaration_kind=match.group(1).upper(),  # type: ignore[arg-type]
                    line=line_number,
                    column=match.start(2) + 1,
                    end_column=match.end(2) + 1,
                )
            )
    logger.debug("extracted %d declarations", len(declarations))
    return declarations


def group_declarations(declarations: Iterable[DeclaredVariable]) -> dict[str, list[DeclaredVariable]]:
    """Group by lowercase name, keeping first-seen name order and extraction order."""
    grouped: dict[str, list[DeclaredVariable]] = {}
    for declaration in declarations:
        grouped.setdefault(declaration.key, []).append(declaration)
    return grouped


def count_occurrences(text: str, name: str) -> int:
    """Count case-insensitive whole-word matches of `name` anywhere in `text`."""
    pattern = re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE)
    return sum(1 for _ in pattern.finditer(text))
