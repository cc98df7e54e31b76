"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from sqlplusfmt.text import SourceRange

Severity = Literal["error", "warning", "info"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the variable lint rules."""

    code: str
    message: str
    range: SourceRange
    severity: Severity = "error"
    category: str | None = None

    @property
    def line(self) -> int:
        return self.range.line

    @property
    def column(self) -> int:
        return self.range.column

    @property
    def end_line(self) -> int:
        return self.range.end_line

    @property
    def end_column(self) -> int:
        return self.range.end_column
