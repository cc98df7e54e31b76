"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlplusfmt.diagnostics import Diagnostic, has_errors

if TYPE_CHECKING:
    from sqlplusfmt.format.options import FormatOptions
    from sqlplusfmt.lint.variables import DeclaredVariable


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of one formatting run."""

    source_text: str
    formatted_text: str
    options: FormatOptions
    changed: bool


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running the variable lint rules over one source text."""

    source_text: str
    declarations: list[DeclaredVariable]
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of running formatting and linting over the same source text."""

    format: FormatRunResult
    lint: LintRunResult
    has_errors: bool

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.lint.diagnostics
