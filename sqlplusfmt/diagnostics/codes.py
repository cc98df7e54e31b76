"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from sqlplusfmt.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    severity: Severity = "error"
    category: str | None = None

    def format_message(self, **values: str) -> str:
        return self.message.format(**values)


DUPLICATE_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="duplicate-variable",
    message="Variable '{name}' has already been declared",
    severity="error",
    category="lint/variables",
)

UNUSED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unused-variable",
    message="Unused variable '{name}'",
    severity="warning",
    category="lint/variables",
)
