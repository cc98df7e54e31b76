"""Diagnostics."""

from sqlplusfmt.diagnostics.codes import (
    DUPLICATE_VARIABLE,
    UNUSED_VARIABLE,
    DiagnosticSpec,
)
from sqlplusfmt.diagnostics.diagnostic import Diagnostic, Severity
from sqlplusfmt.diagnostics.report import (
    collect_diagnostics,
    has_errors,
    render_diagnostic,
    render_diagnostics,
)

__all__ = [
    "DUPLICATE_VARIABLE",
    "UNUSED_VARIABLE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "render_diagnostic",
    "render_diagnostics",
]
