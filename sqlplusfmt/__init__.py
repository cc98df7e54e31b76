"""Formatter and variable diagnostics for Aspen SQLplus source text."""

from sqlplusfmt.diagnostics import Diagnostic, Severity
from sqlplusfmt.format import FormatOptions, IndentStyle
from sqlplusfmt.lint import DeclaredVariable
from sqlplusfmt.pipeline import (
    CheckRunResult,
    FormatRunResult,
    LintRunResult,
    analyze,
    format_text,
    render,
    run_check,
    run_format,
    run_lint,
)

__all__ = [
    "CheckRunResult",
    "DeclaredVariable",
    "Diagnostic",
    "FormatOptions",
    "FormatRunResult",
    "IndentStyle",
    "LintRunResult",
    "Severity",
    "analyze",
    "format_text",
    "render",
    "run_check",
    "run_format",
    "run_lint",
]
