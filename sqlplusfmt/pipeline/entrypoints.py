"""Unified entrypoints over the formatting and diagnostics pipelines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from sqlplusfmt.diagnostics import Diagnostic, render_diagnostics
from sqlplusfmt.format import FormatOptions
from sqlplusfmt.format import run_format as _run_format
from sqlplusfmt.lint import run_lint as _run_lint
from sqlplusfmt.pipeline.results import CheckRunResult, FormatRunResult, LintRunResult

if TYPE_CHECKING:
    from sqlplusfmt.lint.rules import LintRule


def run_format(text: str, options: FormatOptions | None = None) -> FormatRunResult:
    """Run the formatting pipeline over `text`."""
    return _run_format(text, options)


def run_lint(text: str, *, rules: Sequence[LintRule] | None = None) -> LintRunResult:
    """Run the variable diagnostics pipeline over `text`."""
    return _run_lint(text, rules=rules)


def run_check(text: str, options: FormatOptions | None = None) -> CheckRunResult:
    """Run both pipelines over the same input; neither sees the other's output."""
    format_result = _run_format(text, options)
    lint_result = _run_lint(text)
    return CheckRunResult(
        format=format_result,
        lint=lint_result,
        has_errors=lint_result.has_errors,
    )


def format_text(text: str, options: FormatOptions | None = None) -> str:
    return _run_format(text, options).formatted_text


def analyze(text: str) -> list[Diagnostic]:
    return _run_lint(text).diagnostics


def render(diagnostics: Iterable[Diagnostic]) -> str:
    return render_diagnostics(diagnostics)
