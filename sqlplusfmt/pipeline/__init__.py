"""Run result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from sqlplusfmt.pipeline.results import CheckRunResult, FormatRunResult, LintRunResult

if TYPE_CHECKING:
    from sqlplusfmt.diagnostics import Diagnostic
    from sqlplusfmt.format.options import FormatOptions
    from sqlplusfmt.lint.rules import LintRule


def run_format(text: str, options: FormatOptions | None = None) -> FormatRunResult:
    from sqlplusfmt.pipeline.entrypoints import run_format as _run_format

    return _run_format(text, options)


def run_lint(text: str, *, rules: Sequence[LintRule] | None = None) -> LintRunResult:
    from sqlplusfmt.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, rules=rules)


def run_check(text: str, options: FormatOptions | None = None) -> CheckRunResult:
    from sqlplusfmt.pipeline.entrypoints import run_check as _run_check

    return _run_check(text, options)


def format_text(text: str, options: FormatOptions | None = None) -> str:
    from sqlplusfmt.pipeline.entrypoints import format_text as _format_text

    return _format_text(text, options)


def analyze(text: str) -> list[Diagnostic]:
    from sqlplusfmt.pipeline.entrypoints import analyze as _analyze

    return _analyze(text)


def render(diagnostics: Iterable[Diagnostic]) -> str:
    from sqlplusfmt.pipeline.entrypoints import render as _render

    return _render(diagnostics)


__all__ = [
    "CheckRunResult",
    "FormatRunResult",
    "LintRunResult",
    "analyze",
    "format_text",
    "render",
    "run_check",
    "run_format",
    "run_lint",
]
