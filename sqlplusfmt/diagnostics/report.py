"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from sqlplusfmt.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(diagnostic: Diagnostic) -> str:
    """Render as `<line>:<column>:<end_column>: <severity>: <message> [<code>]`."""
    return (
        f"{diagnostic.line}:{diagnostic.column}:{diagnostic.end_column}: "
        f"{diagnostic.severity}: {diagnostic.message} [{diagnostic.code}]"
    )


def render_diagnostics(diagnostics: Iterable[Diagnostic]) -> str:
    """Render one newline-terminated line per diagnostic, in list order."""
    return "".join(f"{render_diagnostic(diagnostic)}\n" for diagnostic in diagnostics)
