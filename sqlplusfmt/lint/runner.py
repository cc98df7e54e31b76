"""Lint runner over the raw source text."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from sqlplusfmt.diagnostics import Diagnostic, collect_diagnostics
from sqlplusfmt.lint.rules import (
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from sqlplusfmt.lint.variables import extract_declarations
from sqlplusfmt.pipeline.results import LintRunResult

logger = logging.getLogger(__name__)


def run_lint(text: str, *, rules: Sequence[LintRule] | None = None) -> LintRunResult:
    """Extract declarations once and run every rule over them.

    Diagnostics keep rule order, then each rule's emission order; they are not
    sorted by position.
    """
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules()
    validate_lint_rules(resolved_rules)

    declarations = extract_declarations(text)
    groups: list[list[Diagnostic]] = []
    for rule in resolved_rules:
        emitted = rule.run(declarations, text)
        logger.debug("rule %s emitted %d diagnostics", rule.name, len(emitted))
        groups.append(emitted)

    return LintRunResult(
        source_text=text,
        declarations=declarations,
        diagnostics=collect_diagnostics(*groups),
    )
