"""Variable declaration lint pipeline."""

from sqlplusfmt.lint.rules import (
    DuplicateVariableRule,
    LintRule,
    UnusedVariableRule,
    default_lint_rules,
    validate_lint_rules,
)
from sqlplusfmt.lint.runner import run_lint
from sqlplusfmt.lint.variables import (
    DECLARATION_PATTERN,
    DeclaredVariable,
    count_occurrences,
    extract_declarations,
    group_declarations,
)

__all__ = [
    "DECLARATION_PATTERN",
    "DeclaredVariable",
    "DuplicateVariableRule",
    "LintRule",
    "UnusedVariableRule",
    "count_occurrences",
    "default_lint_rules",
    "extract_declarations",
    "group_declarations",
    "run_lint",
    "validate_lint_rules",
]
