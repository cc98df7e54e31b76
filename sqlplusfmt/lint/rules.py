"""Lint rules and rule contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re
from typing import Literal, Protocol, TypeAlias

from sqlplusfmt.diagnostics import (
    DUPLICATE_VARIABLE,
    UNUSED_VARIABLE,
    Diagnostic,
    DiagnosticSpec,
)
from sqlplusfmt.lint.variables import (
    DeclaredVariable,
    count_occurrences,
    group_declarations,
)

LintDomain: TypeAlias = Literal["semantic", "style", "heuristic"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]

_CODE_PATTERN = re.compile(r"[a-z]+(?:-[a-z]+)*")


class LintRule(Protocol):
    """Variable lint rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, declarations: Sequence[DeclaredVariable], text: str) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class DuplicateVariableRule:
    """Flags every declaration of a name after its first, ignoring case."""

    code: str = DUPLICATE_VARIABLE.code
    name: str = "duplicateVariable"
    category: str = "variables"
    domain: LintDomain = "semantic"
    confidence: LintConfidence = "policy"

    def run(self, declarations: Sequence[DeclaredVariable], text: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for group in group_declarations(declarations).values():
            for declaration in group[1:]:
                diagnostics.append(_diagnostic_for(DUPLICATE_VARIABLE, declaration))
        return diagnostics


@dataclass(frozen=True, slots=True)
class UnusedVariableRule:
    """Flags declarations whose name never appears beyond its declarations.

    Usage is decided per name: a name counts as used only when its whole-word
    occurrences outnumber its declarations, and every declaration of that name
    shares the verdict. Occurrences inside strings and comments count.
    """

    code: str = UNUSED_VARIABLE.code
    name: str = "unusedVariable"
    category: str = "variables"
    domain: LintDomain = "heuristic"
    confidence: LintConfidence = "heuristic"

    def run(self, declarations: Sequence[DeclaredVariable], text: str) -> list[Diagnostic]:
        declaration_counts = {key: len(group) for key, group in group_declarations(declarations).items()}
        used: dict[str, bool] = {}
        diagnostics: list[Diagnostic] = []
        for declaration in declarations:
            if declaration.key not in used:
                occurrences = count_occurrences(text, declaration.name)
                used[declaration.key] = occurrences > declaration_counts[declaration.key]
            if not used[declaration.key]:
                diagnostics.append(_diagnostic_for(UNUSED_VARIABLE, declaration))
        return diagnostics


def default_lint_rules() -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        DuplicateVariableRule(),
        UnusedVariableRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: Sequence[LintRule]) -> None:
    allowed_domains = {"semantic", "style", "heuristic"}
    allowed_confidence = {"policy", "heuristic"}
    seen_codes: set[str] = set()
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected semantic/style/heuristic."
            )
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not _CODE_PATTERN.fullmatch(rule.code):
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected kebab-case."
            )
        if rule.code in seen_codes:
            raise ValueError(f"Lint rule code `{rule.code}` is registered more than once.")
        seen_codes.add(rule.code)


def _diagnostic_for(spec: DiagnosticSpec, declaration: DeclaredVariable) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.format_message(name=declaration.name),
        range=declaration.range,
        severity=spec.severity,
        category=spec.category,
    )
