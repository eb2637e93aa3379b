"""
Variable Analyzer: heuristic checks on parsed assignments.

Each rule looks at one Variable in isolation and may produce an Issue.
Rules are independent: a single variable can trip several of them, and
all triggered issues are reported in rule order:

    1. Empty value
    2. Embedded space in the value
    3. Weak secret (key contains SECRET, value shorter than 10 chars)

IMPORTANT: This module only reads Variables. It never rejects a line;
anything it finds is a warning.
"""

from __future__ import annotations

from typing import Iterable, List

from envroulette.model import Issue, IssueKind, Variable

SECRET_MARKER = "SECRET"
MIN_SECRET_LENGTH = 10
MIN_CONFIDENCE = 10
MAX_CONFIDENCE = 100
PENALTY_PER_ISSUE = 10


def _check_empty_value(var: Variable) -> Issue | None:
    if var.value == "":
        return Issue(
            message=f"⚠️  Line {var.line}: {var.key} has empty value. Hope that's intentional!",
            line=var.line,
            kind=IssueKind.EMPTY_VALUE,
            key=var.key,
        )
    return None


def _check_embedded_space(var: Variable) -> Issue | None:
    if " " in var.value:
        return Issue(
            message=f"⚠️  Line {var.line}: {var.key} has spaces. Quoting is for quitters!",
            line=var.line,
            kind=IssueKind.EMBEDDED_SPACE,
            key=var.key,
        )
    return None


def _check_weak_secret(var: Variable) -> Issue | None:
    if SECRET_MARKER in var.key and len(var.value) < MIN_SECRET_LENGTH:
        return Issue(
            message=f"⚠️  Line {var.line}: {var.key} looks weak. Hackers love easy mode!",
            line=var.line,
            kind=IssueKind.WEAK_SECRET,
            key=var.key,
        )
    return None


RULES = (
    _check_empty_value,
    _check_embedded_space,
    _check_weak_secret,
)


def analyze_variable(var: Variable) -> List[Issue]:
    """Run every rule against a single variable."""
    issues = []
    for rule in RULES:
        issue = rule(var)
        if issue is not None:
            issues.append(issue)
    return issues


def analyze(variables: Iterable[Variable]) -> List[Issue]:
    """
    Run every rule against every variable, in declaration order.

    Args:
        variables: Parsed variables

    Returns:
        Issues grouped by variable, rule order within a variable
    """
    issues: List[Issue] = []
    for var in variables:
        issues.extend(analyze_variable(var))
    return issues


def confidence_score(issue_count: int) -> int:
    """
    Turn an issue count into a display-only score in [10, 100].

    Zero issues scores 100; each issue costs 10 points, floored at 10.
    """
    if issue_count == 0:
        return MAX_CONFIDENCE
    return max(MIN_CONFIDENCE, MAX_CONFIDENCE - issue_count * PENALTY_PER_ISSUE)


__all__ = [
    "analyze",
    "analyze_variable",
    "confidence_score",
    "MIN_SECRET_LENGTH",
    "SECRET_MARKER",
]
