"""
Core Environment Check Model Objects

Defines the data structures that flow through the check pipeline.

These are pure data classes representing:
    - Variables (parsed KEY=VALUE assignments)
    - Issues (non-fatal diagnostics)
    - Reports (root container for one run)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about files, consoles or output formats
        - Live for a single invocation only
        - Represent results, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Severity(Enum):
    """How serious an issue is. Every issue in this tool is a warning."""
    WARNING = "warning"


class IssueKind(Enum):
    """Which check produced an issue."""
    UNPARSABLE = "unparsable"
    EMPTY_VALUE = "empty_value"
    EMBEDDED_SPACE = "embedded_space"
    WEAK_SECRET = "weak_secret"


@dataclass
class Variable:
    """
    A single assignment found in an environment file.

    Properties:
        key: Identifier matching [A-Z_][A-Z0-9_]* (e.g., "DATABASE_URL")
        value: Everything after the first '=', verbatim (may be empty)
        line: 1-based line number in the source file

    Duplicate keys are kept as separate Variables in declaration order.
    """

    key: str
    value: str
    line: int


@dataclass
class Issue:
    """
    A diagnostic produced while parsing or analyzing a line.

    Properties:
        message: Human-readable text, already formatted for display
        line: 1-based line number the issue refers to
        kind: Which check produced it
        key: Variable key, when the line parsed (None for unparsable lines)
        severity: Always WARNING; issues never abort a run
    """

    message: str
    line: int
    kind: IssueKind
    key: Optional[str] = None
    severity: Severity = Severity.WARNING


@dataclass
class Report:
    """
    Result of checking one environment file.

    The confidence score is derived from the issue count at render time
    (see analyzer.confidence_score) and is never stored.
    """

    source: str
    variables: List[Variable] = field(default_factory=list)
    issues: List[Issue] = field(default_factory=list)

    def issues_for_line(self, line: int) -> List[Issue]:
        """Return every issue attached to a given source line."""
        return [issue for issue in self.issues if issue.line == line]

    def get_variables(self, key: str) -> List[Variable]:
        """Return all declarations of a key, in file order."""
        return [var for var in self.variables if var.key == key]
