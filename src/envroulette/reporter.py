"""
Console reporter for environment check results.

Renders a Report as human-readable text:
    - Variable listing (sensitive values masked)
    - Issues section
    - Confidence score
"""

import sys
from typing import List, Optional, TextIO

from envroulette.analyzer import confidence_score
from envroulette.model import Report, Variable

MASK = "********"
SENSITIVE_MARKERS = ("SECRET", "KEY")


def is_sensitive(key: str) -> bool:
    return any(marker in key for marker in SENSITIVE_MARKERS)


def mask_value(var: Variable) -> str:
    """Value to display for a variable; sensitive keys always show the mask."""
    if is_sensitive(var.key):
        return MASK
    return var.value


def render(report: Report) -> str:
    """Build the full text report."""
    lines: List[str] = []

    lines.append(f"📊 Found {len(report.variables)} environment variables:")
    for var in report.variables:
        lines.append(f"   {var.key}={mask_value(var)}")

    lines.append("")
    lines.append("🔍 Issues found:")
    if not report.issues:
        lines.append("   🎉 None! Your config is... suspiciously perfect. Did you cheat?")
    else:
        for issue in report.issues:
            lines.append(f"   {issue.message}")
        lines.append("")
        lines.append(f"💀 Found {len(report.issues)} potential issues. Good luck with that!")

    score = confidence_score(len(report.issues))
    lines.append("")
    lines.append(f"🎲 Roulette complete! Your app has a {score}% chance of working. Probably.")

    return "\n".join(lines)


def print_report(report: Report, stream: Optional[TextIO] = None) -> None:
    """Write the rendered report to `stream` (standard output by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(render(report) + "\n")


__all__ = ["MASK", "SENSITIVE_MARKERS", "is_sensitive", "mask_value", "render", "print_report"]
