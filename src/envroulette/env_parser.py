"""
Environment File Parser (Raw Text → Variables and Issues).

Line format:
    KEY=VALUE
    KEY=
    KEY

Syntax Notes:
    - Keys match [A-Z_][A-Z0-9_]* (upper case only)
    - Everything after the first '=' is the value, verbatim
    - A bare KEY is the same as KEY=
    - Blank lines and lines starting with '#' are skipped
    - No quoting, escaping, interpolation or 'export' prefixes

Lines that do not fit the format become UNPARSABLE issues; parsing always
continues with the next line.
"""

import logging
import re
from pathlib import Path
from typing import List, Tuple, Union

from envroulette.analyzer import analyze_variable
from envroulette.model import Issue, IssueKind, Variable

logger = logging.getLogger(__name__)

ASSIGNMENT_PATTERN = re.compile(r'^([A-Z_][A-Z0-9_]*)(?:=(.*))?$')


class EnvReadError(Exception):
    """Raised when a located environment file cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Can't read {path}: {reason}")


def _is_skippable(line: str) -> bool:
    return not line or line.startswith("#")


def parse_env_string(content: str) -> Tuple[List[Variable], List[Issue]]:
    """
    Parse environment file content.

    Issues for a line are emitted as soon as the line is handled, so the
    issue list is in line order: either one UNPARSABLE issue, or the
    analyzer warnings for the variable on that line.

    Args:
        content: Whole file content

    Returns:
        (variables, issues), both in file order
    """
    variables: List[Variable] = []
    issues: List[Issue] = []

    for line_no, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if _is_skippable(line):
            continue

        match = ASSIGNMENT_PATTERN.match(line)
        if match is None:
            issues.append(Issue(
                message=f'❌ Line {line_no}: Can\'t parse "{line}". Is this even English?',
                line=line_no,
                kind=IssueKind.UNPARSABLE,
            ))
            continue

        var = Variable(key=match.group(1), value=match.group(2) or "", line=line_no)
        variables.append(var)
        issues.extend(analyze_variable(var))

    logger.debug("Parsed %d variables with %d issues", len(variables), len(issues))
    return variables, issues


def read_env_file(filepath: Union[str, Path]) -> str:
    """
    Read an environment file as UTF-8 text, dropping a leading BOM.

    Raises:
        EnvReadError: If the file vanished, is unreadable or is not UTF-8
    """
    filepath = Path(filepath)
    try:
        return filepath.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise EnvReadError(str(filepath), str(e)) from e


def parse_env_file(filepath: Union[str, Path]) -> Tuple[List[Variable], List[Issue]]:
    """
    Read and parse an environment file.

    Raises:
        EnvReadError: If the file cannot be read
    """
    return parse_env_string(read_env_file(filepath))


__all__ = [
    "ASSIGNMENT_PATTERN",
    "EnvReadError",
    "parse_env_file",
    "parse_env_string",
    "read_env_file",
]
