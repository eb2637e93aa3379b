"""
Serialization helpers for check Reports.

Provides JSON/YAML output via an intermediate dict representation.
Sensitive values are masked exactly as the console reporter masks them,
so no output format leaks secrets.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from envroulette.analyzer import confidence_score
from envroulette.model import Issue, Report, Variable
from envroulette.reporter import mask_value


def variable_to_dict(v: Variable) -> Dict[str, Any]:
    return {"key": v.key, "value": mask_value(v), "line": v.line}


def issue_to_dict(i: Issue) -> Dict[str, Any]:
    return {
        "message": i.message,
        "line": i.line,
        "kind": i.kind.value,
        "key": i.key,
        "severity": i.severity.value,
    }


def report_to_dict(r: Report) -> Dict[str, Any]:
    return {
        "source": r.source,
        "variables": [variable_to_dict(v) for v in r.variables],
        "issues": [issue_to_dict(i) for i in r.issues],
        "confidence": confidence_score(len(r.issues)),
    }


def report_to_json(r: Report) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True, ensure_ascii=False)


def report_to_yaml(r: Report) -> str:
    return yaml.safe_dump(report_to_dict(r), sort_keys=False, allow_unicode=True)


__all__ = [
    "issue_to_dict",
    "report_to_dict",
    "report_to_json",
    "report_to_yaml",
    "variable_to_dict",
]
