from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional
from dataclasses import dataclass


Severity = Literal["info", "warning", "error"]


@dataclass
class Issue:
    code: str
    severity: Severity
    message: str
    element: Optional[str] = None
    wcag_criteria: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None


def issues_to_dict(issues: List[Issue]) -> List[Dict[str, Any]]:
    return [
        {
            "code": i.code,
            "severity": i.severity,
            "message": i.message,
            "element": i.element,
            "wcagCriteria": i.wcag_criteria,
            "meta": i.meta or {},
        }
        for i in issues
    ]


def resolve_status(issues: List[Issue]) -> str:
    """
    PASS: no warning/error
    WARN: at least one warning but no error
    FAIL: at least one error
    """
    has_error = any(i.severity == "error" for i in issues)
    if has_error:
        return "FAIL"
    has_warn = any(i.severity == "warning" for i in issues)
    if has_warn:
        return "WARN"
    return "PASS"
