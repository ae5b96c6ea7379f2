from __future__ import annotations
from typing import Any, Dict

ACTIONABLE = {"warning", "error"}


def _has_html(state: Dict[str, Any]) -> bool:
    return bool((state.get("html") or "").strip())


def route_after_intake(state: Dict[str, Any]) -> str:
    """HTML goes through the DOM checks first; plain text skips straight to readability."""
    return "contrast" if _has_html(state) else "readability"


def _actionable_issue_count(state: Dict[str, Any]) -> int:
    outputs = state.get("outputs") or {}
    compliance = outputs.get("compliance") or {}
    issues = compliance.get("issues") or []
    return sum(1 for i in issues if (i.get("severity") or "") in ACTIONABLE)


def route_after_compliance(state: Dict[str, Any]) -> str:
    """
    - remediation disabled or nothing actionable -> "summarizer"
    - otherwise -> "remediation"
    """
    if not state.get("remediate", True):
        return "summarizer"
    if _actionable_issue_count(state) == 0:
        return "summarizer"
    return "remediation"
