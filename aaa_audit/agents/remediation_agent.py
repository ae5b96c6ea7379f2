from __future__ import annotations

from typing import Any, Dict, List, Optional

from aaa_audit.core.utils import ensure_list
from aaa_audit.tools.text.simplify import simplify_with_dictionary

ACTIONABLE = {"warning", "error"}


def _fix_for(issue: Dict[str, Any], text: str) -> Optional[Dict[str, Any]]:
    code = issue.get("code") or ""
    meta = issue.get("meta") or {}
    fix: Dict[str, Any] = {
        "issueCode": code,
        "element": issue.get("element"),
        "wcagCriteria": issue.get("wcagCriteria"),
    }

    if code == "CONTRAST_INSUFFICIENT":
        fix.update(
            action="replace_color",
            before=meta.get("foreground"),
            after=meta.get("suggestion"),
            background=meta.get("background"),
            ratio=meta.get("suggestedRatio"),
        )
    elif code.startswith("ALT_"):
        fix.update(action="set_alt", src=meta.get("src"), after=meta.get("suggestedAlt") or "")
    elif "suggestion" in meta:
        fix.update(action="replace_markup", before=meta.get("code"), after=meta.get("suggestion"), issueId=meta.get("id"))
    elif code == "READING_LEVEL_TOO_HIGH":
        fix.update(
            action="rewrite_text",
            recommendations=meta.get("recommendations", []),
            after=simplify_with_dictionary(text),
        )
    elif code == "ABBREVIATION_UNEXPANDED":
        fix.update(action="expand_abbreviation", context=meta.get("context"))
    else:
        return None
    return fix


def run_remediation_agent(state: Dict[str, Any]) -> Dict[str, Any]:
    """
    One concrete fix per actionable issue, in issue order.
    """
    outputs = state.get("outputs", {}) or {}
    compliance = outputs.get("compliance", {}) or {}
    issues = [i for i in ensure_list(compliance.get("issues")) if i.get("severity") in ACTIONABLE]

    text = state.get("text") or ""
    fixes: List[Dict[str, Any]] = []
    for issue in issues:
        fix = _fix_for(issue, text)
        if fix is not None:
            fixes.append(fix)

    outputs["remediation"] = {"fixes": fixes, "total": len(fixes)}
    state["outputs"] = outputs
    return state
