from __future__ import annotations

from typing import Any, Dict, List

from aaa_audit.core.clock import utc_now_iso
from aaa_audit.core.utils import dedupe, ensure_list

MAX_NEXT_STEPS = 4


def _pick_next_steps(outputs: Dict[str, Any]) -> List[str]:
    """
    Deterministic next steps based on the issue codes found.
    """
    compliance = outputs.get("compliance", {}) or {}
    codes = {i.get("code") for i in ensure_list(compliance.get("issues")) if i.get("severity") != "info"}

    steps: List[str] = []
    if "CONTRAST_INSUFFICIENT" in codes:
        steps.append("Apply the suggested foreground colors to reach the required contrast ratio.")
    if codes & {"ALT_MISSING", "ALT_EMPTY"}:
        steps.append("Add descriptive alt text to informative images.")
    if "ALT_DECORATIVE_NOT_EMPTY" in codes:
        steps.append("Use empty alt text (alt=\"\") on decorative images.")
    if codes & {"ARIA_BUTTON_KEYBOARD", "ARIA_ROLE_MISSING", "ARIA_NAME_MISSING"}:
        steps.append("Give interactive elements an accessible name, role and keyboard support.")
    if codes & {"SECTION_HEADING_MISSING", "LIST_MARKUP_MISSING", "HEADING_LEVEL_SKIPPED"}:
        steps.append("Fix the document structure: headings in order, real list markup, labelled sections.")
    if "STATUS_MESSAGE_NOT_LIVE" in codes:
        steps.append("Announce status messages with role=\"status\" or aria-live.")
    if "READING_LEVEL_TOO_HIGH" in codes:
        steps.append("Simplify the text to a lower secondary reading level.")
    if "ABBREVIATION_UNEXPANDED" in codes:
        steps.append("Expand abbreviations on first use.")

    return dedupe(steps)[:MAX_NEXT_STEPS]


def run_summarizer_agent(state: Dict[str, Any]) -> Dict[str, Any]:
    """
    Produces the user-facing summary.message and next_steps.
    """
    outputs = state.get("outputs", {}) or {}
    compliance = outputs.get("compliance", {}) or {}
    status = state.get("status") or compliance.get("status", "UNKNOWN")

    counts = compliance.get("counts", {}) or {}
    pct = compliance.get("compliancePercentage")
    level = compliance.get("level") or state.get("level", "AAA")

    if status == "PASS":
        msg = f"No blocking issues found; content meets the checked WCAG 2.1 {level} criteria."
    elif status == "WARN":
        msg = f"{counts.get('warning', 0)} warning(s) to review against WCAG 2.1 {level} ({pct}% of checked criteria pass)."
    elif status == "FAIL":
        msg = (
            f"{counts.get('error', 0)} error(s) and {counts.get('warning', 0)} warning(s) block WCAG 2.1 {level} "
            f"conformance ({pct}% of checked criteria pass)."
        )
    else:
        msg = f"Audit completed with status={status}."

    remediation = outputs.get("remediation", {}) or {}
    if remediation.get("total"):
        msg += f" {remediation['total']} fix(es) suggested."

    outputs["summary"] = {
        "message": msg,
        "next_steps": _pick_next_steps(outputs),
        "summarized_at": utc_now_iso(),
    }
    state["outputs"] = outputs

    pipeline = state.get("pipeline", {}) or {}
    routing = pipeline.get("routing", {}) or {}
    routing["summarizer"] = "OK"
    pipeline["routing"] = routing
    state["pipeline"] = pipeline

    return state
