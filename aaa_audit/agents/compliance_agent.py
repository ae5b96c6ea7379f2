from __future__ import annotations

from typing import Any, Dict, List

from aaa_audit.core.clock import utc_now_iso
from aaa_audit.core.policies import ConformancePolicy, policy_for_level
from aaa_audit.tools.checks.issues import Issue, issues_to_dict, resolve_status

NON_TEXT_CONTENT = "1.1.1 Non-text Content (A)"
INFO_AND_RELATIONSHIPS = "1.3.1 Info and Relationships (A)"
NAME_ROLE_VALUE = "4.1.2 Name, Role, Value (A)"
STATUS_MESSAGES = "4.1.3 Status Messages (AA)"
UNUSUAL_WORDS = "3.1.3 Unusual Words (AAA)"
ABBREVIATIONS = "3.1.4 Abbreviations (AAA)"
READING_LEVEL = "3.1.5 Reading Level (AAA)"
PRONUNCIATION = "3.1.6 Pronunciation (AAA)"

# issue id prefix -> issue code
ARIA_CODES = {
    "aria-button": "ARIA_BUTTON_KEYBOARD",
    "aria-role": "ARIA_ROLE_MISSING",
    "aria-name": "ARIA_NAME_MISSING",
    "semantic-section": "SECTION_HEADING_MISSING",
    "semantic-list": "LIST_MARKUP_MISSING",
    "semantic-heading": "HEADING_LEVEL_SKIPPED",
    "status-message": "STATUS_MESSAGE_NOT_LIVE",
}


def _aria_code(issue_id: str) -> str:
    prefix = issue_id.rsplit("-", 1)[0]
    return ARIA_CODES.get(prefix, "ARIA_ISSUE")


def checked_criteria(policy: ConformancePolicy, has_html: bool) -> List[str]:
    """WCAG criteria this audit actually evaluates for the given input."""
    criteria: List[str] = []
    if has_html:
        criteria += [
            policy.contrast_criterion,
            NON_TEXT_CONTENT,
            INFO_AND_RELATIONSHIPS,
            NAME_ROLE_VALUE,
            STATUS_MESSAGES,
        ]
    if policy.level == "AAA":
        criteria += [UNUSUAL_WORDS, ABBREVIATIONS, READING_LEVEL, PRONUNCIATION]
    return criteria


def contrast_issues(contrast: Dict[str, Any]) -> List[Issue]:
    return [
        Issue(
            code="CONTRAST_INSUFFICIENT",
            severity="error",
            message=f"Contrast {c['ratio']}:1 is below the required {c['required']}:1",
            element=c.get("element"),
            wcag_criteria=c.get("wcagCriteria"),
            meta={
                "foreground": c.get("foreground"),
                "background": c.get("background"),
                "suggestion": c.get("suggestion"),
                "suggestedRatio": c.get("suggestedRatio"),
            },
        )
        for c in contrast.get("issues", []) or []
    ]


def alt_text_issues(alt_text: Dict[str, Any]) -> List[Issue]:
    issues: List[Issue] = []
    for img in alt_text.get("images", []) or []:
        element = f"img[src=\"{img.get('src')}\"]"
        meta = {"imageId": img.get("imageId"), "src": img.get("src"), "suggestedAlt": img.get("suggestedAlt")}
        if not img.get("hasAlt"):
            issues.append(Issue("ALT_MISSING", "error", "Image has no alt attribute", element, NON_TEXT_CONTENT, meta))
        elif img.get("isLikelyDecorative") and not img.get("isEmpty"):
            issues.append(
                Issue("ALT_DECORATIVE_NOT_EMPTY", "warning", "Decorative image should have empty alt text", element, NON_TEXT_CONTENT, meta)
            )
        elif img.get("isEmpty"):
            issues.append(Issue("ALT_EMPTY", "error", "Informative image has empty alt text", element, NON_TEXT_CONTENT, meta))
    return issues


def aria_issues(aria: Dict[str, Any]) -> List[Issue]:
    return [
        Issue(
            code=_aria_code(a["id"]),
            severity=a["severity"],
            message=a["issue"],
            element=a.get("element"),
            wcag_criteria=a.get("wcagCriteria"),
            meta={"id": a["id"], "code": a.get("code"), "suggestion": a.get("suggestion")},
        )
        for a in aria.get("issues", []) or []
    ]


def readability_issues(readability: Dict[str, Any], policy: ConformancePolicy) -> List[Issue]:
    if not readability or policy.level != "AAA":
        return []

    issues: List[Issue] = []
    if readability.get("words", 0) and not readability.get("meetsWcagAAA", True):
        issues.append(
            Issue(
                code="READING_LEVEL_TOO_HIGH",
                severity="warning",
                message=f"Reading ease {readability.get('fleschKincaidScore')} is below {policy.readability_min_score}",
                wcag_criteria=READING_LEVEL,
                meta={
                    "readingLevel": readability.get("readingLevel"),
                    "recommendations": readability.get("recommendations", []),
                },
            )
        )

    for abbr in readability.get("abbreviations", []) or []:
        if abbr.get("needsExpansion"):
            issues.append(
                Issue(
                    code="ABBREVIATION_UNEXPANDED",
                    severity="warning",
                    message=f"Abbreviation {abbr['abbreviation']} has no known expansion",
                    wcag_criteria=ABBREVIATIONS,
                    meta={"context": abbr.get("context")},
                )
            )

    for word in readability.get("unusualWords", []) or []:
        issues.append(
            Issue(
                code="UNUSUAL_WORD",
                severity="info",
                message=f"Consider defining \"{word['word']}\": {word['definition']}",
                wcag_criteria=UNUSUAL_WORDS,
                meta={"context": word.get("context")},
            )
        )

    for entry in readability.get("pronunciation", []) or []:
        issues.append(
            Issue(
                code="PRONUNCIATION_AMBIGUOUS",
                severity="info",
                message=f"\"{entry['word']}\" has more than one pronunciation",
                wcag_criteria=PRONUNCIATION,
                meta={"pronunciations": entry.get("pronunciations", [])},
            )
        )
    return issues


def evaluate_criteria(criteria: List[str], issues: List[Issue]) -> Dict[str, Any]:
    """
    A checked criterion passes unless a warning or error cites it.
    """
    failing = {i.wcag_criteria for i in issues if i.severity in {"warning", "error"} and i.wcag_criteria}
    results = [{"criterion": c, "passed": c not in failing} for c in criteria]
    passed = sum(1 for r in results if r["passed"])
    pct = round(100.0 * passed / len(results), 1) if results else 100.0
    return {
        "criteria": results,
        "evaluated": len(results),
        "passed": passed,
        "compliancePercentage": pct,
    }


def run_compliance_agent(state: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge every node's findings into uniform issues and resolve the audit status.
    """
    policy = policy_for_level(state.get("level"))
    outputs = state.get("outputs", {}) or {}
    has_html = bool((state.get("html") or "").strip())

    issues: List[Issue] = []
    issues += contrast_issues(outputs.get("contrast", {}) or {})
    issues += alt_text_issues(outputs.get("alt_text", {}) or {})
    issues += aria_issues(outputs.get("aria", {}) or {})
    issues += readability_issues(outputs.get("readability", {}) or {}, policy)

    status = resolve_status(issues)
    evaluation = evaluate_criteria(checked_criteria(policy, has_html), issues)

    counts = {"error": 0, "warning": 0, "info": 0}
    for i in issues:
        counts[i.severity] += 1

    return {
        "status": status,
        "compliance": {
            "status": status,
            "policy": policy.name,
            "level": policy.level,
            "issues": issues_to_dict(issues),
            "counts": counts,
            **evaluation,
            "checked_at": utc_now_iso(),
        },
    }
