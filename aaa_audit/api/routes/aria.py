from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter

from aaa_audit.api.schemas import AriaFixBody, HtmlBody, require
from aaa_audit.app.errors import IssueNotFoundError
from aaa_audit.tools.checks import aria
from aaa_audit.tools.checks.dom import parse_html

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/aria", tags=["aria"])

HTML_REQUIRED = "HTML content is required"


@router.post("/validate")
def validate(body: HtmlBody) -> Dict[str, Any]:
    logger.info("Validating HTML for ARIA and semantic correctness")
    return aria.validate_html(require(body.html, HTML_REQUIRED))


@router.post("/fix")
def fix(body: AriaFixBody) -> Dict[str, Any]:
    logger.info("Suggesting fixes for ARIA and semantic issues")
    issues = aria.validate_html(require(body.html, HTML_REQUIRED))["issues"]

    if body.issue_id:
        target = aria.find_issue(issues, body.issue_id)
        if target is None:
            raise IssueNotFoundError(f"Issue with ID {body.issue_id} not found")
        issues = [target]

    fixes = [aria.generate_fix(i) for i in issues]
    logger.info("Generated %d fixes for ARIA and semantic issues", len(fixes))
    return {"fixes": fixes}


@router.post("/status-messages")
def status_messages(body: HtmlBody) -> Dict[str, Any]:
    logger.info("Checking status message implementation")
    soup = parse_html(require(body.html, HTML_REQUIRED))
    issues = aria.validate_status_messages(soup)
    return {"totalIssues": len(issues), "issues": issues}


@router.post("/semantic-structure")
def semantic_structure(body: HtmlBody) -> Dict[str, Any]:
    logger.info("Analyzing semantic structure")
    soup = parse_html(require(body.html, HTML_REQUIRED))
    issues = aria.validate_semantic_structure(soup)
    return {
        "totalIssues": len(issues),
        "issues": issues,
        "headingStructure": aria.analyze_heading_structure(soup),
        "landmarkRegions": aria.analyze_landmark_regions(soup),
    }
