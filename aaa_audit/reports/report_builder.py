from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from aaa_audit.agents.state import AuditState


def build_report(state: AuditState) -> Dict[str, Any]:
    """
    Public audit report built from the final graph state.
    This is the document that gets hashed and stored.
    """
    outputs = state.outputs
    compliance = outputs.compliance or {}
    return {
        "auditId": state.audit_id,
        "title": state.title,
        "createdAt": state.created_at,
        "wcagLevel": state.level,
        "status": state.status,
        "summary": outputs.summary,
        "compliance": {
            "policy": compliance.get("policy"),
            "compliancePercentage": compliance.get("compliancePercentage"),
            "criteria": compliance.get("criteria", []),
            "counts": compliance.get("counts", {}),
            "issues": compliance.get("issues", []),
        },
        "findings": {
            "contrast": outputs.contrast,
            "altText": outputs.alt_text,
            "aria": outputs.aria,
            "readability": outputs.readability,
        },
        "remediation": outputs.remediation,
        "pipeline": state.pipeline.model_dump(),
    }


def build_report_doc(
    report: Dict[str, Any],
    *,
    report_id: str,
    content_hash: str,
    created_at: datetime,
) -> Dict[str, Any]:
    """
    Build a MongoDB report document. One stored report per content hash.
    """
    compliance = report.get("compliance") or {}
    return {
        "_id": report_id,
        "content_hash": content_hash,
        "created_at": created_at,
        "wcag_level": report.get("wcagLevel") or "AAA",
        "title": report.get("title") or "",
        "status": report.get("status") or "UNKNOWN",
        "compliance_percentage": compliance.get("compliancePercentage"),
        "report": report,
    }
