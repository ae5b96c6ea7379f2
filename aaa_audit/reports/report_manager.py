from __future__ import annotations

import logging
from typing import Any, Dict, List

from aaa_audit.app.errors import InvalidRequestError, ReportNotFoundError
from aaa_audit.core.clock import utc_now
from aaa_audit.core.hashing import sha256_of_json
from aaa_audit.core.ids import new_report_id
from aaa_audit.db.repositories import ReportRepo
from aaa_audit.db.schemas import StoredReport, StoredReportSummary
from aaa_audit.reports.report_builder import build_report_doc

logger = logging.getLogger(__name__)

MAX_LIST_LIMIT = 100


class ReportManager:
    """
    Content-addressed report storage: a report is identified by the
    sha256 of its canonical JSON, so the hash doubles as a tamper check.
    """

    def __init__(self, repo: ReportRepo):
        self.repo = repo

    def store(self, report: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(report, dict) or not report:
            raise InvalidRequestError("Report data is required")

        content_hash = sha256_of_json(report)
        existing = self.repo.get_by_hash(content_hash)
        if existing is None:
            doc = build_report_doc(report, report_id=new_report_id(), content_hash=content_hash, created_at=utc_now())
            created = self.repo.insert_report(doc)
            if created:
                logger.info("Stored report", extra={"ctx": {"content_hash": content_hash}})
                existing = doc
            else:
                # lost an insert race; the other writer's document wins
                existing = self.repo.get_by_hash(content_hash)
        else:
            created = False

        record = StoredReportSummary.model_validate(existing)
        return {"created": created, **_summary_json(record)}

    def get(self, content_hash: str) -> Dict[str, Any]:
        doc = self.repo.get_by_hash(content_hash)
        if doc is None:
            raise ReportNotFoundError(f"Report not found: {content_hash}")
        record = StoredReport.model_validate(doc)
        return {**_summary_json(record), "report": record.report}

    def list_reports(self, limit: int = 20) -> List[Dict[str, Any]]:
        limit = max(1, min(int(limit), MAX_LIST_LIMIT))
        return [_summary_json(StoredReportSummary.model_validate(d)) for d in self.repo.list_recent(limit)]

    def verify(self, content_hash: str, report: Dict[str, Any]) -> Dict[str, Any]:
        stored = self.repo.get_by_hash(content_hash)
        if stored is None:
            raise ReportNotFoundError(f"Report not found: {content_hash}")
        actual = sha256_of_json(report)
        verified = actual == content_hash
        logger.info("Verified report", extra={"ctx": {"content_hash": content_hash, "verified": verified}})
        return {"verified": verified, "contentHash": content_hash, "computedHash": actual}


def _summary_json(record: StoredReportSummary) -> Dict[str, Any]:
    return {
        "reportId": record.report_id,
        "contentHash": record.content_hash,
        "createdAt": record.created_at.isoformat(),
        "wcagLevel": record.wcag_level,
        "title": record.title,
        "status": record.status,
        "compliancePercentage": record.compliance_percentage,
    }
