from __future__ import annotations
from typing import Any, Dict, Optional, List
from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from aaa_audit.app.errors import DatabaseError

# list views leave the full report body out
SUMMARY_PROJECTION = {"report": 0}

class ReportRepo:
    def __init__(self, reports: Collection):
        self.reports = reports

    def insert_report(self, doc: Dict[str, Any]) -> bool:
        """False when a report with the same content hash already exists."""
        try:
            self.reports.insert_one(doc)
        except DuplicateKeyError:
            return False
        except PyMongoError as e:
            raise DatabaseError(f"Failed to store report: {e}") from e
        return True

    def get_by_hash(self, content_hash: str) -> Optional[Dict[str, Any]]:
        try:
            return self.reports.find_one({"content_hash": content_hash})
        except PyMongoError as e:
            raise DatabaseError(f"Failed to load report: {e}") from e

    def list_recent(self, limit: int = 20) -> List[Dict[str, Any]]:
        try:
            cur = self.reports.find({}, SUMMARY_PROJECTION).sort("created_at", DESCENDING).limit(limit)
            return list(cur)
        except PyMongoError as e:
            raise DatabaseError(f"Failed to list reports: {e}") from e
