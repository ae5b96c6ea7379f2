from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, Dict
from datetime import datetime

class StoredReportSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    report_id: str = Field(alias="_id")
    content_hash: str
    created_at: datetime
    wcag_level: str = "AAA"
    title: str = ""
    status: str = "UNKNOWN"
    compliance_percentage: Optional[float] = None

class StoredReport(StoredReportSummary):
    report: Dict[str, Any] = Field(default_factory=dict)
