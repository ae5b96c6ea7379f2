from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Literal


AuditStatus = Literal["PASS", "WARN", "FAIL", "UNKNOWN"]


class AuditOutputs(BaseModel):
    """
    Findings produced by the nodes of a single audit run.
    """
    contrast: Dict[str, Any] = Field(default_factory=dict)
    alt_text: Dict[str, Any] = Field(default_factory=dict)
    aria: Dict[str, Any] = Field(default_factory=dict)
    readability: Dict[str, Any] = Field(default_factory=dict)
    compliance: Dict[str, Any] = Field(default_factory=dict)
    remediation: Dict[str, Any] = Field(default_factory=dict)
    summary: Dict[str, Any] = Field(default_factory=dict)


class PipelineMeta(BaseModel):
    graph_version: str = "v1"
    agents_run: List[str] = Field(default_factory=list)
    timings_ms: Dict[str, int] = Field(default_factory=dict)
    routing: Dict[str, Any] = Field(default_factory=dict)


class AuditState(BaseModel):
    """
    LangGraph-compatible state object.
    Dumped to a dict for graph execution and rebuilt from the final dict.
    """

    audit_id: str
    created_at: Optional[str] = None
    title: str = ""

    # Content under audit; html is optional for plain text audits
    html: str = ""
    text: str = ""

    level: str = "AAA"
    remediate: bool = True

    outputs: AuditOutputs = Field(default_factory=AuditOutputs)
    status: AuditStatus = "UNKNOWN"

    pipeline: PipelineMeta = Field(default_factory=PipelineMeta)
    errors: List[Dict[str, Any]] = Field(default_factory=list)
