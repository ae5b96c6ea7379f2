from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from aaa_audit.agents.state import AuditState
from aaa_audit.app.errors import AuditExecutionError, InvalidRequestError
from aaa_audit.core.clock import utc_now_iso
from aaa_audit.core.ids import new_audit_id
from aaa_audit.reports.report_builder import build_report
from aaa_audit.reports.report_manager import ReportManager

logger = logging.getLogger(__name__)


class AuditRunner:
    """
    - build the initial state
    - run the compiled LangGraph
    - build the report (and optionally persist it)
    """

    def __init__(self, graph: Any, default_level: str = "AAA"):
        self.graph = graph
        self.default_level = default_level

    def run(
        self,
        *,
        html: str = "",
        text: str = "",
        title: str = "",
        level: Optional[str] = None,
        remediate: bool = True,
    ) -> Dict[str, Any]:
        if not (html or "").strip() and not (text or "").strip():
            raise InvalidRequestError("HTML or text content is required")

        state_obj = AuditState(
            audit_id=new_audit_id(),
            created_at=utc_now_iso(),
            title=title,
            html=html or "",
            text=text or "",
            level=level or self.default_level,
            remediate=remediate,
        )

        # Convert Pydantic state -> dict for graph execution
        state_dict = state_obj.model_dump()
        try:
            final_state = self.graph.invoke(state_dict)
        except Exception as e:
            logger.exception("Audit graph failed", extra={"ctx": {"audit_id": state_obj.audit_id}})
            raise AuditExecutionError(f"Audit failed: {e}") from e

        state_obj = AuditState(**final_state)
        logger.info(
            "Audit completed",
            extra={"ctx": {"audit_id": state_obj.audit_id, "status": state_obj.status}},
        )
        return build_report(state_obj)

    def run_and_store(self, manager: ReportManager, **kwargs: Any) -> Dict[str, Any]:
        report = self.run(**kwargs)
        stored = manager.store(report)
        return {"report": report, "storage": stored}
