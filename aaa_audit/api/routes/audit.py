from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from aaa_audit.api.deps import Services, get_services
from aaa_audit.api.schemas import AuditBody

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/audit", tags=["audit"])


@router.post("")
def run_audit(body: AuditBody, services: Services = Depends(get_services)) -> Dict[str, Any]:
    kwargs = dict(html=body.html, text=body.text, title=body.title, level=body.level, remediate=body.remediate)

    if body.store:
        return services.audits.run_and_store(services.require_reports(), **kwargs)
    return {"report": services.audits.run(**kwargs)}
