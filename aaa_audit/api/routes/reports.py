from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from aaa_audit.api.deps import Services, get_services
from aaa_audit.api.schemas import ReportBody

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.post("")
def store_report(body: ReportBody, services: Services = Depends(get_services)) -> Dict[str, Any]:
    return services.require_reports().store(body.report)


@router.get("")
def list_reports(limit: int = Query(20), services: Services = Depends(get_services)) -> Dict[str, Any]:
    return {"reports": services.require_reports().list_reports(limit)}


@router.get("/{content_hash}")
def get_report(content_hash: str, services: Services = Depends(get_services)) -> Dict[str, Any]:
    return services.require_reports().get(content_hash)


@router.post("/{content_hash}/verify")
def verify_report(content_hash: str, body: ReportBody, services: Services = Depends(get_services)) -> Dict[str, Any]:
    return services.require_reports().verify(content_hash, body.report)
