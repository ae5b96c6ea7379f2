from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from aaa_audit.agents.alt_text_agent import AltTextGenerator
from aaa_audit.agents.simplifier_agent import TextSimplifier
from aaa_audit.agents.transcriber_agent import Transcriber
from aaa_audit.api.uploads import UploadStore
from aaa_audit.app.errors import ServiceUnavailableError
from aaa_audit.app.settings import Settings
from aaa_audit.core.policies import ConformancePolicy, policy_for_level
from aaa_audit.db.mongo import connect_mongo, ensure_indexes
from aaa_audit.db.repositories import ReportRepo
from aaa_audit.graph.build_graph import build_graph
from aaa_audit.llms.providers.cerebras_client import CerebrasLLM
from aaa_audit.llms.providers.gemini_client import GeminiMediaClient
from aaa_audit.reports.audit_runner import AuditRunner
from aaa_audit.reports.report_manager import ReportManager
from aaa_audit.tools.checks.alt_text import AltTextBanks
from aaa_audit.tools.templates import (
    AUDIO_TRANSCRIPT_TEMPLATES,
    VIDEO_TRANSCRIPT_TEMPLATES,
    Selector,
    TemplateBank,
    random_selector,
)

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """
    Everything a request handler needs, built once at startup.
    """
    settings: Settings
    uploads: UploadStore
    alt_text_banks: AltTextBanks
    alt_text: AltTextGenerator
    simplifier: TextSimplifier
    transcriber: Transcriber
    audits: AuditRunner
    reports: Optional[ReportManager] = None

    def policy(self, level: Optional[str] = None) -> ConformancePolicy:
        return policy_for_level(level, default=self.settings.conformance_level)

    def require_reports(self) -> ReportManager:
        if self.reports is None:
            raise ServiceUnavailableError("Report storage is not configured (set MONGO_URI)")
        return self.reports


def build_services(settings: Settings, selector: Optional[Selector] = None) -> Services:
    """
    Construct provider clients from settings. Missing API keys leave the
    matching client unset so the template fallbacks are used.
    """
    selector = selector or random_selector(settings.template_seed)
    banks = AltTextBanks.default(selector)

    gemini: Optional[GeminiMediaClient] = None
    if settings.gemini_api_key:
        gemini = GeminiMediaClient(api_key=settings.gemini_api_key, model=settings.gemini_model)

    cerebras: Optional[CerebrasLLM] = None
    if settings.cerebras_api_key:
        cerebras = CerebrasLLM(api_key=settings.cerebras_api_key, model=settings.cerebras_model)

    reports: Optional[ReportManager] = None
    if settings.mongo_uri:
        handles = connect_mongo(settings.mongo_uri, settings.mongo_db, tls=settings.mongo_tls)
        ensure_indexes(handles)
        reports = ReportManager(ReportRepo(handles["reports"]))

    logger.info(
        "Services ready",
        extra={
            "ctx": {
                "gemini": gemini is not None,
                "cerebras": cerebras is not None,
                "reports": reports is not None,
                "level": settings.conformance_level,
            }
        },
    )

    return Services(
        settings=settings,
        uploads=UploadStore(settings.upload_dir, settings.max_upload_bytes),
        alt_text_banks=banks,
        alt_text=AltTextGenerator(gemini, banks),
        simplifier=TextSimplifier(cerebras),
        transcriber=Transcriber(
            gemini,
            TemplateBank(AUDIO_TRANSCRIPT_TEMPLATES, selector),
            TemplateBank(VIDEO_TRANSCRIPT_TEMPLATES, selector),
        ),
        audits=AuditRunner(build_graph(banks).compile(), default_level=settings.conformance_level),
        reports=reports,
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
