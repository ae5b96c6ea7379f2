from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from aaa_audit.api.deps import Services, get_services
from aaa_audit.api.schemas import SimplifyBody, TextBody, require
from aaa_audit.core.utils import preview
from aaa_audit.tools.text.readability import analyze_readability, reading_level
from aaa_audit.tools.text.vocabulary import find_abbreviations, find_pronunciation_issues, find_unusual_words

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/text", tags=["text"])

TEXT_REQUIRED = "Text content is required"


@router.post("/simplify")
def simplify(body: SimplifyBody, services: Services = Depends(get_services)) -> Dict[str, Any]:
    logger.info("Simplifying text for better readability")
    text = require(body.text, TEXT_REQUIRED)
    result = services.simplifier.simplify(text, body.target_reading_level)
    return {
        "original": {"text": text, "readingLevel": reading_level(text)},
        "simplified": {"text": result.text, "readingLevel": result.reading_level, "source": result.source},
        "targetReadingLevel": body.target_reading_level,
    }


@router.post("/analyze-readability")
def analyze(body: TextBody, services: Services = Depends(get_services)) -> Dict[str, Any]:
    logger.info("Analyzing text readability")
    text = require(body.text, TEXT_REQUIRED)
    return analyze_readability(text, services.policy().readability_min_score)


@router.post("/unusual-words")
def unusual_words(body: TextBody) -> Dict[str, Any]:
    logger.info("Identifying unusual words")
    text = require(body.text, TEXT_REQUIRED)
    return {"text": preview(text), "unusualWords": find_unusual_words(text)}


@router.post("/abbreviations")
def abbreviations(body: TextBody) -> Dict[str, Any]:
    logger.info("Identifying abbreviations")
    text = require(body.text, TEXT_REQUIRED)
    return {"text": preview(text), "abbreviations": find_abbreviations(text)}


@router.post("/pronunciation")
def pronunciation(body: TextBody) -> Dict[str, Any]:
    logger.info("Providing pronunciation guidance")
    text = require(body.text, TEXT_REQUIRED)
    return {"text": preview(text), "pronunciationGuidance": find_pronunciation_issues(text)}
