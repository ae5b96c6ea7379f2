from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from aaa_audit.api.deps import Services, get_services
from aaa_audit.api.schemas import ColorPairBody, ContrastAnalyzeBody, ContrastSuggestBody, require
from aaa_audit.tools.checks.contrast_rules import analyze_contrast, check_ratio
from aaa_audit.tools.color.adjust import suggest_foreground
from aaa_audit.tools.color.contrast import contrast_ratio, parse_hex

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contrast", tags=["contrast"])

COLORS_REQUIRED = "Foreground and background colors are required"


@router.post("/analyze")
def analyze(body: ContrastAnalyzeBody, services: Services = Depends(get_services)) -> Dict[str, Any]:
    logger.info("Analyzing contrast")
    html = require(body.html, "HTML content is required")
    return analyze_contrast(html, services.policy(body.level))


@router.post("/suggest")
def suggest(body: ContrastSuggestBody) -> Dict[str, Any]:
    logger.info("Suggesting improved colors for contrast")
    fg = require(body.foreground, COLORS_REQUIRED).strip()
    bg = require(body.background, COLORS_REQUIRED).strip()
    parse_hex(fg)
    parse_hex(bg)

    adjusted = suggest_foreground(fg, bg, body.required)
    logger.info(
        "Contrast suggestion ready",
        extra={"ctx": {"outcome": adjusted.outcome, "iterations": adjusted.iterations, "direction": adjusted.direction}},
    )
    return {
        "original": {
            "foreground": fg,
            "background": bg,
            "ratio": round(contrast_ratio(fg, bg), 2),
        },
        "improved": {
            "foreground": adjusted.color,
            "background": bg,
            "ratio": round(adjusted.ratio, 2),
        },
        "required": body.required,
        "passes": adjusted.ratio >= body.required,
    }


@router.post("/check")
def check(body: ColorPairBody) -> Dict[str, Any]:
    logger.info("Checking contrast ratio")
    fg = require(body.foreground, COLORS_REQUIRED).strip()
    bg = require(body.background, COLORS_REQUIRED).strip()
    parse_hex(fg)
    parse_hex(bg)
    return check_ratio(fg, bg)
