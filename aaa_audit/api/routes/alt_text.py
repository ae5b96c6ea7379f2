from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from aaa_audit.api.deps import Services, get_services
from aaa_audit.api.schemas import AltTextCheckBody, HtmlBody, require
from aaa_audit.tools.checks.alt_text import analyze_alt_text_quality, analyze_images
from aaa_audit.tools.media.kinds import IMAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/alt-text", tags=["alt-text"])


@router.post("/generate")
def generate(image: Optional[UploadFile] = File(None), services: Services = Depends(get_services)) -> Dict[str, Any]:
    logger.info("Generating alt text for image")
    stored = services.uploads.save(
        image,
        kinds={IMAGE},
        max_bytes=services.settings.max_image_bytes,
        missing_message="No image file provided",
    )
    result = services.alt_text.generate(data=stored.data, mime_type=stored.mimetype, filename=stored.original_name)
    return {
        "success": True,
        "image": stored.to_dict(),
        "altText": result.alt_text,
        "source": result.source,
    }


@router.post("/analyze")
def analyze(body: HtmlBody, services: Services = Depends(get_services)) -> Dict[str, Any]:
    logger.info("Analyzing images in HTML")
    html = require(body.html, "HTML content is required")
    return analyze_images(html, services.alt_text_banks)


@router.post("/check")
def check(body: AltTextCheckBody, services: Services = Depends(get_services)) -> Dict[str, Any]:
    logger.info("Checking alt text quality")
    alt_text = require(body.alt_text, "Alt text is required")
    max_length = services.policy().alt_text_max_length
    return {
        "altText": alt_text,
        "analysis": analyze_alt_text_quality(alt_text, body.image_context, max_length=max_length),
    }
