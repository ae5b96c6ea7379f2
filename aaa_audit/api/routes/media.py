from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import PlainTextResponse

from aaa_audit.api.deps import Services, get_services
from aaa_audit.api.uploads import StoredUpload
from aaa_audit.tools.media.captions import DEFAULT_CUES, audio_descriptions, caption_track, to_webvtt
from aaa_audit.tools.media.guidance import media_issues, sign_language_guidance
from aaa_audit.tools.media.kinds import AUDIO, VIDEO

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/media", tags=["media"])

NO_MEDIA = "No media file provided"
NO_VIDEO = "No video file provided"


def _media_json(stored: StoredUpload) -> Dict[str, Any]:
    return {**stored.to_dict(), "type": stored.kind}


def _save(services: Services, upload: Optional[UploadFile], kinds: set, message: str) -> StoredUpload:
    return services.uploads.save(upload, kinds=kinds, missing_message=message)


@router.post("/generate-transcript")
def generate_transcript(
    media: Optional[UploadFile] = File(None),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    logger.info("Generating transcript for media")
    stored = _save(services, media, {AUDIO, VIDEO}, NO_MEDIA)
    transcript = services.transcriber.transcribe(
        data=stored.data,
        mime_type=stored.mimetype,
        media_type=stored.kind or AUDIO,
        filename=stored.original_name,
    )
    return {
        "success": True,
        "media": _media_json(stored),
        "transcript": transcript.text,
        "source": transcript.source,
    }


@router.post("/generate-captions")
def generate_captions(
    video: Optional[UploadFile] = File(None),
    fmt: Optional[str] = Query(None, alias="format"),
    services: Services = Depends(get_services),
):
    logger.info("Generating captions for video")
    stored = _save(services, video, {VIDEO}, NO_VIDEO)

    if (fmt or "").lower() == "vtt":
        return PlainTextResponse(to_webvtt(DEFAULT_CUES), media_type="text/vtt")

    return {"success": True, "video": _media_json(stored), "captions": caption_track()}


@router.post("/audio-description")
def audio_description(
    video: Optional[UploadFile] = File(None),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    logger.info("Generating audio description for video")
    stored = _save(services, video, {VIDEO}, NO_VIDEO)
    return {"success": True, "video": _media_json(stored), "audioDescriptions": audio_descriptions()}


@router.post("/sign-language")
def sign_language(
    video: Optional[UploadFile] = File(None),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    logger.info("Checking sign language requirements for video")
    stored = _save(services, video, {VIDEO}, NO_VIDEO)
    return {"success": True, "video": _media_json(stored), "signLanguage": sign_language_guidance()}


@router.post("/analyze")
def analyze(
    media: Optional[UploadFile] = File(None),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    logger.info("Analyzing media accessibility")
    stored = _save(services, media, {AUDIO, VIDEO}, NO_MEDIA)
    kind = stored.kind or AUDIO
    return {"success": True, "media": _media_json(stored), "issues": media_issues(kind)}
