from __future__ import annotations

from typing import Optional

AUDIO = "audio"
VIDEO = "video"
IMAGE = "image"


def media_kind(mimetype: Optional[str]) -> Optional[str]:
    """`audio/mpeg` -> `audio`; None for anything that is not image, audio or video."""
    major = (mimetype or "").split("/", 1)[0].lower()
    if major == "image":
        return IMAGE
    if major == "audio":
        return AUDIO
    if major == "video":
        return VIDEO
    return None


def upload_folder(mimetype: Optional[str]) -> str:
    kind = media_kind(mimetype)
    return {IMAGE: "images", AUDIO: "audio", VIDEO: "video"}.get(kind or "", "other")
