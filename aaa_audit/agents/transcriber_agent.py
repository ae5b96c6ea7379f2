from __future__ import annotations

import logging
from typing import Optional

from aaa_audit.agents.schemas import Transcript
from aaa_audit.app.errors import ProviderError
from aaa_audit.llms.prompt_registry import get_prompt
from aaa_audit.llms.providers.gemini_client import GeminiMediaClient
from aaa_audit.tools.media.kinds import AUDIO, VIDEO
from aaa_audit.tools.templates import TemplateBank

logger = logging.getLogger(__name__)


class Transcriber:
    """
    Audio goes to the speech model when configured. Video (no audio
    extraction) and unconfigured runs use the transcript templates.
    """

    def __init__(self, client: Optional[GeminiMediaClient], audio_bank: TemplateBank, video_bank: TemplateBank):
        self.client = client
        self.audio_bank = audio_bank
        self.video_bank = video_bank

    def _template(self, media_type: str, notes: str) -> Transcript:
        bank = self.audio_bank if media_type == AUDIO else self.video_bank
        return Transcript(text=bank.pick(), media_type=media_type, source="template", notes=notes)

    def transcribe(self, *, data: bytes, mime_type: str, media_type: str, filename: str) -> Transcript:
        logger.info("Generating transcript", extra={"ctx": {"filename": filename, "media_type": media_type}})

        if self.client is None:
            return self._template(media_type, "speech model not configured")
        if media_type == VIDEO:
            return self._template(media_type, "video audio extraction not supported")

        try:
            text = self.client.transcribe_audio(data=data, mime_type=mime_type, prompt=get_prompt("transcribe"))
        except ProviderError as e:
            logger.warning("Transcription failed, using template", extra={"ctx": {"error": str(e)}})
            return self._template(media_type, "speech model failed")

        return Transcript(text=text, media_type=media_type, source="gemini")
