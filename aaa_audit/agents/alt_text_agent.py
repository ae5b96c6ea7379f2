from __future__ import annotations

import logging
from typing import Optional

from aaa_audit.agents.schemas import GeneratedAltText
from aaa_audit.app.errors import ProviderError
from aaa_audit.llms.prompt_registry import get_prompt
from aaa_audit.llms.providers.gemini_client import GeminiMediaClient
from aaa_audit.tools.checks.alt_text import MAX_ALT_LENGTH, AltTextBanks, template_alt_text

logger = logging.getLogger(__name__)


class AltTextGenerator:
    """
    Vision model description when a client is configured; filename templates otherwise.
    """

    def __init__(
        self,
        client: Optional[GeminiMediaClient],
        banks: AltTextBanks,
        max_length: int = MAX_ALT_LENGTH,
    ):
        self.client = client
        self.banks = banks
        self.max_length = max_length

    def _fallback(self, filename: str, notes: str) -> GeneratedAltText:
        alt = template_alt_text(filename, self.banks)
        return GeneratedAltText(alt_text=alt, source="template", length=len(alt), notes=notes)

    def generate(self, *, data: bytes, mime_type: str, filename: str) -> GeneratedAltText:
        if self.client is None:
            logger.info("Using template alt text (vision model not configured)")
            return self._fallback(filename, "vision model not configured")

        prompt = get_prompt("alt_text").format(max_length=self.max_length)
        try:
            alt = self.client.describe_image(data=data, mime_type=mime_type, prompt=prompt)
        except ProviderError as e:
            logger.warning("Vision model failed, falling back to template alt text", extra={"ctx": {"error": str(e)}})
            return self._fallback(filename, "vision model failed")

        alt = alt.strip().strip('"')
        logger.info("Generated alt text", extra={"ctx": {"length": len(alt)}})
        return GeneratedAltText(alt_text=alt, source="gemini", length=len(alt))
