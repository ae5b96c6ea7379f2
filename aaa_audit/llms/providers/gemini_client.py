from __future__ import annotations

import logging
import os
from typing import Optional

from google import genai
from google.genai import types

from aaa_audit.app.errors import ConfigError, ProviderError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiMediaClient:
    """
    Gemini multimodal wrapper: image descriptions and audio transcription.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ConfigError("GEMINI_API_KEY must be set to use Gemini")
        self.model = model or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
        self.client = genai.Client(api_key=self.api_key)

    def _generate(self, *, prompt: str, data: bytes, mime_type: str, max_output_tokens: int) -> str:
        config = types.GenerateContentConfig(
            temperature=0.4,
            max_output_tokens=max_output_tokens,
        )
        try:
            resp = self.client.models.generate_content(
                model=self.model,
                contents=[types.Part.from_bytes(data=data, mime_type=mime_type), prompt],
                config=config,
            )
        except Exception as e:
            raise ProviderError(f"Gemini request failed: {e}") from e

        text = (getattr(resp, "text", None) or "").strip()
        if not text:
            raise ProviderError("Gemini response did not include text")
        return text

    def describe_image(self, *, data: bytes, mime_type: str, prompt: str) -> str:
        return self._generate(prompt=prompt, data=data, mime_type=mime_type, max_output_tokens=300)

    def transcribe_audio(self, *, data: bytes, mime_type: str, prompt: str) -> str:
        return self._generate(prompt=prompt, data=data, mime_type=mime_type, max_output_tokens=8192)
