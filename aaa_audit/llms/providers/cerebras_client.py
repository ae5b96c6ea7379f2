from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from cerebras.cloud.sdk import Cerebras

from aaa_audit.app.errors import ProviderError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama3.1-8b"


class CerebrasLLM:
    """
    Wrapper around Cerebras Cloud SDK.
    """
    def __init__(self, api_key: Optional[str] = None, model: str = DEFAULT_MODEL):
        self.api_key = api_key or os.environ.get("CEREBRAS_API_KEY")
        self.model = model
        self.client = Cerebras(api_key=self.api_key)

    def chat(
        self,
        *,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_completion_tokens: int = 1000,
        top_p: float = 1.0,
    ) -> str:
        """
        Non-streaming chat completion.
        """
        try:
            resp = self.client.chat.completions.create(
                model=model or self.model,
                messages=messages,
                temperature=temperature,
                max_completion_tokens=max_completion_tokens,
                top_p=top_p,
                stream=False,
            )
        except Exception as e:
            raise ProviderError(f"Cerebras chat failed: {e}") from e
        return (resp.choices[0].message.content or "").strip()
