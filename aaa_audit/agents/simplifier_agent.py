from __future__ import annotations

import logging
from typing import Optional

from aaa_audit.agents.schemas import SimplifiedText
from aaa_audit.app.errors import ProviderError
from aaa_audit.llms.prompt_registry import get_prompt
from aaa_audit.llms.providers.cerebras_client import CerebrasLLM
from aaa_audit.tools.text.readability import reading_level
from aaa_audit.tools.text.simplify import DICTIONARY_READING_LEVEL, simplify_with_dictionary

logger = logging.getLogger(__name__)


class TextSimplifier:
    """
    LLM rewrite when configured; dictionary substitution + sentence splitting otherwise.
    """

    def __init__(self, llm: Optional[CerebrasLLM]):
        self.llm = llm

    def _fallback(self, text: str) -> SimplifiedText:
        return SimplifiedText(
            text=simplify_with_dictionary(text),
            reading_level=DICTIONARY_READING_LEVEL,
            source="dictionary",
        )

    def simplify(self, text: str, target_level: str = "grade6") -> SimplifiedText:
        if self.llm is None:
            logger.info("Using dictionary simplifier (LLM not configured)")
            return self._fallback(text)

        messages = [
            {"role": "system", "content": get_prompt("simplify_system").format(target_level=target_level)},
            {"role": "user", "content": text},
        ]
        try:
            simplified = self.llm.chat(messages=messages, temperature=0.7, max_completion_tokens=1000)
        except ProviderError as e:
            logger.warning("LLM simplification failed, using dictionary", extra={"ctx": {"error": str(e)}})
            return self._fallback(text)

        if not simplified:
            return self._fallback(text)

        level = reading_level(simplified)
        logger.info("Generated simplified text", extra={"ctx": {"reading_level": level}})
        return SimplifiedText(text=simplified, reading_level=level, source="cerebras")
