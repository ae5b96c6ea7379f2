from __future__ import annotations

"""
Providers (Cerebras for text, Gemini for images and audio)
"""

from aaa_audit.llms.providers import cerebras_client, gemini_client

__all__ = [
    "cerebras_client",
    "gemini_client",
]
