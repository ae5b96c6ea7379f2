from __future__ import annotations

"""
Media alternatives: caption tracks, audio descriptions, sign language guidance.
"""

from aaa_audit.tools.media import captions, guidance, kinds

__all__ = [
    "captions",
    "guidance",
    "kinds",
]
