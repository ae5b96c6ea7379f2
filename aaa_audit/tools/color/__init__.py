from __future__ import annotations

from aaa_audit.tools.color import adjust, contrast

__all__ = [
    "adjust",
    "contrast",
]
