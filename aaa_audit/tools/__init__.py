from __future__ import annotations

"""
Tools package for the accessibility audit service.

This package contains the deterministic tools used by the API and the audit graph:
- color: WCAG contrast math and the foreground adjuster
- checks: HTML checks (contrast pairs, alt text, ARIA and semantic structure)
- text: readability scoring, vocabulary lookups, simplification
- media: caption tracks, audio descriptions, sign language guidance
- templates: TemplateBank used by the offline fallbacks
"""

from aaa_audit.tools import checks, color, media, templates, text

__all__ = [
    "checks",
    "color",
    "media",
    "templates",
    "text",
]
