from __future__ import annotations

"""
Deterministic HTML checks (contrast pairs, alt text, ARIA and semantics).
"""

from aaa_audit.tools.checks import alt_text, aria, contrast_rules, dom, issues

__all__ = [
    "alt_text",
    "aria",
    "contrast_rules",
    "dom",
    "issues",
]
