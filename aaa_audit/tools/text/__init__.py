from __future__ import annotations

"""
Text accessibility helpers: readability scoring, vocabulary lookups, simplification.
"""

from aaa_audit.tools.text import readability, simplify, vocabulary

__all__ = [
    "readability",
    "simplify",
    "vocabulary",
]
