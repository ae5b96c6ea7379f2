# aaa_audit/core/policies.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ConformancePolicy:
    """
    Thresholds for one WCAG conformance target.
    Keep this deterministic + versioned.
    """
    name: str
    level: str
    version: str
    description: str
    contrast_normal: float
    contrast_large: float
    contrast_criterion: str
    readability_min_score: float = 60.0   # Flesch reading ease ~ lower secondary education
    alt_text_max_length: int = 125


WCAG21_AAA = ConformancePolicy(
    name="wcag21_aaa",
    level="AAA",
    version="2.1",
    description="WCAG 2.1 level AAA (enhanced contrast, reading level).",
    contrast_normal=7.0,
    contrast_large=4.5,
    contrast_criterion="1.4.6 Contrast (Enhanced) (AAA)",
)

WCAG21_AA = ConformancePolicy(
    name="wcag21_aa",
    level="AA",
    version="2.1",
    description="WCAG 2.1 level AA (minimum contrast).",
    contrast_normal=4.5,
    contrast_large=3.0,
    contrast_criterion="1.4.3 Contrast (Minimum) (AA)",
)


_POLICY_REGISTRY: Dict[str, ConformancePolicy] = {
    WCAG21_AAA.name: WCAG21_AAA,
    WCAG21_AA.name: WCAG21_AA,
}

_BY_LEVEL: Dict[str, ConformancePolicy] = {p.level: p for p in _POLICY_REGISTRY.values()}


def policy_for_level(level: Optional[str], default: str = "AAA") -> ConformancePolicy:
    """Resolve "AA"/"AAA" (case-insensitive) or a policy name; unknown values use `default`."""
    key = (level or default).strip()
    if key in _POLICY_REGISTRY:
        return _POLICY_REGISTRY[key]
    return _BY_LEVEL.get(key.upper(), _BY_LEVEL[default.upper()])
