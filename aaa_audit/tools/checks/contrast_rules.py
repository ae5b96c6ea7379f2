from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from aaa_audit.core.policies import ConformancePolicy
from aaa_audit.tools.checks.dom import describe, parse_html, parse_style
from aaa_audit.tools.color.adjust import suggest_foreground
from aaa_audit.tools.color.contrast import Color, contrast_ratio, parse_css_color

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "#ffffff"

_COLOR_TOKEN_RE = re.compile(r"#[0-9a-fA-F]{3,6}\b|rgba?\([^)]*\)|[a-zA-Z]+")
_FONT_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(px|pt|em|rem)?\s*$", re.IGNORECASE)

# browser default font sizes (px); headings are bold by default
_TAG_FONT_PX = {"h1": 32.0, "h2": 24.0, "h3": 18.72, "h4": 16.0, "h5": 13.28, "h6": 10.72}
_BOLD_TAGS = {"b", "strong", "h1", "h2", "h3", "h4", "h5", "h6", "th"}

LARGE_TEXT_PX = 24.0          # 18pt
LARGE_BOLD_TEXT_PX = 18.66    # 14pt


@dataclass(frozen=True)
class ColorPair:
    element: str
    foreground: str
    background: str
    is_large_text: bool


def _first_color(value: Optional[str]) -> Optional[Color]:
    if not value:
        return None
    for token in _COLOR_TOKEN_RE.findall(value):
        c = parse_css_color(token)
        if c is not None:
            return c
    return None


def _font_size_px(value: str) -> Optional[float]:
    m = _FONT_SIZE_RE.match(value or "")
    if not m:
        return None
    size = float(m.group(1))
    unit = (m.group(2) or "px").lower()
    if unit == "pt":
        return size * 4.0 / 3.0
    if unit in {"em", "rem"}:
        return size * 16.0
    return size


def _is_bold(weight: str) -> bool:
    w = (weight or "").strip().lower()
    if w in {"bold", "bolder"}:
        return True
    return w.isdigit() and int(w) >= 700


def _inherited(el: Tag, prop: str) -> Optional[str]:
    node: Any = el
    while isinstance(node, Tag):
        value = parse_style(node.get("style")).get(prop)
        if value:
            return value
        node = node.parent
    return None


def _background_for(el: Tag) -> Color:
    node: Any = el
    while isinstance(node, Tag):
        style = parse_style(node.get("style"))
        c = _first_color(style.get("background-color")) or _first_color(style.get("background"))
        if c is not None:
            return c
        c = parse_css_color(node.get("bgcolor"))
        if c is not None:
            return c
        node = node.parent
    return parse_css_color(DEFAULT_BACKGROUND)  # type: ignore[return-value]


def is_large_text(el: Tag) -> bool:
    size_decl = _inherited(el, "font-size")
    size = _font_size_px(size_decl) if size_decl else None
    if size is None:
        size = _TAG_FONT_PX.get(el.name, 16.0)

    weight_decl = _inherited(el, "font-weight")
    bold = _is_bold(weight_decl) if weight_decl else el.name in _BOLD_TAGS

    return size >= LARGE_TEXT_PX or (bold and size >= LARGE_BOLD_TEXT_PX)


def extract_color_pairs(soup: BeautifulSoup) -> List[ColorPair]:
    """
    Every element that declares an inline text color, paired with the nearest
    background declared on itself or an ancestor (white when none).
    """
    pairs: List[ColorPair] = []
    for el in soup.find_all(True):
        style = parse_style(el.get("style"))
        fg = parse_css_color(style.get("color")) or (parse_css_color(el.get("color")) if el.name == "font" else None)
        if fg is None:
            continue
        bg = _background_for(el)
        pairs.append(
            ColorPair(
                element=describe(el),
                foreground=fg.to_hex(),
                background=bg.to_hex(),
                is_large_text=is_large_text(el),
            )
        )
    return pairs


def analyze_contrast(html: str, policy: ConformancePolicy) -> Dict[str, Any]:
    soup = parse_html(html)
    pairs = extract_color_pairs(soup)

    issues: List[Dict[str, Any]] = []
    for pair in pairs:
        ratio = contrast_ratio(pair.foreground, pair.background)
        required = policy.contrast_large if pair.is_large_text else policy.contrast_normal
        if ratio >= required:
            continue

        suggestion = suggest_foreground(pair.foreground, pair.background, required)
        issues.append(
            {
                "element": pair.element,
                "foreground": pair.foreground,
                "background": pair.background,
                "ratio": round(ratio, 2),
                "required": required,
                "isLargeText": pair.is_large_text,
                "suggestion": suggestion.color,
                "suggestedRatio": round(suggestion.ratio, 2),
                "wcagCriteria": policy.contrast_criterion,
            }
        )

    logger.info("Found %d contrast issues in %d color pairs", len(issues), len(pairs))
    return {"issues": issues, "analyzed": len(pairs)}


def check_ratio(foreground: str, background: str) -> Dict[str, Any]:
    ratio = contrast_ratio(foreground, background)
    return {
        "foreground": foreground,
        "background": background,
        "ratio": round(ratio, 2),
        "passesAA": ratio >= 4.5,
        "passesAAA": ratio >= 7,
        "passesAALarge": ratio >= 3,
        "passesAAALarge": ratio >= 4.5,
    }
