from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bs4 import Tag

from aaa_audit.tools.checks.dom import class_string, parse_html
from aaa_audit.tools.templates import (
    ALT_TEXT_GENERIC_TEMPLATES,
    ALT_TEXT_SUBJECT_TEMPLATES,
    Selector,
    TemplateBank,
)

logger = logging.getLogger(__name__)

MIN_ALT_LENGTH = 5
MAX_ALT_LENGTH = 125
DECORATIVE_MAX_PX = 50

DECORATIVE_CLASS_HINTS = ("decoration", "icon", "separator", "divider", "bullet", "bg", "background")
DECORATIVE_SRC_HINTS = ("separator", "divider", "spacer", "blank", "icon", "bullet")
REDUNDANT_PHRASES = ("image of", "picture of", "photo of")
FILE_EXTENSIONS = (".jpg", ".png", ".gif", ".webp")


@dataclass
class AltTextBanks:
    subject: TemplateBank
    generic: TemplateBank

    @classmethod
    def default(cls, selector: Optional[Selector] = None) -> "AltTextBanks":
        return cls(
            subject=TemplateBank(ALT_TEXT_SUBJECT_TEMPLATES, selector),
            generic=TemplateBank(ALT_TEXT_GENERIC_TEMPLATES, selector),
        )


def subject_from_filename(filename: str) -> str:
    """`red-sports_car.jpg` -> `Red Sports Car`; empty when nothing usable remains."""
    stem = os.path.splitext(os.path.basename(filename or ""))[0]
    spaced = re.sub(r"([A-Z])", r" \1", re.sub(r"[_-]", " ", stem)).strip()
    words = [w for w in spaced.split(" ") if len(w) > 1]
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def template_alt_text(filename: str, banks: AltTextBanks) -> str:
    subject = subject_from_filename(filename)
    if subject:
        return banks.subject.pick(subject=subject)
    return banks.generic.pick()


def _int_attr(el: Tag, name: str) -> int:
    raw = str(el.get(name) or "0")
    m = re.match(r"\s*(\d+)", raw)
    return int(m.group(1)) if m else 0


def is_decorative_image(img: Tag) -> bool:
    width = _int_attr(img, "width")
    height = _int_attr(img, "height")
    if (0 < width < DECORATIVE_MAX_PX) or (0 < height < DECORATIVE_MAX_PX):
        return True

    class_name = class_string(img)
    if any(hint in class_name for hint in DECORATIVE_CLASS_HINTS):
        return True

    if (img.get("role") or "") in {"presentation", "none"}:
        return True

    if (img.get("aria-hidden") or "") == "true":
        return True

    src = img.get("src") or ""
    return any(hint in src for hint in DECORATIVE_SRC_HINTS)


def analyze_images(html: str, banks: AltTextBanks) -> Dict[str, Any]:
    """
    Inspect every <img>; only images needing attention are returned.
    """
    soup = parse_html(html)
    images = soup.find_all("img")
    logger.info("Found %d images in HTML", len(images))

    results: List[Dict[str, Any]] = []
    for i, img in enumerate(images):
        src = img.get("src") or ""
        alt = img.get("alt")
        has_alt = alt is not None
        is_empty = has_alt and alt.strip() == ""
        decorative = is_decorative_image(img)

        suggested_alt: Optional[str] = None
        if not has_alt or (alt and len(alt.strip()) < MIN_ALT_LENGTH and not decorative):
            suggested_alt = template_alt_text(src, banks)
        elif decorative and not is_empty:
            suggested_alt = ""

        results.append(
            {
                "imageId": i + 1,
                "src": src,
                "currentAlt": alt if has_alt else "",
                "hasAlt": has_alt,
                "isEmpty": is_empty,
                "isLikelyDecorative": decorative,
                "suggestedAlt": suggested_alt,
                "needsAttention": (not has_alt) or (decorative and not is_empty) or (not decorative and is_empty),
            }
        )

    flagged = [r for r in results if r["needsAttention"]]
    logger.info("Found %d images needing alt text improvements", len(flagged))
    return {"totalImages": len(images), "issuesFound": len(flagged), "images": flagged}


def analyze_alt_text_quality(alt_text: str, image_context: Optional[str] = None, max_length: int = MAX_ALT_LENGTH) -> Dict[str, Any]:
    issues: List[str] = []
    score = 100
    text = alt_text or ""

    if text.strip() == "":
        issues.append("Alt text is empty")
        score -= 50
    else:
        if len(text) < MIN_ALT_LENGTH:
            issues.append("Alt text is too short")
            score -= 30
        elif len(text) > max_length:
            issues.append(f"Alt text is too long (should be under {max_length} characters)")
            score -= 20

        lowered = text.lower()
        if any(p in lowered for p in REDUNDANT_PHRASES):
            issues.append('Alt text contains redundant phrases like "image of" or "picture of"')
            score -= 50

        if any(ext in lowered for ext in FILE_EXTENSIONS):
            issues.append("Alt text contains file extensions")
            score -= 40

        if image_context and image_context.strip():
            context_words = set(image_context.lower().split())
            alt_words = lowered.split()
            matches = sum(1 for w in alt_words if len(w) > 3 and w in context_words)
            if matches == 0 and len(alt_words) > 3:
                issues.append("Alt text may not be relevant to the surrounding content")
                score -= 15

    score = max(0, score)

    if text.strip() == "" or len(text.strip()) < MIN_ALT_LENGTH:
        quality = "poor"
    elif score >= 90:
        quality = "excellent"
    elif score >= 70:
        quality = "good"
    elif score >= 50:
        quality = "fair"
    else:
        quality = "poor"

    return {
        "score": score,
        "quality": quality,
        "issues": issues,
        "suggestions": generate_suggestions(issues, text) if issues else [],
    }


def _strip_first(patterns: tuple, text: str) -> str:
    for p in patterns:
        text = re.sub(re.escape(p), "", text, count=1, flags=re.IGNORECASE)
    return text


def generate_suggestions(issues: List[str], alt_text: str) -> List[str]:
    suggestions: List[str] = []
    for issue in issues:
        if "empty" in issue:
            suggestions.append("Add descriptive alt text that conveys the purpose and content of the image")
        elif "too short" in issue:
            suggestions.append("Expand the alt text to better describe the image content")
        elif "too long" in issue:
            suggestions.append("Shorten the alt text to be more concise while keeping essential information")
        elif "redundant phrases" in issue:
            suggestions.append(
                'Remove phrases like "image of" or "picture of" as screen readers already announce the element as an image'
            )
            if alt_text:
                improved = _strip_first(tuple(f"{p} " for p in REDUNDANT_PHRASES), alt_text)
                suggestions.append(f'Consider: "{improved}"')
        elif "file extensions" in issue:
            suggestions.append("Remove file extensions from the alt text")
            if alt_text:
                suggestions.append(f'Consider: "{_strip_first(FILE_EXTENSIONS, alt_text)}"')
        elif "not be relevant" in issue:
            suggestions.append("Make sure the alt text relates to the context in which the image appears")
    return suggestions
