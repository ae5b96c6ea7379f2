from __future__ import annotations

import re
from typing import Any, Dict, List

from aaa_audit.core.utils import preview

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")
_WORD_RE = re.compile(r"\b\w+\b")
_PASSIVE_RE = re.compile(r"\b(is|are|was|were|be|been|being)\s+\w+ed\b", re.IGNORECASE)

LONG_SENTENCE_WORDS = 15
LONG_WORD_CHARS = 5
DEFAULT_MIN_SCORE = 60.0  # roughly lower secondary education (WCAG 3.1.5)

COMPLEX_WORDS = [
    "utilize", "implementation", "functionality", "subsequently", "demonstrate",
    "sufficient", "additional", "approximately", "requirements", "modification",
    "assistance", "initiate", "terminate", "comprehend", "endeavor",
]

# (minimum score, level); first match wins
READING_LEVELS = [
    (90.0, "grade5"),
    (80.0, "grade6"),
    (70.0, "grade7"),
    (60.0, "grade8-9"),
    (50.0, "grade10-12"),
    (30.0, "college"),
]


def split_sentences(text: str) -> List[str]:
    return _SENTENCE_RE.findall(text) or [text]


def words_of(text: str) -> List[str]:
    return _WORD_RE.findall(text)


def count_syllables(word: str) -> int:
    w = re.sub(r"[^a-z]", "", word.lower())
    if len(w) <= 3:
        return 1
    w = re.sub(r"(?:[^l]e|ed|es)$", "", w)
    groups = re.findall(r"[aeiouy]+", w)
    return len(groups) if groups else 1


def flesch_reading_ease(text: str) -> float:
    """206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words), clamped to [0, 100]."""
    sentences = split_sentences(text)
    words = words_of(text)
    if not sentences or not words:
        return 0.0
    syllables = sum(count_syllables(w) for w in words)
    score = 206.835 - 1.015 * (len(words) / len(sentences)) - 84.6 * (syllables / len(words))
    return max(0.0, min(100.0, score))


def reading_level(text: str) -> str:
    score = flesch_reading_ease(text)
    for minimum, level in READING_LEVELS:
        if score >= minimum:
            return level
    return "graduate"


def average_sentence_length(text: str) -> float:
    sentences = split_sentences(text)
    words = words_of(text)
    return len(words) / len(sentences) if sentences else float(len(words))


def average_word_length(text: str) -> float:
    words = words_of(text)
    if not words:
        return 0.0
    return sum(len(w) for w in words) / len(words)


def complex_words_in(text: str) -> List[str]:
    return [w for w in COMPLEX_WORDS if re.search(rf"\b{w}\b", text, re.IGNORECASE)]


def recommendations_for(text: str) -> List[str]:
    recs: List[str] = []
    if average_sentence_length(text) > LONG_SENTENCE_WORDS:
        recs.append(f"Use shorter sentences (aim for {LONG_SENTENCE_WORDS} words or fewer per sentence)")
    if average_word_length(text) > LONG_WORD_CHARS:
        recs.append("Use shorter, simpler words where possible")
    if _PASSIVE_RE.search(text):
        recs.append("Reduce use of passive voice; use active voice instead")
    found = complex_words_in(text)
    if found:
        recs.append(f"Replace complex words like: {', '.join(found)}")
    recs.append("Use bullet points for lists")
    recs.append("Add headings and subheadings to break up text")
    return recs


def analyze_readability(text: str, min_score: float = DEFAULT_MIN_SCORE) -> Dict[str, Any]:
    score = flesch_reading_ease(text)
    meets = score >= min_score
    return {
        "text": preview(text),
        "readingLevel": reading_level(text),
        "fleschKincaidScore": round(score, 2),
        "averageSentenceLength": round(average_sentence_length(text), 2),
        "averageWordLength": round(average_word_length(text), 2),
        "meetsWcagAAA": meets,
        "recommendations": [] if meets else recommendations_for(text),
    }
