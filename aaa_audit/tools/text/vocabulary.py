from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from aaa_audit.core.utils import dedupe

UNUSUAL_WORDS: Dict[str, str] = {
    "paradigm": "A typical example or pattern of something; a model",
    "ubiquitous": "Present, appearing, or found everywhere",
    "mitigate": "Make less severe, serious, or painful",
    "caveat": "A warning or proviso of specific stipulations, conditions, or limitations",
    "cognizant": "Having knowledge or awareness",
    "esoteric": "Intended for or likely to be understood by only a small number of people with specialized knowledge",
    "juxtaposition": "The fact of two things being seen or placed close together with contrasting effect",
    "panacea": "A solution or remedy for all difficulties or diseases",
    "pragmatic": "Dealing with things sensibly and realistically",
    "quintessential": "Representing the most perfect or typical example of a quality or class",
    "rhetoric": "The art of effective or persuasive speaking or writing",
    "superfluous": "Unnecessary, especially through being more than enough",
    "sycophant": "A person who acts obsequiously toward someone important in order to gain advantage",
    "verbose": "Using or containing more words than are necessary",
}

ABBREVIATIONS: Dict[str, str] = {
    "WCAG": "Web Content Accessibility Guidelines",
    "HTML": "Hypertext Markup Language",
    "CSS": "Cascading Style Sheets",
    "JS": "JavaScript",
    "API": "Application Programming Interface",
    "UI": "User Interface",
    "UX": "User Experience",
    "a11y": "Accessibility",
    "i18n": "Internationalization",
    "l10n": "Localization",
    "CMS": "Content Management System",
    "SEO": "Search Engine Optimization",
    "W3C": "World Wide Web Consortium",
    "WAI": "Web Accessibility Initiative",
    "ARIA": "Accessible Rich Internet Applications",
    "ADA": "Americans with Disabilities Act",
    "JAWS": "Job Access With Speech",
    "NVDA": "NonVisual Desktop Access",
}


def _p(pronunciation: str, context: str, example: str) -> Dict[str, str]:
    return {"pronunciation": pronunciation, "context": context, "example": example}


# heteronyms: same spelling, different sound by meaning
PRONUNCIATIONS: Dict[str, List[Dict[str, str]]] = {
    "read": [
        _p("reed", "present tense", "I read [reed] books every day."),
        _p("red", "past tense", "I read [red] that book last week."),
    ],
    "lead": [
        _p("leed", "verb (to guide)", "She will lead [leed] the team to victory."),
        _p("led", "noun (metal)", "The pipe is made of lead [led]."),
    ],
    "wind": [
        _p("wind", "moving air", "The wind [wind] is blowing strongly today."),
        _p("wynd", "to turn", "Wind [wynd] the clock before going to bed."),
    ],
    "tear": [
        _p("teer", "liquid from eye", "A tear [teer] rolled down her cheek."),
        _p("tair", "to rip", "Be careful not to tear [tair] the paper."),
    ],
    "bow": [
        _p("bau", "to bend forward", "The performers bow [bau] to the audience."),
        _p("boh", "weapon for arrows", "He used a bow [boh] and arrow for hunting."),
    ],
    "live": [
        _p("liv", "to be alive", "They live [liv] in a small town."),
        _p("lyve", "happening now", "The concert is live [lyve] tonight."),
    ],
    "content": [
        _p("KON-tent", "noun (material)", "The content [KON-tent] of the book was interesting."),
        _p("kun-TENT", "adjective (satisfied)", "She felt content [kun-TENT] with her decision."),
    ],
}


def _context_re(term: str) -> "re.Pattern[str]":
    return re.compile(rf"[^.!?]*\b{re.escape(term)}\b[^.!?]*[.!?]", re.IGNORECASE)


def sentence_context(text: str, term: str) -> Optional[str]:
    m = _context_re(term).search(text)
    return m.group(0).strip() if m else None


def sentence_contexts(text: str, term: str) -> List[str]:
    return [m.group(0).strip() for m in _context_re(term).finditer(text)]


def find_unusual_words(text: str) -> List[Dict[str, Any]]:
    seen = dedupe([w.lower() for w in re.findall(r"\b[a-zA-Z]{5,}\b", text)])
    return [
        {"word": w, "definition": UNUSUAL_WORDS[w], "context": sentence_context(text, w)}
        for w in seen
        if w in UNUSUAL_WORDS
    ]


def find_abbreviations(text: str) -> List[Dict[str, Any]]:
    found: List[Dict[str, Any]] = []
    for abbr, expansion in ABBREVIATIONS.items():
        if re.search(rf"\b{re.escape(abbr)}\b", text):
            found.append({"abbreviation": abbr, "expansion": expansion, "context": sentence_context(text, abbr)})

    unknown = [t for t in dedupe(re.findall(r"\b[A-Z]{2,}\b", text)) if t not in ABBREVIATIONS]
    for abbr in unknown:
        found.append(
            {
                "abbreviation": abbr,
                "expansion": None,
                "context": sentence_context(text, abbr),
                "needsExpansion": True,
            }
        )
    return found


def find_pronunciation_issues(text: str) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for word, pronunciations in PRONUNCIATIONS.items():
        if not re.search(rf"\b{word}\b", text, re.IGNORECASE):
            continue
        out.append(
            {
                "word": word,
                "pronunciations": pronunciations,
                "contexts": sentence_contexts(text, word),
            }
        )
    return out
