from __future__ import annotations

import random
from typing import Callable, List, Optional, Sequence

# Given the number of templates, return the index to use.
Selector = Callable[[int], int]


def random_selector(seed: Optional[int] = None) -> Selector:
    rng = random.Random(seed)
    return lambda n: rng.randrange(n)


def fixed_selector(index: int = 0) -> Selector:
    """Always the same position (wrapped); used by tests and reproducible runs."""
    return lambda n: index % n


class TemplateBank:
    """
    Ordered list of `str.format` templates plus an index selector.
    Swap the selector to make generated text deterministic.
    """

    def __init__(self, templates: Sequence[str], selector: Optional[Selector] = None):
        if not templates:
            raise ValueError("TemplateBank needs at least one template")
        self.templates: List[str] = list(templates)
        self.selector: Selector = selector or random_selector()

    def __len__(self) -> int:
        return len(self.templates)

    def pick(self, **fields: str) -> str:
        idx = self.selector(len(self.templates))
        if not 0 <= idx < len(self.templates):
            raise IndexError(f"Selector returned {idx} for {len(self.templates)} templates")
        return self.templates[idx].format(**fields)


# -----------------------------
# Template sets
# -----------------------------

ALT_TEXT_SUBJECT_TEMPLATES = [
    "{subject} displayed prominently against a clean background",
    "Close-up view of {subject} showing details and features",
    "{subject} in use, demonstrating its functionality",
    "Illustration of {subject} with labeled components",
    "{subject} shown from multiple angles",
]

ALT_TEXT_GENERIC_TEMPLATES = [
    "Product image showing details and features",
    "Informational diagram explaining the concept",
    "Person demonstrating how to use the product",
    "Screenshot of the application interface",
    "Illustration of the process described in the text",
]

AUDIO_TRANSCRIPT_TEMPLATES = [
    "Welcome to our accessibility tool. This application helps you identify and fix accessibility issues in your digital content. By using this tool, you can ensure that your website, documents, and media are accessible to everyone, including people with disabilities.",
    "In this tutorial, we'll explore the key principles of web accessibility. We'll cover topics like semantic HTML, proper use of ARIA attributes, and ensuring sufficient color contrast. By the end, you'll have a better understanding of how to make your web content more accessible.",
    "Today we're discussing the importance of alternative text for images. Alt text provides a textual alternative to non-text content in web pages. Screen readers read this text aloud, helping visually impaired users understand the content. Remember to keep your alt text concise and descriptive.",
]

VIDEO_TRANSCRIPT_TEMPLATES = [
    "Welcome to our video tutorial on WCAG 2.1 AAA compliance. In this video, we'll demonstrate how to make your digital content accessible to everyone. [Visual: Presenter standing in front of a digital screen showing accessibility icons] First, let's talk about the four principles of accessibility: perceivable, operable, understandable, and robust. [Visual: Four icons appear on screen representing each principle]",
    "This demonstration shows how screen readers interpret web content. [Visual: Computer screen showing a webpage with a screen reader highlighting elements] Notice how the screen reader announces headings, links, and image descriptions. [Visual: Screen reader moving through the page, highlighting different elements] This is why proper HTML structure and alt text are so important for accessibility.",
    "In this video, we'll show you how to check color contrast for accessibility. [Visual: Person using a color contrast checker tool] The WCAG 2.1 AAA standard requires a contrast ratio of at least 7:1 for normal text. [Visual: Example of text with good and bad contrast] Let's look at some examples of accessible and inaccessible color combinations.",
]
