from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Prompt:
    name: str
    template: str


PROMPTS: Dict[str, Prompt] = {
    "alt_text": Prompt(
        name="alt_text",
        template=(
            "Generate concise, descriptive alt text for this image following WCAG 2.1 AAA guidelines.\n"
            "Describe the content and function of the image in under {max_length} characters.\n"
            "Do not start with phrases like \"image of\" or \"picture of\".\n"
            "Return only the alt text.\n"
        ),
    ),
    "simplify_system": Prompt(
        name="simplify_system",
        template=(
            "You are an expert in simplifying text to make it more accessible.\n"
            "Simplify the provided text to approximately a {target_level} reading level.\n"
            "Maintain all the important information but use simpler words, shorter sentences, and clearer structure.\n"
            "Do not add any explanatory text or commentary - just return the simplified version.\n"
        ),
    ),
    "transcribe": Prompt(
        name="transcribe",
        template=(
            "Transcribe the speech in this audio verbatim.\n"
            "Return only the transcript text, without timestamps or speaker labels.\n"
        ),
    ),
}


def get_prompt(name: str) -> str:
    if name not in PROMPTS:
        raise KeyError(f"Unknown prompt: {name}")
    return PROMPTS[name].template
