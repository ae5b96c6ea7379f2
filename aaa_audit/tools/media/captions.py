from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class Cue:
    start: str
    end: str
    text: str


@dataclass(frozen=True)
class AudioDescription:
    timeCode: str
    description: str


# Placeholder track until real timing from speech is available.
DEFAULT_CUES = [
    Cue("00:00:00", "00:00:05", "Welcome to the WCAG 2.1 AAA Compliance Tutorial"),
    Cue("00:00:06", "00:00:10", "In this video, we will explore how to make your content accessible"),
    Cue("00:00:11", "00:00:15", "Let's start by looking at the key principles of accessibility"),
    Cue("00:00:16", "00:00:20", "The first principle is Perceivable"),
    Cue("00:00:21", "00:00:25", "This means users must be able to perceive the information being presented"),
    Cue("00:00:26", "00:00:30", "The second principle is Operable"),
    Cue("00:00:31", "00:00:35", "Users must be able to operate the interface"),
    Cue("00:00:36", "00:00:40", "The third principle is Understandable"),
    Cue("00:00:41", "00:00:45", "Information and operation of the interface must be understandable"),
    Cue("00:00:46", "00:00:50", "The fourth principle is Robust"),
    Cue("00:00:51", "00:00:55", "Content must be robust enough to work with various technologies"),
    Cue("00:00:56", "00:01:00", "Now let's look at some examples of accessible design"),
]

DEFAULT_AUDIO_DESCRIPTIONS = [
    AudioDescription(
        "00:00:20",
        "The screen shows a diagram of the four WCAG principles: Perceivable, Operable, Understandable, and Robust, arranged in a circle.",
    ),
    AudioDescription(
        "00:01:05",
        "A demonstration of color contrast checking is shown, with a tool highlighting low-contrast text on a webpage.",
    ),
    AudioDescription(
        "00:02:30",
        "A person using a screen reader navigates through a properly structured webpage with headings and landmarks.",
    ),
    AudioDescription(
        "00:03:15",
        "A comparison of two forms is displayed: one with clear labels and error messages, and one without accessible features.",
    ),
    AudioDescription(
        "00:04:00",
        "The presenter points to a chart showing statistics on disability types and the percentage of users affected by inaccessible content.",
    ),
]


def caption_track() -> List[Dict[str, Any]]:
    return [asdict(c) for c in DEFAULT_CUES]


def audio_descriptions() -> List[Dict[str, Any]]:
    return [asdict(d) for d in DEFAULT_AUDIO_DESCRIPTIONS]


def to_webvtt(cues: List[Cue]) -> str:
    """Render cues as a WebVTT document (HH:MM:SS -> HH:MM:SS.000)."""
    lines = ["WEBVTT", ""]
    for n, cue in enumerate(cues, start=1):
        lines.append(str(n))
        lines.append(f"{cue.start}.000 --> {cue.end}.000")
        lines.append(cue.text)
        lines.append("")
    return "\n".join(lines)
