from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from aaa_audit.tools.color.contrast import Color, contrast_ratio, parse_hex

logger = logging.getLogger(__name__)

Direction = Literal["darken", "lighten"]
Outcome = Literal["unchanged", "converged", "exhausted"]

BLACK = "#000000"
WHITE = "#FFFFFF"

INITIAL_STEP = 0.05            # 5 percentage points of HSL lightness
MAX_ITERATIONS = 20
ACCELERATE_AFTER = 10
ACCELERATION = 1.5
LIGHT_BACKGROUND_LUMINANCE = 0.5


@dataclass(frozen=True)
class ContrastAdjustment:
    color: str
    ratio: float
    iterations: int
    direction: Direction
    outcome: Outcome


def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


def suggest_foreground(foreground: str, background: str, required: float) -> ContrastAdjustment:
    """
    Walk the foreground's HSL lightness away from the background until the
    contrast ratio reaches `required`.

    - already compliant (>=) -> foreground returned untouched
    - background luminance > 0.5 -> darken, otherwise lighten; fixed for the run
    - at most 20 steps; the step grows x1.5 after every step past the 10th
    - exhausted -> pure black (darken) or pure white (lighten)

    Inputs must already be valid hex colors.
    """
    fg = parse_hex(foreground)
    bg = parse_hex(background)

    direction: Direction = "darken" if bg.luminance > LIGHT_BACKGROUND_LUMINANCE else "lighten"

    ratio = contrast_ratio(fg, bg)
    if ratio >= required:
        return ContrastAdjustment(foreground, ratio, 0, direction, "unchanged")

    h, l, s = fg.to_hls()
    step = INITIAL_STEP
    iterations = 0
    candidate: Color = fg

    while ratio < required and iterations < MAX_ITERATIONS:
        l = _clamp01(l - step if direction == "darken" else l + step)
        candidate = Color.from_hls(h, l, s)
        ratio = contrast_ratio(candidate, bg)
        iterations += 1

        if iterations > ACCELERATE_AFTER:
            step *= ACCELERATION

    if ratio < required:
        fallback = BLACK if direction == "darken" else WHITE
        logger.info(
            "Contrast adjustment exhausted; falling back to extreme",
            extra={"ctx": {"foreground": foreground, "background": background, "required": required, "fallback": fallback}},
        )
        return ContrastAdjustment(fallback, contrast_ratio(fallback, bg), iterations, direction, "exhausted")

    return ContrastAdjustment(candidate.to_hex(), ratio, iterations, direction, "converged")


def adjust_color_for_contrast(foreground: str, background: str, required: float) -> str:
    return suggest_foreground(foreground, background, required).color
