"""WCAG 2.x color math.

Public API:
- Color: immutable sRGB triple with hex / HLS conversions
- parse_hex(value) -> Color            (strict, raises InvalidColorError)
- parse_css_color(value) -> Color|None  (lenient, for inline CSS scanning)
- relative_luminance(color) -> float
- contrast_ratio(a, b) -> float in [1, 21]
"""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from aaa_audit.app.errors import InvalidColorError

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_RE = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*[, ]\s*(\d{1,3})\s*[, ]\s*(\d{1,3})\s*(?:[,/]\s*(\d*\.?\d+)(%?)\s*)?\)$",
    re.IGNORECASE,
)

NAMED_COLORS = {
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "gray": "#808080",
    "grey": "#808080",
    "silver": "#c0c0c0",
    "maroon": "#800000",
    "navy": "#000080",
    "teal": "#008080",
    "olive": "#808000",
    "lime": "#00ff00",
    "aqua": "#00ffff",
    "cyan": "#00ffff",
    "fuchsia": "#ff00ff",
    "magenta": "#ff00ff",
    "brown": "#a52a2a",
    "pink": "#ffc0cb",
    "darkblue": "#00008b",
    "darkgreen": "#006400",
    "darkred": "#8b0000",
    "darkgray": "#a9a9a9",
    "darkgrey": "#a9a9a9",
    "lightgray": "#d3d3d3",
    "lightgrey": "#d3d3d3",
    "lightblue": "#add8e6",
    "lightgreen": "#90ee90",
    "whitesmoke": "#f5f5f5",
}


def _round_channel(v: float) -> int:
    # half-up, channel values are never negative
    return max(0, min(255, int(v + 0.5)))


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_hls(self) -> Tuple[float, float, float]:
        return colorsys.rgb_to_hls(self.r / 255.0, self.g / 255.0, self.b / 255.0)

    @classmethod
    def from_hls(cls, h: float, l: float, s: float) -> "Color":
        r, g, b = colorsys.hls_to_rgb(h, l, s)
        return cls(_round_channel(r * 255), _round_channel(g * 255), _round_channel(b * 255))

    @property
    def luminance(self) -> float:
        return relative_luminance(self)


ColorLike = Union[Color, str]


def parse_hex(value: str) -> Color:
    if not isinstance(value, str):
        raise InvalidColorError(f"Color must be a hex string, got {value!r}")
    m = _HEX_RE.match(value.strip())
    if not m:
        raise InvalidColorError(f"Color must be a #RRGGBB hex string: {value}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_css_color(value: Optional[str]) -> Optional[Color]:
    """Parse a CSS color value; None for anything unsupported (gradients, vars, transparent)."""
    if not value:
        return None
    v = value.strip().lower()
    v = v.replace("!important", "").strip()
    if v in NAMED_COLORS:
        return parse_hex(NAMED_COLORS[v])
    if v.startswith("#"):
        try:
            return parse_hex(v)
        except InvalidColorError:
            return None
    m = _RGB_RE.match(v)
    if m:
        if m.group(4) is not None and float(m.group(4)) == 0:
            # fully transparent paints nothing
            return None
        r, g, b = (min(255, int(x)) for x in m.groups()[:3])
        return Color(r, g, b)
    return None


def _to_color(c: ColorLike) -> Color:
    return c if isinstance(c, Color) else parse_hex(c)


def _linear_channel(c: int) -> float:
    v = c / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    c = _to_color(color)
    return 0.2126 * _linear_channel(c.r) + 0.7152 * _linear_channel(c.g) + 0.0722 * _linear_channel(c.b)


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


__all__ = [
    "Color",
    "NAMED_COLORS",
    "contrast_ratio",
    "parse_css_color",
    "parse_hex",
    "relative_luminance",
]
