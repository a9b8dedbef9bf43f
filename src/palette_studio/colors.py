# colors.py – hex/RGB/HSL conversion and contrast math
#   - permissive hex parsing (malformed → black) for engine callers
#   - strict canon_hex for request validation
#   - two luminance formulas: perceptual (text colour choice) and WCAG (grading)

from __future__ import annotations

import logging
import math
import re
import string
from dataclasses import dataclass
from typing import Literal, NamedTuple

log = logging.getLogger(__name__)

Hex = str
WCAGLevel = Literal["AAA", "AA", "Fail"]

_HEX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

# --- constants ---------------------------------------------------------------
BLACK: Hex = "#000000"
WHITE: Hex = "#FFFFFF"
_WCAG_THRESHOLD = 0.03928
_GAMMA = 2.4


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: int
    s: int
    l: int


def _round(x: float) -> int:
    # round half up, not banker's rounding
    return int(math.floor(x + 0.5))


def canon_hex(s: str) -> Hex:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    raw = (s or "").strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise ValueError(f"invalid hex: {s!r}")
    return "#" + raw.lower()


def is_hex(s: str) -> bool:
    return bool(_HEX_RE.match(s or ""))


# --- conversions -------------------------------------------------------------
def hex_to_rgb(hex_str: Hex) -> RGB:
    """Parse '#RRGGBB' (leading '#' optional). Malformed input yields black."""
    m = _HEX_RE.match(hex_str or "")
    if not m:
        log.warning("malformed hex %r, falling back to black", hex_str)
        return RGB(0, 0, 0)
    return RGB(*(int(part, 16) for part in m.groups()))


def rgb_to_hex(r: int, g: int, b: int) -> Hex:
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    hi = max(rf, gf, bf)
    lo = min(rf, gf, bf)
    h = s = 0.0
    l = (hi + lo) / 2.0

    if hi != lo:
        d = hi - lo
        s = d / (2.0 - hi - lo) if l > 0.5 else d / (hi + lo)
        if hi == rf:
            h = ((gf - bf) / d + (6.0 if gf < bf else 0.0)) / 6.0
        elif hi == gf:
            h = ((bf - rf) / d + 2.0) / 6.0
        else:
            h = ((rf - gf) / d + 4.0) / 6.0

    return HSL(_round(h * 360.0) % 360, _round(s * 100.0), _round(l * 100.0))


def hsl_to_hex(h: float, s: float, l: float) -> Hex:
    """HSL (deg, %, %) → '#rrggbb', channels clamped to [0, 255]."""
    s /= 100.0
    l /= 100.0
    a = s * min(l, 1.0 - l)

    def f(n: int) -> str:
        k = (n + h / 30.0) % 12.0
        c = l - a * max(min(k - 3.0, 9.0 - k, 1.0), -1.0)
        return f"{max(0, min(255, _round(255.0 * c))):02x}"

    return f"#{f(0)}{f(8)}{f(4)}"


def hex_to_hsl(hex_str: Hex) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(hex_str))


# --- contrast ----------------------------------------------------------------
def contrast_color(hex_str: Hex) -> Hex:
    """Black or white, whichever reads better on top of ``hex_str``.

    Uses the perceptual 0.299/0.587/0.114 weighting, not WCAG luminance.
    """
    r, g, b = hex_to_rgb(hex_str)
    perceived = (0.299 * r + 0.587 * g + 0.114 * b) / 255.0
    return BLACK if perceived > 0.5 else WHITE


def luminance(r: int, g: int, b: int) -> float:
    """WCAG 2.x relative luminance in [0, 1]."""

    def _lin(c: int) -> float:
        v = c / 255.0
        return v / 12.92 if v <= _WCAG_THRESHOLD else ((v + 0.055) / 1.055) ** _GAMMA

    return 0.2126 * _lin(r) + 0.7152 * _lin(g) + 0.0722 * _lin(b)


def contrast_ratio(hex_a: Hex, hex_b: Hex) -> float:
    la = luminance(*hex_to_rgb(hex_a))
    lb = luminance(*hex_to_rgb(hex_b))
    return (max(la, lb) + 0.05) / (min(la, lb) + 0.05)


def wcag_level(ratio: float) -> WCAGLevel:
    if ratio >= 7.0:
        return "AAA"
    if ratio >= 4.5:
        return "AA"
    return "Fail"


@dataclass(frozen=True)
class WCAGRating:
    aa: bool
    aa_large: bool
    aaa: bool
    aaa_large: bool

    def to_dict(self) -> dict[str, bool]:
        return {
            "aa": self.aa,
            "aaLarge": self.aa_large,
            "aaa": self.aaa,
            "aaaLarge": self.aaa_large,
        }


def wcag_rating(ratio: float) -> WCAGRating:
    """Normal and large-text pass flags for both conformance levels."""
    return WCAGRating(
        aa=ratio >= 4.5,
        aa_large=ratio >= 3.0,
        aaa=ratio >= 7.0,
        aaa_large=ratio >= 4.5,
    )


def contrast_report(fg: Hex, bg: Hex) -> dict[str, object]:
    ratio = contrast_ratio(fg, bg)
    return {
        "foreground": fg,
        "background": bg,
        "ratio": round(ratio, 2),
        "level": wcag_level(ratio),
        "rating": wcag_rating(ratio).to_dict(),
    }


__all__ = [
    "BLACK",
    "HSL",
    "RGB",
    "WHITE",
    "WCAGRating",
    "canon_hex",
    "contrast_color",
    "contrast_ratio",
    "contrast_report",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "is_hex",
    "luminance",
    "rgb_to_hex",
    "rgb_to_hsl",
    "wcag_level",
    "wcag_rating",
]
