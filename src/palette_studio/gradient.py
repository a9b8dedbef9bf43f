# gradient.py – gradient descriptors, CSS serialisation and sampling
#   - 2..5 stops, positions in [0, 100]; stored order is free, rendered sorted
#   - CSS shape is a compatibility contract: do not change the templates
#   - sampling goes through ColorAide so positions are honoured

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, List, Mapping, Sequence

from coloraide import Color as CAColor
from coloraide import stop as ca_stop

from .colors import Hex, canon_hex, hsl_to_hex
from .harmony import Harmony, default_rng, generate_harmonious_colors
from .names import palette_name
from .palette import Palette, new_id

log = logging.getLogger(__name__)

MIN_STOPS = 2
MAX_STOPS = 5
NEW_STOP_COLOR: Hex = "#888888"
NEW_STOP_OFFSET = 20.0
FROM_PALETTE_LIMIT = 4

FIT_HEX = {"method": "raytrace"}  # consistent gamut-fit for hex output


class GradientError(ValueError):
    """Raised when an edit would break the stop invariants."""


class GradientType(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"


class Direction(str, Enum):
    TO_RIGHT = "to right"
    TO_LEFT = "to left"
    TO_BOTTOM = "to bottom"
    TO_TOP = "to top"
    TO_BOTTOM_RIGHT = "to bottom right"
    TO_BOTTOM_LEFT = "to bottom left"
    TO_TOP_RIGHT = "to top right"
    TO_TOP_LEFT = "to top left"


RANDOM_DIRECTIONS = (
    Direction.TO_RIGHT,
    Direction.TO_BOTTOM,
    Direction.TO_BOTTOM_RIGHT,
    Direction.TO_TOP_RIGHT,
)


@dataclass(frozen=True)
class GradientStop:
    color: Hex
    position: float

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color, "position": self.position}


@dataclass(frozen=True)
class Gradient:
    id: str
    name: str
    type: GradientType
    direction: Direction
    stops: tuple[GradientStop, ...]

    def __post_init__(self) -> None:
        _check_stops(self.stops)

    def sorted_stops(self) -> List[GradientStop]:
        return sorted(self.stops, key=lambda s: s.position)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "direction": self.direction.value,
            "stops": [s.to_dict() for s in self.stops],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Gradient":
        try:
            gtype = GradientType(data.get("type") or "linear")
            direction = Direction(data.get("direction") or "to right")
        except ValueError as exc:
            raise GradientError(str(exc)) from exc
        try:
            stops = tuple(
                GradientStop(color=canon_hex(str(s["color"])), position=float(s["position"]))
                for s in data.get("stops", ())
            )
        except (KeyError, TypeError) as exc:
            raise GradientError(f"invalid gradient stop: {exc!r}") from exc
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            type=gtype,
            direction=direction,
            stops=stops,
        )


def _check_stops(stops: Sequence[GradientStop]) -> None:
    if not MIN_STOPS <= len(stops) <= MAX_STOPS:
        raise GradientError(
            f"gradient needs {MIN_STOPS}-{MAX_STOPS} stops, got {len(stops)}"
        )
    for s in stops:
        if not 0.0 <= s.position <= 100.0:
            raise GradientError(f"stop position {s.position} outside [0, 100]")


def _even_positions(n: int) -> List[float]:
    return [i / (n - 1) * 100 for i in range(n)]


def _fmt_position(p: float) -> str:
    # 50.0 → "50", 33.333… keeps full precision
    p = float(p)
    return str(int(p)) if p.is_integer() else repr(p)


# --- construction ------------------------------------------------------------
def generate_random_gradient(*, rng: random.Random | None = None) -> Gradient:
    rng = rng or default_rng()
    base_hue = rng.randrange(360)
    harmony = rng.choice((Harmony.ANALOGOUS, Harmony.COMPLEMENTARY))
    hues = generate_harmonious_colors(base_hue, 3, harmony, rng=rng)
    positions = _even_positions(len(hues))
    stops = tuple(
        GradientStop(
            color=hsl_to_hex(h, 60 + rng.random() * 30, 50 + rng.random() * 20),
            position=pos,
        )
        for h, pos in zip(hues, positions)
    )
    return Gradient(
        id=new_id(rng),
        name=palette_name(rng),
        type=GradientType.LINEAR,
        direction=rng.choice(RANDOM_DIRECTIONS),
        stops=stops,
    )


def gradient_from_palette(
    palette: Palette, *, rng: random.Random | None = None
) -> Gradient:
    """Linear left-to-right gradient over the palette's first four colours."""
    colors = palette.colors[:FROM_PALETTE_LIMIT]
    if len(colors) < MIN_STOPS:
        raise GradientError("palette needs at least two colours for a gradient")
    stops = tuple(
        GradientStop(color=c.hex, position=pos)
        for c, pos in zip(colors, _even_positions(len(colors)))
    )
    return Gradient(
        id=new_id(rng or default_rng()),
        name=f"{palette.name} Gradient",
        type=GradientType.LINEAR,
        direction=Direction.TO_RIGHT,
        stops=stops,
    )


# --- serialisation -----------------------------------------------------------
def gradient_css(gradient: Gradient) -> str:
    stops_css = ", ".join(
        f"{s.color} {_fmt_position(s.position)}%" for s in gradient.sorted_stops()
    )
    if gradient.type is GradientType.RADIAL:
        return f"radial-gradient(circle, {stops_css})"
    if gradient.type is GradientType.CONIC:
        return f"conic-gradient(from 0deg, {stops_css})"
    return f"linear-gradient({gradient.direction.value}, {stops_css})"


def sample_gradient(gradient: Gradient, steps: int) -> List[Hex]:
    """Evaluate ``steps`` evenly spaced colours along the gradient in sRGB."""
    n = max(2, min(int(steps), 512))
    ordered = gradient.sorted_stops()
    interp = CAColor.interpolate(
        [ca_stop(s.color, s.position / 100.0) for s in ordered],
        space="srgb",
        out_space="srgb",
    )
    return [interp(i / (n - 1)).to_string(hex=True, fit=FIT_HEX) for i in range(n)]


# --- stop editing ------------------------------------------------------------
def add_stop(gradient: Gradient, color: Hex = NEW_STOP_COLOR) -> Gradient:
    if len(gradient.stops) >= MAX_STOPS:
        raise GradientError(f"a gradient holds at most {MAX_STOPS} stops")
    last = gradient.stops[-1]
    new = GradientStop(
        color=canon_hex(color), position=min(last.position + NEW_STOP_OFFSET, 100.0)
    )
    return replace(gradient, stops=gradient.stops + (new,))


def remove_stop(gradient: Gradient, index: int) -> Gradient:
    if len(gradient.stops) <= MIN_STOPS:
        raise GradientError(f"a gradient needs at least {MIN_STOPS} stops")
    _check_index(gradient, index)
    stops = tuple(s for i, s in enumerate(gradient.stops) if i != index)
    return replace(gradient, stops=stops)


def set_stop_color(gradient: Gradient, index: int, color: Hex) -> Gradient:
    _check_index(gradient, index)
    return _replace_stop(gradient, index, color=canon_hex(color))


def set_stop_position(gradient: Gradient, index: int, position: float) -> Gradient:
    _check_index(gradient, index)
    return _replace_stop(gradient, index, position=max(0.0, min(100.0, float(position))))


def _check_index(gradient: Gradient, index: int) -> None:
    if not 0 <= index < len(gradient.stops):
        raise GradientError(f"no stop at index {index}")


def _replace_stop(gradient: Gradient, index: int, **changes: Any) -> Gradient:
    stops = list(gradient.stops)
    stops[index] = replace(stops[index], **changes)
    return replace(gradient, stops=tuple(stops))


__all__ = [
    "Direction",
    "Gradient",
    "GradientError",
    "GradientStop",
    "GradientType",
    "add_stop",
    "generate_random_gradient",
    "gradient_css",
    "gradient_from_palette",
    "remove_stop",
    "sample_gradient",
    "set_stop_color",
    "set_stop_position",
]
