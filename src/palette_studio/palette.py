# palette.py – use-case driven palette generation
#   - UseCase → (harmony choices, saturation range, lightness range)
#   - 5 hues from the harmony generator, random s/l inside the ranges
#   - always exactly 5 colours in hue-generation order

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from .colors import Hex, hsl_to_hex
from .harmony import Harmony, default_rng, generate_harmonious_colors
from .names import color_name, palette_name

log = logging.getLogger(__name__)

PALETTE_SIZE = 5
_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 7


@dataclass(frozen=True)
class Color:
    hex: Hex
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"hex": self.hex, "name": self.name}


@dataclass(frozen=True)
class Palette:
    id: str
    name: str
    colors: tuple[Color, ...]
    category: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "colors": [c.to_dict() for c in self.colors],
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Palette":
        colors = tuple(Color(hex=str(c["hex"]), name=str(c.get("name", ""))) for c in data["colors"])
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            colors=colors,
            category=str(data.get("category") or ""),
        )


class UseCase(str, Enum):
    BRANDING = "branding"
    UI_DESIGN = "ui-design"
    INTERIOR = "interior"
    FASHION = "fashion"
    NATURE = "nature"
    MINIMAL = "minimal"
    VIBRANT = "vibrant"
    PASTEL = "pastel"


@dataclass(frozen=True)
class UseCaseConfig:
    harmonies: tuple[Harmony, ...]  # one picked uniformly per palette
    saturation: tuple[float, float]
    lightness: tuple[float, float]
    title: str = ""
    description: str = ""


USE_CASES: Mapping[UseCase, UseCaseConfig] = MappingProxyType(
    {
        UseCase.BRANDING: UseCaseConfig(
            (Harmony.COMPLEMENTARY, Harmony.ANALOGOUS), (50, 80), (35, 65),
            "Branding", "Corporate & brand identity",
        ),
        UseCase.UI_DESIGN: UseCaseConfig(
            (Harmony.ANALOGOUS,), (40, 70), (40, 85),
            "UI Design", "Apps & digital products",
        ),
        UseCase.INTERIOR: UseCaseConfig(
            (Harmony.ANALOGOUS,), (20, 50), (45, 75),
            "Interior", "Home & space design",
        ),
        UseCase.FASHION: UseCaseConfig(
            (Harmony.TRIADIC, Harmony.SPLIT_COMPLEMENTARY), (45, 85), (35, 70),
            "Fashion", "Clothing & accessories",
        ),
        UseCase.NATURE: UseCaseConfig(
            (Harmony.ANALOGOUS,), (30, 60), (40, 70),
            "Nature", "Earth-inspired tones",
        ),
        UseCase.MINIMAL: UseCaseConfig(
            (Harmony.ANALOGOUS,), (5, 25), (50, 95),
            "Minimal", "Clean & sophisticated",
        ),
        UseCase.VIBRANT: UseCaseConfig(
            (Harmony.TRIADIC,), (75, 100), (45, 60),
            "Vibrant", "Bold & energetic",
        ),
        UseCase.PASTEL: UseCaseConfig(
            (Harmony.ANALOGOUS,), (40, 70), (75, 90),
            "Pastel", "Soft & dreamy",
        ),
    }
)


def parse_use_case(value: UseCase | str) -> UseCase:
    if isinstance(value, UseCase):
        return value
    try:
        return UseCase(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"unknown use case {value!r}; expected one of {[u.value for u in UseCase]}"
        ) from None


def new_id(rng: random.Random) -> str:
    """Short opaque token used as a storage/dedup key by callers."""
    return "".join(rng.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def _uniform(rng: random.Random, span: tuple[float, float]) -> float:
    lo, hi = span
    return lo + rng.random() * (hi - lo)


def generate_palette(
    use_case: UseCase | str, *, rng: random.Random | None = None
) -> Palette:
    rng = rng or default_rng()
    uc = parse_use_case(use_case)
    cfg = USE_CASES[uc]

    base_hue = rng.randrange(360)
    harmony = cfg.harmonies[0] if len(cfg.harmonies) == 1 else rng.choice(cfg.harmonies)
    name = palette_name(rng)
    hues = generate_harmonious_colors(base_hue, PALETTE_SIZE, harmony, rng=rng)

    colors = []
    for h in hues:
        s = _uniform(rng, cfg.saturation)
        l = _uniform(rng, cfg.lightness)
        colors.append(Color(hex=hsl_to_hex(h, s, l), name=color_name(h, s, rng)))

    log.debug("palette %s: base=%d harmony=%s", uc.value, base_hue, harmony.value)
    return Palette(id=new_id(rng), name=name, colors=tuple(colors), category=uc.value)


def regenerate_palette(
    previous: Palette,
    locks: Sequence[bool],
    *,
    rng: random.Random | None = None,
) -> Palette:
    """
    Fresh palette in the same category; locked indices keep their colour.
    """
    if len(previous.colors) != PALETTE_SIZE:
        raise ValueError(f"palette must have {PALETTE_SIZE} colours")
    if len(locks) != PALETTE_SIZE:
        raise ValueError(f"expected {PALETTE_SIZE} lock flags, got {len(locks)}")
    fresh = generate_palette(previous.category, rng=rng)
    merged = tuple(
        old if locked else new
        for old, new, locked in zip(previous.colors, fresh.colors, locks)
    )
    return Palette(id=fresh.id, name=fresh.name, colors=merged, category=fresh.category)


__all__ = [
    "Color",
    "PALETTE_SIZE",
    "Palette",
    "USE_CASES",
    "UseCase",
    "UseCaseConfig",
    "generate_palette",
    "new_id",
    "parse_use_case",
    "regenerate_palette",
]
