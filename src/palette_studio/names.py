"""
Static name tables: colour names per hue bucket, palette adjectives/nouns.
Read-only; built once at import.
"""
from __future__ import annotations

import random
from types import MappingProxyType
from typing import Mapping

COLOR_NAMES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "red": ("Crimson", "Ruby", "Scarlet", "Coral", "Rose", "Cherry", "Vermillion", "Carmine"),
        "orange": ("Amber", "Tangerine", "Peach", "Apricot", "Copper", "Rust", "Terracotta", "Sienna"),
        "yellow": ("Gold", "Honey", "Lemon", "Canary", "Saffron", "Mustard", "Sunflower", "Buttercup"),
        "green": ("Sage", "Olive", "Forest", "Mint", "Emerald", "Jade", "Moss", "Fern"),
        "cyan": ("Teal", "Aqua", "Turquoise", "Seafoam", "Cyan", "Caribbean", "Lagoon", "Marine"),
        "blue": ("Azure", "Cobalt", "Navy", "Sapphire", "Sky", "Ocean", "Denim", "Indigo"),
        "purple": ("Lavender", "Violet", "Plum", "Amethyst", "Grape", "Mauve", "Orchid", "Iris"),
        "pink": ("Blush", "Salmon", "Fuchsia", "Magenta", "Rose", "Peony", "Flamingo", "Bubblegum"),
        "neutral": ("Charcoal", "Slate", "Stone", "Cloud", "Ivory", "Sand", "Pearl", "Smoke"),
    }
)

ADJECTIVES: tuple[str, ...] = (
    "Serene", "Bold", "Dreamy", "Crisp", "Warm", "Cool", "Mystic", "Sunset",
    "Ocean", "Forest", "Urban", "Nordic", "Tropical", "Desert", "Midnight",
    "Dawn", "Autumn", "Spring", "Winter", "Summer", "Cosmic", "Earthen",
)
NOUNS: tuple[str, ...] = (
    "Horizon", "Whisper", "Echo", "Wave", "Breeze", "Glow", "Shadow", "Light",
    "Mood", "Vibe", "Essence", "Spirit", "Soul", "Dream", "Vision", "Aura",
)

NEUTRAL_SATURATION = 10

# (exclusive upper bound, bucket); red also wraps from 345
_HUE_BUCKETS: tuple[tuple[float, str], ...] = (
    (15, "red"),
    (45, "orange"),
    (70, "yellow"),
    (160, "green"),
    (200, "cyan"),
    (260, "blue"),
    (300, "purple"),
    (345, "pink"),
)


def color_category(h: float) -> str:
    """Hue bucket for ``h`` degrees."""
    h = h % 360
    for upper, bucket in _HUE_BUCKETS:
        if h < upper:
            return bucket
    return "red"


def color_name(h: float, s: float, rng: random.Random) -> str:
    bucket = "neutral" if s < NEUTRAL_SATURATION else color_category(h)
    return rng.choice(COLOR_NAMES[bucket])


def palette_name(rng: random.Random) -> str:
    return f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}"


__all__ = [
    "ADJECTIVES",
    "COLOR_NAMES",
    "NEUTRAL_SATURATION",
    "NOUNS",
    "color_category",
    "color_name",
    "palette_name",
]
