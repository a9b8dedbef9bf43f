from __future__ import annotations

import logging
import random
import secrets
from enum import Enum
from typing import List

log = logging.getLogger(__name__)

Hue = int


class Harmony(str, Enum):
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"


ANALOGOUS_STEP = 25
COMPLEMENTARY_STEP = 15
TRIADIC_DRIFT = 15
SPLIT_STEP = 30


def default_rng() -> random.Random:
    return secrets.SystemRandom()


def _wrap(h: int) -> Hue:
    return h % 360


def parse_harmony(scheme: Harmony | str) -> Harmony | None:
    """Map a scheme name to ``Harmony``; unknown names return None."""
    if isinstance(scheme, Harmony):
        return scheme
    try:
        return Harmony(str(scheme).strip().lower())
    except ValueError:
        return None


def generate_harmonious_colors(
    base_hue: int,
    count: int,
    scheme: Harmony | str,
    *,
    rng: random.Random | None = None,
) -> List[Hue]:
    """
    Return ``count`` hues in [0, 360) related to ``base_hue`` by ``scheme``.

      analogous            base + (i - count//2) * 25
      complementary        base, base + 180, then ±15 * (i//2) alternating
      triadic              base + (i % 3) * 120 + (i//3) * 15
      split-complementary  base, base + 150, base + 210, then base + i * 30

    Unknown scheme names fall back to independent uniform random hues so
    that palettes persisted with newer scheme names still load.
    """
    count = max(0, int(count))
    base = int(base_hue)
    harmony = parse_harmony(scheme)
    hues: List[Hue] = []

    if harmony is Harmony.ANALOGOUS:
        for i in range(count):
            hues.append(_wrap(base + (i - count // 2) * ANALOGOUS_STEP))
    elif harmony is Harmony.COMPLEMENTARY:
        hues += [_wrap(base), _wrap(base + 180)]
        for i in range(2, count):
            sign = 1 if i % 2 == 0 else -1
            hues.append(_wrap(base + sign * COMPLEMENTARY_STEP * (i // 2)))
    elif harmony is Harmony.TRIADIC:
        for i in range(count):
            hues.append(_wrap(base + (i % 3) * 120 + (i // 3) * TRIADIC_DRIFT))
    elif harmony is Harmony.SPLIT_COMPLEMENTARY:
        hues += [_wrap(base), _wrap(base + 150), _wrap(base + 210)]
        for i in range(3, count):
            hues.append(_wrap(base + i * SPLIT_STEP))
    else:
        log.warning("unknown harmony scheme %r, using random hues", scheme)
        rng = rng or default_rng()
        hues = [rng.randrange(360) for _ in range(count)]

    return hues[:count]


__all__ = ["Harmony", "default_rng", "generate_harmonious_colors", "parse_harmony"]
