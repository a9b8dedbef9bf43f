# extract.py – dominant colours from raster images
#   - decode with Pillow, downscale so the longest side is <= max_size
#   - quantise each channel to the nearest multiple of quant_step (NumPy)
#   - rank buckets by pixel count, oversample, drop near-duplicate hues
#   - any load/decode failure resolves to [] instead of raising

from __future__ import annotations

import asyncio
import base64
import io
import logging
import random
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence, Tuple, Union
from urllib.parse import unquote_to_bytes

import httpx
import numpy as np
from PIL import Image

from .colors import rgb_to_hex, rgb_to_hsl
from .config import ExtractorSettings
from .harmony import default_rng
from .names import color_name
from .palette import Color, Palette, new_id

log = logging.getLogger(__name__)

ImageSource = Union[bytes, bytearray, memoryview, str, Path, BinaryIO]
Bucket = Tuple[Tuple[int, int, int], int]  # ((r, g, b), pixel count)

EXTRACTED_PALETTE_NAME = "Extracted Palette"
EXTRACTED_CATEGORY = "nature"

_DECODE_ERRORS = (
    OSError,  # includes PIL.UnidentifiedImageError
    ValueError,
    SyntaxError,  # raised by some truncated-file plugins
    Image.DecompressionBombError,
    httpx.HTTPError,
    httpx.InvalidURL,
)


# --- loading -----------------------------------------------------------------
async def _load_bytes(
    source: ImageSource,
    settings: ExtractorSettings,
    client: Optional[httpx.AsyncClient],
) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, str):
        if source.startswith("data:"):
            return _decode_data_url(source)
        if source.startswith(("http://", "https://")):
            return await _fetch(source, settings, client)
        source = Path(source)
    if isinstance(source, Path):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, source.read_bytes)
    if hasattr(source, "read"):
        return source.read()
    raise ValueError(f"unsupported image source: {type(source).__name__}")


def _decode_data_url(url: str) -> bytes:
    header, sep, payload = url.partition(",")
    if not sep:
        raise ValueError("malformed data URL")
    if header.endswith(";base64"):
        return base64.b64decode(payload, validate=True)
    return unquote_to_bytes(payload)


async def _fetch(
    url: str, settings: ExtractorSettings, client: Optional[httpx.AsyncClient]
) -> bytes:
    if client is not None:
        resp = await client.get(url)
        resp.raise_for_status()
        return resp.content
    async with httpx.AsyncClient(
        timeout=settings.fetch_timeout, follow_redirects=True
    ) as c:
        resp = await c.get(url)
        resp.raise_for_status()
        return resp.content


def decode_pixels(data: bytes, max_size: int = 100) -> np.ndarray:
    """Decode image bytes into an (N, 3) uint8 array, downscaled to max_size."""
    with Image.open(io.BytesIO(data)) as im:
        # JPEG decodes at a reduced scale, no larger than needed
        im.draft("RGB", (max_size, max_size))
        img = im.convert("RGB")
    w, h = img.size
    scale = min(max_size / w, max_size / h, 1.0)
    size = (max(1, int(w * scale)), max(1, int(h * scale)))
    if size != img.size:
        img = img.resize(size, Image.Resampling.BILINEAR)
    return np.asarray(img, dtype=np.uint8).reshape(-1, 3)


# --- quantisation ------------------------------------------------------------
def rank_buckets(pixels: np.ndarray, step: int = 32) -> List[Bucket]:
    """
    Quantise pixels and count them per bucket, most frequent first.
    Ties keep first-seen order.
    """
    px = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
    if px.size == 0:
        return []
    # round half up; 256 is not a byte, clamp it
    q = np.clip(np.floor(px / step + 0.5) * step, 0, 255).astype(np.int32)
    buckets, first, counts = np.unique(q, axis=0, return_index=True, return_counts=True)
    order = np.lexsort((first, -counts))
    return [(tuple(int(c) for c in buckets[i]), int(counts[i])) for i in order]


def _hue_distance(a: float, b: float) -> float:
    # around the wheel: 355 and 5 are 10 apart, not 350 as a plain difference gives
    d = abs(a - b) % 360
    return min(d, 360 - d)


def _named(rgb: Tuple[int, int, int], rng: random.Random) -> Color:
    h, s, _ = rgb_to_hsl(*rgb)
    return Color(hex=rgb_to_hex(*rgb), name=color_name(h, s, rng))


def pick_colors(
    ranked: Sequence[Bucket],
    color_count: int,
    *,
    rng: Optional[random.Random] = None,
    settings: Optional[ExtractorSettings] = None,
) -> List[Color]:
    settings = settings or ExtractorSettings()
    rng = rng or default_rng()
    candidates = list(ranked[: color_count * settings.oversample])
    if color_count <= 0 or not candidates:
        return []

    accepted: List[Color] = []
    used_hues: List[int] = []
    for rgb, _count in candidates:
        if len(accepted) >= color_count:
            break
        h, s, _ = rgb_to_hsl(*rgb)
        if s > settings.neutral_saturation:
            if any(_hue_distance(h, u) < settings.hue_threshold for u in used_hues):
                continue
            used_hues.append(h)
        accepted.append(_named(rgb, rng))

    if len(accepted) < color_count:
        log.debug("only %d distinct colours, padding to %d", len(accepted), color_count)
    while len(accepted) < color_count:
        rgb, _count = rng.choice(candidates)
        accepted.append(_named(rgb, rng))

    return accepted


def extract_colors_from_pixels(
    pixels: np.ndarray,
    color_count: int = 5,
    *,
    rng: Optional[random.Random] = None,
    settings: Optional[ExtractorSettings] = None,
) -> List[Color]:
    settings = settings or ExtractorSettings()
    ranked = rank_buckets(pixels, settings.quant_step)
    return pick_colors(ranked, color_count, rng=rng, settings=settings)


# --- public async API --------------------------------------------------------
async def extract_colors_from_image(
    source: ImageSource,
    color_count: int = 5,
    *,
    rng: Optional[random.Random] = None,
    settings: Optional[ExtractorSettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[Color]:
    """
    Dominant colours of an image given as bytes, a path, a file object,
    a data: URL or an http(s) URL. Resolves to [] if the image cannot be
    loaded or decoded.
    """
    settings = settings or ExtractorSettings()
    try:
        data = await _load_bytes(source, settings, client)
        loop = asyncio.get_running_loop()
        pixels = await loop.run_in_executor(None, decode_pixels, data, settings.max_size)
    except _DECODE_ERRORS as exc:
        log.warning("image extraction failed: %s", exc)
        return []
    return extract_colors_from_pixels(pixels, color_count, rng=rng, settings=settings)


def palette_from_colors(
    colors: Sequence[Color],
    *,
    name: str = EXTRACTED_PALETTE_NAME,
    category: str = EXTRACTED_CATEGORY,
    rng: Optional[random.Random] = None,
) -> Palette:
    return Palette(
        id=new_id(rng or default_rng()),
        name=name,
        colors=tuple(colors),
        category=category,
    )


__all__ = [
    "EXTRACTED_CATEGORY",
    "EXTRACTED_PALETTE_NAME",
    "decode_pixels",
    "extract_colors_from_image",
    "extract_colors_from_pixels",
    "palette_from_colors",
    "pick_colors",
    "rank_buckets",
]
