"""
Curated palettes shown before anything is generated. Hand-picked, never mutated.
"""
from __future__ import annotations

from .palette import Color, Palette, UseCase, parse_use_case


def _p(pid: str, name: str, category: UseCase, *colors: tuple[str, str]) -> Palette:
    return Palette(
        id=pid,
        name=name,
        colors=tuple(Color(hex=h, name=n) for h, n in colors),
        category=category.value,
    )


PREMADE_PALETTES: tuple[Palette, ...] = (
    _p("sunset-vibes", "Sunset Vibes", UseCase.VIBRANT,
       ("#FF6B6B", "Coral"), ("#FEC89A", "Peach"), ("#FFD93D", "Gold"),
       ("#6BCB77", "Mint"), ("#4D96FF", "Sky")),
    _p("ocean-depths", "Ocean Depths", UseCase.NATURE,
       ("#0A2647", "Deep Navy"), ("#144272", "Ocean"), ("#205295", "Azure"),
       ("#2C74B3", "Cerulean"), ("#36AEE0", "Sky Blue")),
    _p("forest-morning", "Forest Morning", UseCase.NATURE,
       ("#1A4D2E", "Forest"), ("#4F6F52", "Sage"), ("#739072", "Moss"),
       ("#A3B899", "Lichen"), ("#E9F5DB", "Morning Dew")),
    _p("berry-bliss", "Berry Bliss", UseCase.VIBRANT,
       ("#9B2335", "Raspberry"), ("#C41E3A", "Cardinal"), ("#E75480", "Pink"),
       ("#FF85A2", "Blush"), ("#FFB6C1", "Rose")),
    _p("midnight-luxe", "Midnight Luxe", UseCase.BRANDING,
       ("#1A1A2E", "Midnight"), ("#16213E", "Navy"), ("#0F3460", "Indigo"),
       ("#E94560", "Ruby"), ("#F5F5F5", "Pearl")),
    _p("earthy-tones", "Earthy Tones", UseCase.INTERIOR,
       ("#5C4033", "Espresso"), ("#8B7355", "Taupe"), ("#C4A77D", "Sand"),
       ("#DDD5B7", "Cream"), ("#F5F1E3", "Ivory")),
    _p("cotton-candy", "Cotton Candy", UseCase.PASTEL,
       ("#FFD1DC", "Pink"), ("#E2CFF4", "Lavender"), ("#BFEFFF", "Sky"),
       ("#C1FFD7", "Mint"), ("#FFF5BA", "Butter")),
    _p("neon-nights", "Neon Nights", UseCase.VIBRANT,
       ("#FF00FF", "Magenta"), ("#00FFFF", "Cyan"), ("#FF6EC7", "Hot Pink"),
       ("#7DF9FF", "Electric Blue"), ("#39FF14", "Neon Green")),
    _p("minimalist-mono", "Minimalist Mono", UseCase.MINIMAL,
       ("#111111", "Onyx"), ("#444444", "Charcoal"), ("#888888", "Gray"),
       ("#CCCCCC", "Silver"), ("#F8F8F8", "Snow")),
    _p("autumn-harvest", "Autumn Harvest", UseCase.NATURE,
       ("#8B4513", "Saddle"), ("#CD853F", "Peru"), ("#DAA520", "Goldenrod"),
       ("#D2691E", "Chocolate"), ("#F4A460", "Sandy")),
    _p("tech-startup", "Tech Startup", UseCase.UI_DESIGN,
       ("#6366F1", "Indigo"), ("#8B5CF6", "Violet"), ("#A855F7", "Purple"),
       ("#1E293B", "Slate"), ("#F8FAFC", "Ghost")),
    _p("vintage-rose", "Vintage Rose", UseCase.FASHION,
       ("#8E6B5E", "Mocha"), ("#C9ADA7", "Dusty Rose"), ("#E8D5D1", "Blush"),
       ("#F2E9E4", "Cream"), ("#9A8C98", "Lavender Gray")),
)


def premade_palettes(category: UseCase | str | None = None) -> list[Palette]:
    if category is None:
        return list(PREMADE_PALETTES)
    uc = parse_use_case(category)
    return [p for p in PREMADE_PALETTES if p.category == uc.value]


__all__ = ["PREMADE_PALETTES", "premade_palettes"]
