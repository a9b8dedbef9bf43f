from __future__ import annotations

import json
import re
from enum import Enum
from typing import Callable, Dict

from .colors import hex_to_rgb
from .palette import Palette


class ExportFormat(str, Enum):
    CSS = "css"
    SCSS = "scss"
    TAILWIND = "tailwind"
    JSON = "json"
    SWIFT = "swift"
    HEX = "hex"


def _slug(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


def _css(p: Palette) -> str:
    slug = _slug(p.name)
    lines = [f"  --{slug}-{i}: {c.hex};" for i, c in enumerate(p.colors, 1)]
    return ":root {\n" + f"  /* {p.name} */\n" + "\n".join(lines) + "\n}"


def _scss(p: Palette) -> str:
    slug = _slug(p.name)
    n = len(p.colors)
    variables = [f"${slug}-{i}: {c.hex};" for i, c in enumerate(p.colors, 1)]
    entries = [
        f'  "{i}": ${slug}-{i}' + ("," if i < n else "") for i in range(1, n + 1)
    ]
    return (
        f"// {p.name}\n"
        + "\n".join(variables)
        + f"\n\n${slug}: (\n"
        + "\n".join(entries)
        + "\n);"
    )


def _tailwind(p: Palette) -> str:
    slug = _slug(p.name)
    shades = "\n".join(f"          {i * 100}: '{c.hex}'," for i, c in enumerate(p.colors, 1))
    return (
        "// tailwind.config.js\n"
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: {\n"
        "      colors: {\n"
        f"        '{slug}': {{\n"
        f"{shades}\n"
        "        }\n"
        "      }\n"
        "    }\n"
        "  }\n"
        "}"
    )


def _json(p: Palette) -> str:
    payload = {
        "name": p.name,
        "colors": [
            {"name": c.name, "hex": c.hex, "position": i}
            for i, c in enumerate(p.colors, 1)
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _swift(p: Palette) -> str:
    prefix = _slug(p.name).replace("-", "")
    lines = []
    for c in p.colors:
        r, g, b = hex_to_rgb(c.hex)
        ident = re.sub(r"\s+", "", c.name)
        lines.append(
            f"    static let {prefix}{ident} = Color("
            f"red: {r / 255:.3f}, green: {g / 255:.3f}, blue: {b / 255:.3f})"
        )
    return f"// {p.name}\nimport SwiftUI\n\nextension Color {{\n" + "\n".join(lines) + "\n}"


def _hex(p: Palette) -> str:
    return "\n".join(c.hex for c in p.colors)


_EXPORTERS: Dict[ExportFormat, Callable[[Palette], str]] = {
    ExportFormat.CSS: _css,
    ExportFormat.SCSS: _scss,
    ExportFormat.TAILWIND: _tailwind,
    ExportFormat.JSON: _json,
    ExportFormat.SWIFT: _swift,
    ExportFormat.HEX: _hex,
}


def export_palette(palette: Palette, fmt: ExportFormat | str) -> str:
    """Render ``palette`` as a snippet for CSS, SCSS, Tailwind, JSON, SwiftUI or plain hex."""
    try:
        key = ExportFormat(fmt)
    except ValueError:
        raise ValueError(
            f"unknown export format {fmt!r}; expected one of {[f.value for f in ExportFormat]}"
        ) from None
    return _EXPORTERS[key](palette)


__all__ = ["ExportFormat", "export_palette"]
