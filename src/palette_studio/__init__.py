"""Palette Studio – harmony-based palette, gradient and image colour engine."""
from .colors import (
    canon_hex,
    contrast_color,
    contrast_ratio,
    contrast_report,
    hex_to_rgb,
    hsl_to_hex,
    luminance,
    rgb_to_hsl,
    wcag_level,
    wcag_rating,
)
from .export import ExportFormat, export_palette
from .extract import extract_colors_from_image, palette_from_colors
from .gradient import (
    Direction,
    Gradient,
    GradientError,
    GradientStop,
    GradientType,
    add_stop,
    generate_random_gradient,
    gradient_css,
    gradient_from_palette,
    remove_stop,
    sample_gradient,
    set_stop_color,
    set_stop_position,
)
from .harmony import Harmony, generate_harmonious_colors
from .palette import Color, Palette, UseCase, generate_palette, regenerate_palette
from .premade import PREMADE_PALETTES, premade_palettes

__all__ = [
    "Color",
    "Direction",
    "ExportFormat",
    "Gradient",
    "GradientError",
    "GradientStop",
    "GradientType",
    "Harmony",
    "PREMADE_PALETTES",
    "Palette",
    "UseCase",
    "add_stop",
    "canon_hex",
    "contrast_color",
    "contrast_ratio",
    "contrast_report",
    "export_palette",
    "extract_colors_from_image",
    "generate_harmonious_colors",
    "generate_palette",
    "generate_random_gradient",
    "gradient_css",
    "gradient_from_palette",
    "hex_to_rgb",
    "hsl_to_hex",
    "luminance",
    "palette_from_colors",
    "premade_palettes",
    "regenerate_palette",
    "remove_stop",
    "rgb_to_hsl",
    "sample_gradient",
    "set_stop_color",
    "set_stop_position",
    "wcag_level",
    "wcag_rating",
]
