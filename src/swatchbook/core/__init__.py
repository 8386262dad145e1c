"""
Core color model, palette generation and contrast evaluation.
"""

from .contrast import (
    WCAG_AA_RATIO,
    ContrastReport,
    contrast_ratio,
    decide_text_color,
    evaluate_contrast,
    relative_luminance,
    text_color_for,
)
from .conversion import parse_oklch, to_canonical, to_css_notation, to_hex, to_hsl, to_rgb
from .css_export import VARIANT_ORDER, generate_css_custom_properties, ordered_variants
from .errors import ConfigError, ParseFailure, SwatchbookError
from .fixed_palettes import (
    generate_blue_palette,
    generate_fixed_palette,
    generate_global_palettes,
    generate_gray_palette,
    generate_green_palette,
    generate_orange_palette,
    generate_red_palette,
)
from .formatting import format_number_for_oklch
from .luminosity import LUMINOSITY_RANGES, step_for_luminosity
from .oklch import generate_adaptive_palette, generate_color_variants
from .palette_set import PaletteSet, build_palette_set, generate_palette
from .renderer import ColorAideRenderer, ColorRenderer, Notation, get_default_renderer
from .swatches import Swatch, build_swatches

__all__ = [
    "ColorAideRenderer",
    "ColorRenderer",
    "ConfigError",
    "ContrastReport",
    "LUMINOSITY_RANGES",
    "Notation",
    "PaletteSet",
    "ParseFailure",
    "Swatch",
    "SwatchbookError",
    "VARIANT_ORDER",
    "WCAG_AA_RATIO",
    "build_palette_set",
    "build_swatches",
    "contrast_ratio",
    "decide_text_color",
    "evaluate_contrast",
    "format_number_for_oklch",
    "generate_adaptive_palette",
    "generate_blue_palette",
    "generate_color_variants",
    "generate_css_custom_properties",
    "generate_fixed_palette",
    "generate_global_palettes",
    "generate_gray_palette",
    "generate_green_palette",
    "generate_orange_palette",
    "generate_palette",
    "generate_red_palette",
    "get_default_renderer",
    "ordered_variants",
    "parse_oklch",
    "relative_luminance",
    "step_for_luminosity",
    "text_color_for",
    "to_canonical",
    "to_css_notation",
    "to_hex",
    "to_hsl",
    "to_rgb",
]
