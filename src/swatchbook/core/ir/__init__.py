"""Intermediate representation types for swatchbook."""

from .color import BLACK_RGB, FALLBACK_COLOR, RGB, WHITE_RGB, OKLCHColor
from .config import SeedSpec, SwatchbookConfig
from .palette import (
    ADAPTIVE_VARIANTS,
    BAND_STEPS,
    FALLBACK_CSS,
    GLOBAL_VARIANTS,
    SATURATION_VARIANTS,
    TONAL_STEPS,
    Palette,
    PaletteStrategy,
    TextColor,
)

__all__ = [
    "ADAPTIVE_VARIANTS",
    "BAND_STEPS",
    "BLACK_RGB",
    "FALLBACK_COLOR",
    "FALLBACK_CSS",
    "GLOBAL_VARIANTS",
    "OKLCHColor",
    "Palette",
    "PaletteStrategy",
    "RGB",
    "SATURATION_VARIANTS",
    "SeedSpec",
    "SwatchbookConfig",
    "TONAL_STEPS",
    "TextColor",
    "WHITE_RGB",
]
