"""swatchbook: perceptually uniform OKLCH palettes with WCAG contrast checks."""

from ._version import __version__
from .core import (
    PaletteSet,
    build_palette_set,
    build_swatches,
    generate_color_variants,
    generate_css_custom_properties,
    generate_global_palettes,
)
from .core.ir import OKLCHColor, Palette, PaletteStrategy

__all__ = [
    "__version__",
    "OKLCHColor",
    "Palette",
    "PaletteSet",
    "PaletteStrategy",
    "build_palette_set",
    "build_swatches",
    "generate_color_variants",
    "generate_css_custom_properties",
    "generate_global_palettes",
]
