"""
Per-variant swatch views.

A swatch bundles everything needed to display one variant: its label, the
rendered value with hex and HSL siblings, the overlay text color and the
WCAG contrast figures.
"""

from __future__ import annotations

from dataclasses import dataclass

from .contrast import ContrastReport, evaluate_contrast
from .conversion import to_rgb
from .css_export import ordered_variants
from .formatting import rgb_to_hex, rgb_to_hsl
from .ir.palette import GLOBAL_VARIANTS, Palette, TextColor
from .renderer import ColorRenderer, resolve_renderer


@dataclass(frozen=True)
class Swatch:
    """Display data for one palette variant.

    ``contrast`` is None when the value could not be converted to RGB; hex
    and HSL then hold their black defaults and the text color is black.
    """

    palette: str
    variant: str
    label: str
    value: str
    hex: str
    hsl: str
    text_color: TextColor
    contrast: ContrastReport | None
    is_user_color: bool


def swatch_label(palette_name: str, variant: str) -> str:
    if variant in GLOBAL_VARIANTS:
        return variant
    return f"{palette_name}-{variant}"


def build_swatch(
    palette: Palette,
    variant: str,
    renderer: ColorRenderer | None = None,
) -> Swatch:
    value = palette.variants[variant]
    rgb = to_rgb(value, renderer)

    if rgb is None:
        hex_value = "#000000"
        hsl_value = "hsl(0, 0%, 0%)"
        contrast = None
        text_color = TextColor.BLACK
    else:
        hex_value = rgb_to_hex(rgb)
        hsl_value = rgb_to_hsl(rgb)
        contrast = evaluate_contrast(rgb)
        text_color = contrast.text_color

    return Swatch(
        palette=palette.name,
        variant=variant,
        label=swatch_label(palette.name, variant),
        value=value,
        hex=hex_value,
        hsl=hsl_value,
        text_color=text_color,
        contrast=contrast,
        is_user_color=palette.is_user_color(variant),
    )


def build_swatches(palette: Palette, renderer: ColorRenderer | None = None) -> list[Swatch]:
    """Swatches for every variant of a palette, in canonical order."""
    renderer = resolve_renderer(renderer)
    return [build_swatch(palette, variant, renderer) for variant, _ in ordered_variants(palette)]
