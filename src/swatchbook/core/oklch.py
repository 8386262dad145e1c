"""
Adaptive OKLCH palette generation.

Derives a twelve-entry tonal ramp (50-900, fade, bright) from one
arbitrary seed color. The seed's own rendering is placed verbatim at the
step its lightness falls into; every other step is regenerated from the
seed's chroma and hue.
"""

from __future__ import annotations

import logging

from .conversion import to_canonical, to_css_notation
from .errors import ParseFailure
from .formatting import format_number_for_oklch as fmt
from .ir.color import OKLCHColor
from .ir.palette import ADAPTIVE_VARIANTS, BAND_STEPS, FALLBACK_CSS, Palette, PaletteStrategy
from .luminosity import band_midpoint, step_for_luminosity
from .renderer import ColorRenderer

logger = logging.getLogger(__name__)

MAX_CHROMA = 0.33


def _clamp_chroma(chroma: float) -> float:
    return max(0.0, min(MAX_CHROMA, chroma))


def _chroma_for_lightness(base_chroma: float, lightness: float) -> float:
    """Scale chroma down toward the lightness extremes.

    Heuristic stand-in for perceptual chroma compression: the further a
    step sits from the mid-tones, the less chroma it keeps.
    """
    if lightness >= 0.95:
        factor = 0.3
    elif lightness >= 0.85:
        factor = 0.6
    elif lightness <= 0.25:
        factor = 0.4
    elif lightness <= 0.35:
        factor = 0.7
    else:
        factor = 1.0
    return _clamp_chroma(base_chroma * factor)


def generate_adaptive_palette(
    seed: OKLCHColor,
    exact_rendering: str,
    name: str,
) -> Palette:
    """Generate the tonal ramp for one seed color.

    Args:
        seed: Canonical OKLCH triple of the seed.
        exact_rendering: The seed's own notation, placed at its step unchanged.
        name: Palette name.

    Returns:
        Palette with variants 50-900, fade and bright.
    """
    L, C, H = seed.l, seed.c, seed.h
    base_step = step_for_luminosity(L * 100)
    hue = fmt(H)

    variants: dict[str, str] = {}

    # Very light steps: pinned lightness, a trace of the seed's chroma
    variants["50"] = f"oklch(100% {fmt(_clamp_chroma(max(0.005, C * 0.05)))} {hue})"
    variants["100"] = f"oklch(98% {fmt(_clamp_chroma(max(0.01, C * 0.15)))} {hue})"

    variants[base_step] = exact_rendering

    for step in BAND_STEPS:
        if step == base_step:
            continue
        target_percent = band_midpoint(step)
        chroma = _chroma_for_lightness(C, target_percent / 100)
        variants[step] = f"oklch({fmt(target_percent)}% {fmt(chroma)} {hue})"

    # Saturation variants keep the seed's exact lightness and hue
    base_lightness = fmt(L * 100)
    variants["fade"] = f"oklch({base_lightness}% {fmt(_clamp_chroma(C * 0.6))} {hue})"
    variants["bright"] = f"oklch({base_lightness}% {fmt(min(MAX_CHROMA, C * 1.4))} {hue})"

    return Palette(
        name=name,
        base_color=exact_rendering,
        variants=variants,
        strategy=PaletteStrategy.ADAPTIVE,
    )


def fallback_palette(name: str) -> Palette:
    """Degenerate palette for an unreadable seed: every variant is black."""
    return Palette(
        name=name,
        base_color=FALLBACK_CSS,
        variants={variant: FALLBACK_CSS for variant in ADAPTIVE_VARIANTS},
        strategy=PaletteStrategy.ADAPTIVE,
    )


def generate_color_variants(
    value: str,
    name: str,
    renderer: ColorRenderer | None = None,
) -> Palette:
    """Generate an adaptive palette from any color expression.

    An unreadable seed is logged and yields ``fallback_palette(name)``
    instead of an exception.
    """
    try:
        seed = to_canonical(value, renderer)
    except ParseFailure as e:
        logger.error("Could not parse seed color %r for palette %r: %s", value, name, e)
        return fallback_palette(name)

    return generate_adaptive_palette(seed, to_css_notation(seed), name)
