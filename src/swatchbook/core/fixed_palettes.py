"""
Fixed global palettes: gray, red, green, orange and blue.

Gray is hand-authored. The chromatic palettes start from a hard-coded seed
and build five steps (100, 300, 500, 700, 900) with a plain darken/lighten
rule. This rule is deliberately separate from the adaptive generator; the
two give similar but not identical ramps for comparable colors.
"""

from __future__ import annotations

import logging

from .conversion import to_canonical
from .errors import ParseFailure
from .formatting import format_number_for_oklch as fmt
from .ir.color import FALLBACK_COLOR, OKLCHColor
from .ir.palette import Palette, PaletteStrategy
from .renderer import ColorRenderer

logger = logging.getLogger(__name__)

# =============================================================================
# Gray
# =============================================================================

_GRAY_VARIANTS: tuple[tuple[str, str], ...] = (
    ("50", "oklch(97% 0 0)"),
    ("100", "oklch(92.2% 0 0)"),
    ("200", "oklch(87% 0 0)"),
    ("300", "oklch(70.8% 0 0)"),
    ("400", "oklch(55.6% 0 0)"),
    ("500", "oklch(43.9% 0 0)"),
    ("600", "oklch(37.1% 0 0)"),
    ("700", "oklch(26.9% 0 0)"),
    ("800", "oklch(20.5% 0 0)"),
    ("900", "oklch(14.5% 0 0)"),
    ("white", "oklch(100% 0 0)"),
    ("black", "oklch(0% 0 0)"),
)

GRAY_BASE = "oklch(43.9% 0 0)"


def generate_gray_palette() -> Palette:
    """The neutral ramp, with white and black endpoints."""
    return Palette(
        name="gray",
        base_color=GRAY_BASE,
        variants=dict(_GRAY_VARIANTS),
        strategy=PaletteStrategy.FIXED_RAMP,
    )


# =============================================================================
# Chromatic ramps
# =============================================================================

FIXED_RAMP_SEEDS: tuple[tuple[str, str], ...] = (
    ("red", "#b91c1c"),
    ("green", "#187C3E"),
    ("orange", "#D66400"),
    ("blue", "#0263C9"),
)

_SEED_BY_NAME = dict(FIXED_RAMP_SEEDS)

# Seeds above this chroma get a muted 900 step
_DARK_CHROMA_LIMIT = 0.13
_DARK_CHROMA = 0.11


def _css(L: float, C: float, H: float) -> str:
    return f"oklch({fmt(L * 100)}% {fmt(C)} {fmt(H)})"


def build_fixed_ramp(seed: OKLCHColor, name: str) -> Palette:
    """Five-step ramp around a seed placed at 500.

    Args:
        seed: Canonical OKLCH triple of the seed.
        name: Palette name.

    Returns:
        Palette with variants 100, 300, 500, 700 and 900.
    """
    L, C, H = seed.l, seed.c, seed.h
    base = _css(L, C, H)
    chroma_900 = _DARK_CHROMA if C > _DARK_CHROMA_LIMIT else C

    variants = {
        "100": f"oklch(97% {fmt(C * 0.5)} {fmt(H)})",
        "300": _css(min(1.0, L + 0.2), C, H),
        "500": base,
        "700": _css(max(0.0, L - 0.15), C, H),
        "900": _css(max(0.0, L - 0.3), chroma_900, H),
    }

    return Palette(
        name=name,
        base_color=base,
        variants=variants,
        strategy=PaletteStrategy.FIXED_RAMP,
    )


def generate_fixed_palette(
    name: str,
    seed_color: str,
    renderer: ColorRenderer | None = None,
) -> Palette:
    """Build a fixed ramp from a seed expression.

    An unreadable seed is logged and the ramp is built from FALLBACK_COLOR.
    """
    try:
        seed = to_canonical(seed_color, renderer)
    except ParseFailure as e:
        logger.error("Could not parse seed color %r for palette %r: %s", seed_color, name, e)
        seed = FALLBACK_COLOR
    return build_fixed_ramp(seed, name)


def generate_red_palette(renderer: ColorRenderer | None = None) -> Palette:
    return generate_fixed_palette("red", _SEED_BY_NAME["red"], renderer)


def generate_green_palette(renderer: ColorRenderer | None = None) -> Palette:
    return generate_fixed_palette("green", _SEED_BY_NAME["green"], renderer)


def generate_orange_palette(renderer: ColorRenderer | None = None) -> Palette:
    return generate_fixed_palette("orange", _SEED_BY_NAME["orange"], renderer)


def generate_blue_palette(renderer: ColorRenderer | None = None) -> Palette:
    return generate_fixed_palette("blue", _SEED_BY_NAME["blue"], renderer)


def generate_global_palettes(renderer: ColorRenderer | None = None) -> list[Palette]:
    """Gray followed by the chromatic ramps, in display order."""
    palettes = [generate_gray_palette()]
    for name, seed_color in FIXED_RAMP_SEEDS:
        palettes.append(generate_fixed_palette(name, seed_color, renderer))
    return palettes
