"""
Conversions between color notations.

The canonical form of every color is an ``OKLCHColor``. Hex and HSL are
derived from an 8-bit device RGB triple, obtained from the renderer's
rgb() output or, when that output is not an rgb() notation, by
rasterizing a single pixel.
"""

from __future__ import annotations

import logging

from .errors import ParseFailure
from .formatting import oklch_to_css, rgb_to_hex, rgb_to_hsl
from .ir.color import RGB, OKLCHColor
from .notation import read_oklch, read_rgb
from .renderer import ColorRenderer, Notation, resolve_renderer

logger = logging.getLogger(__name__)

# Components of the canonical notation keep four decimals
CANONICAL_PRECISION = 4

# Precision used when a canonical color is handed back to the renderer
_RENDER_PRECISION = 10

ColorInput = str | OKLCHColor


def to_canonical(value: str, renderer: ColorRenderer | None = None) -> OKLCHColor:
    """Reduce any color expression to its OKLCH triple.

    Args:
        value: Hex, named, rgb(), oklch() or any other notation the
            renderer accepts.
        renderer: Rendering primitive; the default coloraide renderer if None.

    Returns:
        The canonical OKLCHColor (lightness as a 0-1 ratio).

    Raises:
        ParseFailure: If the value cannot be rendered or the rendering is not
            a readable oklch() notation. Callers substitute FALLBACK_COLOR.
    """
    rendered = resolve_renderer(renderer).render(value, Notation.OKLCH)
    components = read_oklch(rendered)
    return OKLCHColor(l=components.l, c=components.c, h=components.h, alpha=components.alpha)


def to_css_notation(color: OKLCHColor, precision: int = CANONICAL_PRECISION) -> str:
    """Canonical oklch() notation with lightness as a percentage."""
    return oklch_to_css(color.lightness_percent, color.c, color.h, color.alpha, precision)


def parse_oklch(text: str) -> tuple[float, float, float]:
    """Extract (l, c, h) from an oklch() string, l as a 0-1 ratio.

    Returns (0, 0, 0) and logs an error when the string is not readable.
    """
    try:
        components = read_oklch(text)
    except ParseFailure as e:
        logger.error("Could not parse OKLCH string for components: %s (%s)", text, e.message)
        return (0.0, 0.0, 0.0)
    return (components.l, components.c, components.h)


def _as_expression(value: ColorInput) -> str:
    if isinstance(value, OKLCHColor):
        return to_css_notation(value, _RENDER_PRECISION)
    return value


def to_rgb(value: ColorInput, renderer: ColorRenderer | None = None) -> RGB | None:
    """Convert a color to 8-bit device RGB.

    Tries the renderer's rgb() notation first, then rasterizes one pixel.

    Returns:
        The RGB triple, or None when neither path understands the color.
    """
    renderer = resolve_renderer(renderer)
    expression = _as_expression(value)

    try:
        components = read_rgb(renderer.render(expression, Notation.RGB))
        return RGB(components.r, components.g, components.b)
    except ParseFailure:
        logger.debug("No rgb() rendering for %s, rasterizing", expression)

    try:
        r, g, b = renderer.rasterize(expression)
    except ParseFailure as e:
        logger.warning("Could not convert color to RGB: %s (%s)", expression, e.message)
        return None
    return RGB(r, g, b)


def to_hex(value: ColorInput, renderer: ColorRenderer | None = None) -> str:
    """Lower-case ``#rrggbb``; ``#000000`` when the color cannot be converted."""
    rgb = to_rgb(value, renderer)
    if rgb is None:
        return "#000000"
    return rgb_to_hex(rgb)


def to_hsl(value: ColorInput, renderer: ColorRenderer | None = None) -> str:
    """``hsl(deg, pct%, pct%)``; ``hsl(0, 0%, 0%)`` when the color cannot be converted."""
    rgb = to_rgb(value, renderer)
    if rgb is None:
        logger.warning("Could not convert %s to HSL, defaulting to hsl(0, 0%%, 0%%)", value)
        return "hsl(0, 0%, 0%)"
    return rgb_to_hsl(rgb)
