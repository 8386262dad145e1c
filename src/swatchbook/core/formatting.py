"""
Number and notation formatting.

Every numeric color component is serialized through
``format_number_for_oklch`` so that two independently computed but
numerically equal components always produce the same string.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from .ir.color import RGB


def _round_fixed(value: float, decimals: int) -> float:
    """Round to a fixed number of decimals, halves away from zero.

    Works on the exact binary value of ``value``, which is how
    fixed-point rendering of floats behaves (0.125 -> 0.13, 1.005 -> 1.0).
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _float_str(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        # 3.73e-08 -> 0.0000000373
        text = format(Decimal(text), "f")
    return text


def format_number_for_oklch(value: float, decimals: int = 2) -> str:
    """Format a color component for an oklch() notation.

    Args:
        value: Component value.
        decimals: Decimal places to keep.

    Returns:
        A bare integer string when the value is (or rounds to) a whole
        number, otherwise the shortest decimal string without trailing zeros.
    """
    # Floating-point noise near whole numbers (24.9999999999) reads as the integer
    near_integer = _round_fixed(value, 10)
    if near_integer.is_integer():
        return _float_str(near_integer)

    fixed = _round_fixed(value, decimals)
    return _float_str(fixed)


def oklch_to_css(L: float, C: float, H: float, alpha: float = 1.0, decimals: int = 2) -> str:
    """Format an OKLCH color as a CSS string.

    Args:
        L: Lightness as a percentage (0-100).
        C: Chroma (0-0.4).
        H: Hue (0-360).
        alpha: Opacity (0-1); omitted from the output when opaque.
        decimals: Decimal places for every component.

    Returns:
        CSS oklch() string, e.g. ``oklch(50.54% 0.19 27.52)``.
    """
    L_fmt = format_number_for_oklch(L, decimals)
    C_fmt = format_number_for_oklch(C, decimals)
    H_fmt = format_number_for_oklch(H, decimals)
    if alpha < 1.0:
        return f"oklch({L_fmt}% {C_fmt} {H_fmt} / {format_number_for_oklch(alpha, decimals)})"
    return f"oklch({L_fmt}% {C_fmt} {H_fmt})"


def rgb_to_hex(rgb: RGB) -> str:
    """Lower-case ``#rrggbb``."""
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def rgb_to_hsl(rgb: RGB) -> str:
    """Convert device RGB to ``hsl(deg, pct%, pct%)`` with integer rounding."""
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        # Achromatic
        hue = 0.0
        saturation = 0.0
    else:
        delta = high - low
        saturation = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
        if high == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    return (
        f"hsl({_round_half_up(hue * 360)}, "
        f"{_round_half_up(saturation * 100)}%, "
        f"{_round_half_up(lightness * 100)}%)"
    )
