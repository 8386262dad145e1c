"""
Color value objects.

``OKLCHColor`` is the single source of truth for a color; hex, HSL and
device RGB are derived views. ``RGB`` is the 8-bit device triple used by
the contrast evaluator and the hex/HSL formatters.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OKLCHColor:
    """An immutable OKLCH triple.

    Attributes:
        l: Lightness as a ratio (0-1).
        c: Chroma (non-negative, practically 0-0.4).
        h: Hue angle in degrees (0-360).
        alpha: Opacity (0-1).
    """

    l: float  # noqa: E741
    c: float
    h: float
    alpha: float = 1.0

    @property
    def lightness_percent(self) -> float:
        return self.l * 100


@dataclass(frozen=True)
class RGB:
    """An 8-bit device color, each channel 0-255."""

    r: int
    g: int
    b: int

    def channels(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


# Returned by conversions when a seed cannot be parsed
FALLBACK_COLOR = OKLCHColor(l=0.0, c=0.0, h=0.0)

WHITE_RGB = RGB(255, 255, 255)
BLACK_RGB = RGB(0, 0, 0)
