"""
Color rendering primitive.

Everything that turns an arbitrary CSS color expression (hex, named,
rgb(), hsl(), oklch(), ...) into a device color goes through a
``ColorRenderer``. The conversion layer only ever sees the rendered
notation strings, so tests can swap in a deterministic stub.
"""

from __future__ import annotations

import logging
import math
from enum import StrEnum
from functools import lru_cache
from typing import Protocol, runtime_checkable

from coloraide import Color

from .errors import ParseFailure

logger = logging.getLogger(__name__)


class Notation(StrEnum):
    """Target notation for a rendering."""

    OKLCH = "oklch"
    RGB = "rgb"


@runtime_checkable
class ColorRenderer(Protocol):
    """Stateless oracle that renders color expressions.

    Implementations must be deterministic: the same input string always
    renders to the same output, bit for bit.
    """

    def render(self, value: str, notation: Notation) -> str:
        """Render ``value`` in the requested notation.

        Raises:
            ParseFailure: If the value is not a color the renderer understands.
        """
        ...

    def rasterize(self, value: str) -> tuple[int, int, int]:
        """Paint a single pixel with ``value`` and read back its RGB bytes.

        Raises:
            ParseFailure: If the value is not a color the renderer understands.
        """
        ...


class ColorAideRenderer:
    """ColorRenderer backed by coloraide.

    Out-of-gamut colors are clipped to sRGB; no other gamut mapping is done.
    """

    def __init__(self, precision: int = 10):
        self.precision = precision

    def _parse(self, value: str) -> Color:
        try:
            return Color(value.strip())
        except (ValueError, TypeError) as e:
            raise ParseFailure(f"Unrecognized color {value!r}: {e}", value=value) from e

    def render(self, value: str, notation: Notation) -> str:
        color = self._parse(value)
        if notation is Notation.OKLCH:
            return color.convert("oklch").to_string(precision=self.precision)
        srgb = color.convert("srgb").fit(method="clip")
        return srgb.to_string(precision=self.precision, fit=False)

    def rasterize(self, value: str) -> tuple[int, int, int]:
        srgb = self._parse(value).convert("srgb").fit(method="clip")
        channels = []
        for coord in srgb.coords():
            if math.isnan(coord):
                coord = 0.0
            channels.append(max(0, min(255, math.floor(coord * 255 + 0.5))))
        r, g, b = channels[:3]
        return (r, g, b)


@lru_cache(maxsize=1)
def get_default_renderer() -> ColorRenderer:
    """Process-wide renderer used when callers do not inject one."""
    logger.debug("Using coloraide renderer")
    return ColorAideRenderer()


def resolve_renderer(renderer: ColorRenderer | None) -> ColorRenderer:
    return renderer if renderer is not None else get_default_renderer()
