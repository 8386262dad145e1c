"""
Luminosity step table.

Maps each tonal step to an inclusive luminosity band in percent. Steps 50
and 100 are both pinned to 100%; 200-900 cover one decade each, from
90-99 down to 20-29.
"""

from __future__ import annotations

from types import MappingProxyType

# Table order matters: lookups return the first matching band
LUMINOSITY_BANDS: tuple[tuple[str, tuple[int, int]], ...] = (
    ("50", (100, 100)),
    ("100", (100, 100)),
    ("200", (90, 99)),
    ("300", (80, 89)),
    ("400", (70, 79)),
    ("500", (60, 69)),
    ("600", (50, 59)),
    ("700", (40, 49)),
    ("800", (30, 39)),
    ("900", (20, 29)),
)

LUMINOSITY_RANGES = MappingProxyType(dict(LUMINOSITY_BANDS))

DEFAULT_STEP = "900"


def step_for_luminosity(percent: float) -> str:
    """Find the tonal step whose band holds a luminosity percentage.

    Bands are inclusive integer ranges and the percentage is compared as
    given, so values between two bands (89.5, 99.5, 100.4) match none.

    Anything that matches no band (gaps, below 20%, negative input, NaN)
    falls back to "900". This is policy, not an error.
    """
    for step, (low, high) in LUMINOSITY_BANDS:
        if low <= percent <= high:
            return step
    return DEFAULT_STEP


def band_midpoint(step: str) -> float:
    """Midpoint of a step's band, in percent."""
    low, high = LUMINOSITY_RANGES[step]
    return (low + high) / 2
