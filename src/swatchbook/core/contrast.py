"""
WCAG 2 contrast evaluation.

Relative luminance, contrast ratio, and the policy that picks white or
black overlay text for a swatch background.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .conversion import ColorInput, to_rgb
from .ir.color import BLACK_RGB, RGB, WHITE_RGB
from .ir.palette import TextColor
from .renderer import ColorRenderer

logger = logging.getLogger(__name__)

# WCAG AA threshold for body text
WCAG_AA_RATIO = 4.5

_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _linearize(channel: int) -> float:
    s = channel / 255
    if s <= 0.03928:
        return s / 12.92
    return ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """Relative luminance (0-1) of an 8-bit sRGB color."""
    return sum(
        weight * _linearize(channel)
        for weight, channel in zip(_LUMINANCE_WEIGHTS, rgb.channels(), strict=True)
    )


def contrast_ratio(rgb1: RGB, rgb2: RGB) -> float:
    """WCAG contrast ratio between two colors (1-21), order independent."""
    lum1 = relative_luminance(rgb1)
    lum2 = relative_luminance(rgb2)
    brightest = max(lum1, lum2)
    darkest = min(lum1, lum2)
    return (brightest + 0.05) / (darkest + 0.05)


def decide_text_color(background: RGB, threshold: float = WCAG_AA_RATIO) -> TextColor:
    """Pick white or black text for a background.

    An option that meets the threshold wins over one that does not, even
    when the failing option has the higher ratio. When both or neither
    meet it, the higher ratio wins (white on a tie).
    """
    with_white = contrast_ratio(background, WHITE_RGB)
    with_black = contrast_ratio(background, BLACK_RGB)
    white_passes = with_white >= threshold
    black_passes = with_black >= threshold

    if white_passes and black_passes:
        return TextColor.WHITE if with_white >= with_black else TextColor.BLACK
    if white_passes:
        return TextColor.WHITE
    if black_passes:
        return TextColor.BLACK
    # Neither is readable enough; degrade to the better of the two
    return TextColor.WHITE if with_white >= with_black else TextColor.BLACK


def text_color_for(value: ColorInput, renderer: ColorRenderer | None = None) -> TextColor:
    """Text color for any color expression; black when it cannot be converted."""
    background = to_rgb(value, renderer)
    if background is None:
        logger.warning("Could not convert %s to RGB, defaulting to black text", value)
        return TextColor.BLACK
    return decide_text_color(background)


@dataclass(frozen=True)
class ContrastReport:
    """Ratios of white and black text against one background."""

    white_ratio: float
    black_ratio: float
    text_color: TextColor
    threshold: float = WCAG_AA_RATIO

    @property
    def white_passes(self) -> bool:
        return self.white_ratio >= self.threshold

    @property
    def black_passes(self) -> bool:
        return self.black_ratio >= self.threshold

    def summary(self) -> str:
        """Two-decimal ratios, with a check mark on those meeting AA."""
        white_check = " √" if self.white_passes else ""
        black_check = " √" if self.black_passes else ""
        return (
            f"White: {self.white_ratio:.2f}{white_check} / "
            f"Black: {self.black_ratio:.2f}{black_check}"
        )


def evaluate_contrast(background: RGB, threshold: float = WCAG_AA_RATIO) -> ContrastReport:
    return ContrastReport(
        white_ratio=contrast_ratio(background, WHITE_RGB),
        black_ratio=contrast_ratio(background, BLACK_RGB),
        text_color=decide_text_color(background, threshold),
        threshold=threshold,
    )
