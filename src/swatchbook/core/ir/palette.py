"""
Palette IR types.

A palette is a named set of tonal variants ("50".."900", "fade", "bright",
and for gray also "white"/"black"), each mapped to a rendered CSS color.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class PaletteStrategy(StrEnum):
    """How a palette's variants were derived.

    ADAPTIVE ramps come from an arbitrary seed; FIXED_RAMP palettes come from
    hard-coded seeds with the simpler darken/lighten rule. The two produce
    numerically different ramps for similar colors and are kept apart.
    """

    ADAPTIVE = "adaptive"
    FIXED_RAMP = "fixed_ramp"


class TextColor(StrEnum):
    """Overlay text color chosen for a swatch background."""

    WHITE = "white"
    BLACK = "black"


# =============================================================================
# Variant names
# =============================================================================

TONAL_STEPS: tuple[str, ...] = (
    "50",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
)

# Steps derived from a target luminosity band (50 and 100 are pinned separately)
BAND_STEPS: tuple[str, ...] = TONAL_STEPS[2:]

SATURATION_VARIANTS: tuple[str, ...] = ("fade", "bright")

# Emitted without the palette-name infix (--color-white, --color-black)
GLOBAL_VARIANTS: tuple[str, ...] = ("white", "black")

ADAPTIVE_VARIANTS: tuple[str, ...] = TONAL_STEPS + SATURATION_VARIANTS

# Rendered by every variant of a palette whose seed could not be parsed
FALLBACK_CSS = "oklch(0 0 0)"


# =============================================================================
# Palette
# =============================================================================


class Palette(BaseModel):
    """A generated tonal palette."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name, also used as the CSS prefix")
    base_color: str = Field(description="The seed's exact rendering, present among variants")
    variants: dict[str, str] = Field(
        default_factory=dict, description="Variant name -> rendered CSS color"
    )
    strategy: PaletteStrategy = Field(
        default=PaletteStrategy.ADAPTIVE, description="Generation strategy"
    )

    def is_user_color(self, variant: str) -> bool:
        """Whether the variant is the tonal step the base color was placed at.

        Saturation variants of an achromatic seed (white, black) can render to
        the same string as the seed; they are not the user's color.
        """
        return variant == self.base_step

    @property
    def base_step(self) -> str | None:
        """First tonal step holding the base color, if any."""
        for step in TONAL_STEPS:
            if self.variants.get(step) == self.base_color:
                return step
        return None
