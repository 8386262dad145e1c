"""
swatchbook.yaml IR types.

Declares the seed colors a project generates palettes from and whether the
fixed global palettes (gray, red, green, orange, blue) are included.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SeedSpec(BaseModel):
    """One user-chosen seed color."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Palette name, used as the CSS prefix")
    color: str = Field(min_length=1, description="Any CSS color expression")


def _default_seeds() -> list[SeedSpec]:
    return [
        SeedSpec(name="primary", color="#0263C9"),
        SeedSpec(name="secondary", color="#D66400"),
    ]


class SwatchbookConfig(BaseModel):
    """Root of swatchbook.yaml."""

    model_config = ConfigDict(frozen=True)

    seeds: list[SeedSpec] = Field(
        default_factory=_default_seeds, description="Seeds for adaptive palettes"
    )
    include_global: bool = Field(
        default=True, description="Append the gray/red/green/orange/blue palettes"
    )
