"""
Palette set assembly.

Combines the adaptive palettes generated from user seeds with the fixed
global palettes, in the order they are displayed and emitted as CSS.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .css_export import generate_css_custom_properties
from .fixed_palettes import generate_fixed_palette, generate_global_palettes
from .ir.config import SeedSpec, SwatchbookConfig
from .ir.palette import Palette, PaletteStrategy
from .oklch import generate_color_variants
from .renderer import ColorRenderer, resolve_renderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteSet:
    """User palettes followed by global palettes."""

    user: list[Palette] = field(default_factory=list)
    global_palettes: list[Palette] = field(default_factory=list)

    @property
    def all_palettes(self) -> list[Palette]:
        return [*self.user, *self.global_palettes]

    def get(self, name: str) -> Palette | None:
        for palette in self.all_palettes:
            if palette.name == name:
                return palette
        return None

    def to_css(self) -> str:
        return generate_css_custom_properties(self.all_palettes)


def generate_palette(
    strategy: PaletteStrategy,
    name: str,
    color: str,
    renderer: ColorRenderer | None = None,
) -> Palette:
    """Generate one palette with an explicit strategy."""
    if strategy is PaletteStrategy.FIXED_RAMP:
        return generate_fixed_palette(name, color, renderer)
    return generate_color_variants(color, name, renderer)


def _warn_on_name_collisions(palettes: list[Palette]) -> None:
    # Later palettes with the same name override earlier ones in the CSS block
    seen: set[str] = set()
    for palette in palettes:
        if palette.name in seen:
            logger.warning(
                "Palette name %r is used more than once; its CSS properties will collide",
                palette.name,
            )
        seen.add(palette.name)


def build_palette_set(
    seeds: Iterable[SeedSpec],
    include_global: bool = True,
    renderer: ColorRenderer | None = None,
) -> PaletteSet:
    """Generate adaptive palettes for the seeds plus, optionally, the globals.

    Args:
        seeds: User seeds, in display order.
        include_global: Append gray, red, green, orange and blue.
        renderer: Rendering primitive shared by every generation call.

    Returns:
        A fresh PaletteSet; nothing is shared with earlier calls.
    """
    renderer = resolve_renderer(renderer)
    user = [
        generate_palette(PaletteStrategy.ADAPTIVE, seed.name, seed.color, renderer)
        for seed in seeds
    ]
    global_palettes = generate_global_palettes(renderer) if include_global else []
    _warn_on_name_collisions([*user, *global_palettes])
    return PaletteSet(user=user, global_palettes=global_palettes)


def build_from_config(
    config: SwatchbookConfig,
    renderer: ColorRenderer | None = None,
) -> PaletteSet:
    return build_palette_set(config.seeds, config.include_global, renderer)
