"""
CSS custom-property generation for palettes.

Emits one ``:root`` block with a property per variant, palettes in the
order given and variants in canonical order. ``white``/``black`` are
global (``--color-white``), everything else is prefixed with the palette
name (``--color-<name>-<variant>``).
"""

from __future__ import annotations

from collections.abc import Iterable

from .ir.palette import GLOBAL_VARIANTS, Palette

VARIANT_ORDER: tuple[str, ...] = (
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
    "fade",
    "bright",
    "white",
    "black",
)

_VARIANT_RANK = {name: index for index, name in enumerate(VARIANT_ORDER)}


def _variant_rank(variant: str) -> int:
    # Unknown variants sort ahead of the canonical ones, keeping their own order
    return _VARIANT_RANK.get(variant, -1)


def ordered_variants(palette: Palette) -> list[tuple[str, str]]:
    """Variant/value pairs sorted by VARIANT_ORDER."""
    return sorted(palette.variants.items(), key=lambda item: _variant_rank(item[0]))


def property_name(palette_name: str, variant: str) -> str:
    if variant in GLOBAL_VARIANTS:
        return f"--color-{variant}"
    return f"--color-{palette_name}-{variant}"


def generate_css_custom_properties(palettes: Iterable[Palette]) -> str:
    """
    Generate the CSS custom-property block for a list of palettes.

    Each global variant (white, black) is emitted once, from the first
    palette that defines it.

    Args:
        palettes: Palettes in emission order

    Returns:
        CSS string ``:root { ... }`` without a trailing newline
    """
    lines: list[str] = [":root {"]
    emitted_globals: set[str] = set()

    for palette in palettes:
        for variant, value in ordered_variants(palette):
            if variant in GLOBAL_VARIANTS:
                if variant in emitted_globals:
                    continue
                emitted_globals.add(variant)
            lines.append(f"  {property_name(palette.name, variant)}: {value};")

    lines.append("}")
    return "\n".join(lines)
