"""Tests for adaptive palette generation."""

import logging

import pytest

from swatchbook.core.ir.color import OKLCHColor
from swatchbook.core.ir.palette import ADAPTIVE_VARIANTS, FALLBACK_CSS, PaletteStrategy
from swatchbook.core.oklch import (
    MAX_CHROMA,
    fallback_palette,
    generate_adaptive_palette,
    generate_color_variants,
)

SEED = OKLCHColor(l=0.6, c=0.2, h=250.0)
EXACT = "oklch(60% 0.2 250)"


class TestGenerateAdaptivePalette:
    """Ramp derivation from a canonical seed."""

    def test_variant_set(self):
        palette = generate_adaptive_palette(SEED, EXACT, "brand")
        assert set(palette.variants) == set(ADAPTIVE_VARIANTS)
        assert palette.strategy is PaletteStrategy.ADAPTIVE
        assert palette.name == "brand"

    def test_seed_placed_at_its_step(self):
        palette = generate_adaptive_palette(SEED, EXACT, "brand")
        assert palette.variants["500"] == EXACT
        assert palette.base_color == EXACT
        assert palette.base_step == "500"

    def test_exact_rendering_appears_once(self):
        palette = generate_adaptive_palette(SEED, EXACT, "brand")
        assert list(palette.variants.values()).count(EXACT) == 1

    def test_expected_ramp(self):
        palette = generate_adaptive_palette(SEED, EXACT, "brand")
        assert palette.variants == {
            "50": "oklch(100% 0.01 250)",
            "100": "oklch(98% 0.03 250)",
            "200": "oklch(94.5% 0.12 250)",
            "300": "oklch(84.5% 0.2 250)",
            "400": "oklch(74.5% 0.2 250)",
            "500": EXACT,
            "600": "oklch(54.5% 0.2 250)",
            "700": "oklch(44.5% 0.2 250)",
            "800": "oklch(34.5% 0.14 250)",
            "900": "oklch(24.5% 0.08 250)",
            "fade": "oklch(60% 0.12 250)",
            "bright": "oklch(60% 0.28 250)",
        }

    def test_chroma_is_capped(self):
        seed = OKLCHColor(l=0.6, c=0.4, h=250.0)
        palette = generate_adaptive_palette(seed, "oklch(60% 0.4 250)", "vivid")
        assert palette.variants["300"] == f"oklch(84.5% {MAX_CHROMA} 250)"
        assert palette.variants["bright"] == f"oklch(60% {MAX_CHROMA} 250)"
        assert palette.variants["fade"] == "oklch(60% 0.24 250)"

    def test_achromatic_seed_keeps_minimum_chroma_on_light_steps(self):
        seed = OKLCHColor(l=0.5, c=0.0, h=0.0)
        palette = generate_adaptive_palette(seed, "oklch(50% 0 0)", "neutral")
        assert palette.variants["50"] == "oklch(100% 0.01 0)"
        assert palette.variants["100"] == "oklch(98% 0.01 0)"
        assert palette.variants["300"] == "oklch(84.5% 0 0)"

    def test_trace_chroma_on_step_50(self):
        seed = OKLCHColor(l=0.5, c=0.05, h=10.0)
        palette = generate_adaptive_palette(seed, "oklch(50% 0.05 10)", "muted")
        # max(0.005, 0.0025) rounds to two decimals
        assert palette.variants["50"] == "oklch(100% 0.01 10)"

    @pytest.mark.parametrize(
        ("lightness", "step"),
        [(0.92, "200"), (0.85, "300"), (0.995, "900"), (0.895, "900"), (0.25, "900"), (1.0, "50")],
    )
    def test_base_step_follows_lightness(self, lightness, step):
        seed = OKLCHColor(l=lightness, c=0.1, h=100.0)
        palette = generate_adaptive_palette(seed, "seed", "x")
        assert palette.variants[step] == "seed"
        assert palette.base_step == step

    def test_dark_seed_does_not_leave_900_empty(self):
        seed = OKLCHColor(l=0.1, c=0.1, h=100.0)
        palette = generate_adaptive_palette(seed, "seed", "x")
        assert set(palette.variants) == set(ADAPTIVE_VARIANTS)
        assert palette.variants["800"] == "oklch(34.5% 0.07 100)"

    def test_fresh_palette_per_call(self):
        first = generate_adaptive_palette(SEED, EXACT, "brand")
        second = generate_adaptive_palette(SEED, EXACT, "brand")
        assert first == second
        assert first is not second
        assert first.variants is not second.variants


class TestFallbackPalette:
    """Degenerate palette for unreadable seeds."""

    def test_every_variant_is_black(self):
        palette = fallback_palette("broken")
        assert set(palette.variants) == set(ADAPTIVE_VARIANTS)
        assert set(palette.variants.values()) == {FALLBACK_CSS}
        assert palette.base_color == FALLBACK_CSS


class TestGenerateColorVariants:
    """Adaptive palettes from color expressions."""

    def test_from_expression(self, stub_renderer):
        stub_renderer.oklch["#3366cc"] = "oklch(0.6 0.2 250)"
        palette = generate_color_variants("#3366cc", "brand", stub_renderer)
        assert palette.variants["500"] == EXACT
        assert palette.variants["fade"] == "oklch(60% 0.12 250)"

    def test_canonical_rendering_keeps_four_decimals(self, stub_renderer):
        stub_renderer.oklch["#b91c1c"] = "oklch(0.5054123456 0.1903123456 27.5189123456)"
        palette = generate_color_variants("#b91c1c", "red", stub_renderer)
        assert palette.base_color == "oklch(50.5412% 0.1903 27.5189)"
        assert palette.variants["600"] == palette.base_color

    def test_unparseable_seed_yields_fallback(self, stub_renderer, caplog):
        with caplog.at_level(logging.ERROR):
            palette = generate_color_variants("not-a-color", "brand", stub_renderer)
        assert palette == fallback_palette("brand")
        assert "Could not parse seed color" in caplog.text

    def test_white_seed_flags_only_its_step(self, stub_renderer):
        stub_renderer.oklch["white"] = "oklch(1 0 0)"
        palette = generate_color_variants("white", "paper", stub_renderer)
        assert palette.base_color == "oklch(100% 0 0)"
        assert palette.base_step == "50"
        # Zero chroma makes fade and bright render like the seed
        assert palette.variants["fade"] == palette.variants["bright"] == palette.base_color
        assert [v for v in ADAPTIVE_VARIANTS if palette.is_user_color(v)] == ["50"]

    def test_real_renderer(self, renderer):
        palette = generate_color_variants("#7c3aed", "brand", renderer)
        assert set(palette.variants) == set(ADAPTIVE_VARIANTS)
        assert palette.base_step is not None
        assert list(palette.variants.values()).count(palette.base_color) == 1
