"""Tests for the color model conversion layer."""

from __future__ import annotations

import logging

import pytest

from swatchbook.core.conversion import (
    parse_oklch,
    to_canonical,
    to_css_notation,
    to_hex,
    to_hsl,
    to_rgb,
)
from swatchbook.core.errors import ParseFailure
from swatchbook.core.ir.color import RGB, OKLCHColor


class TestToCanonical:
    """Reduction of color expressions to OKLCH triples."""

    def test_percentage_rendering(self, stub_renderer):
        stub_renderer.oklch["#b91c1c"] = "oklch(50.5412% 0.1903 27.5189)"
        color = to_canonical("#b91c1c", stub_renderer)
        assert color.l == pytest.approx(0.505412)
        assert color.c == pytest.approx(0.1903)
        assert color.h == pytest.approx(27.5189)

    def test_ratio_rendering_with_alpha(self, stub_renderer):
        stub_renderer.oklch["tomato"] = "oklch(0.6962 0.1955 32.32 / 0.5)"
        color = to_canonical("tomato", stub_renderer)
        assert color.l == pytest.approx(0.6962)
        assert color.alpha == 0.5

    def test_unknown_input_raises(self, stub_renderer):
        with pytest.raises(ParseFailure):
            to_canonical("not-a-color", stub_renderer)

    def test_unreadable_rendering_raises(self, stub_renderer):
        stub_renderer.oklch["odd"] = "color(display-p3 1 0 0)"
        with pytest.raises(ParseFailure):
            to_canonical("odd", stub_renderer)

    def test_deterministic(self, stub_renderer):
        stub_renderer.oklch["red"] = "oklch(62.8% 0.2577 29.23)"
        assert to_canonical("red", stub_renderer) == to_canonical("red", stub_renderer)


class TestToCSSNotation:
    """Canonical oklch() notation."""

    def test_four_decimals(self):
        color = OKLCHColor(l=0.505412345, c=0.190312345, h=27.518912)
        assert to_css_notation(color) == "oklch(50.5412% 0.1903 27.5189)"

    def test_alpha_kept(self):
        color = OKLCHColor(l=0.5, c=0.1, h=120.0, alpha=0.5)
        assert to_css_notation(color) == "oklch(50% 0.1 120 / 0.5)"


class TestParseOKLCH:
    """Component extraction from generated variants."""

    def test_percentage(self):
        assert parse_oklch("oklch(50% 0.1 120)") == pytest.approx((0.5, 0.1, 120.0))

    def test_ratio_with_alpha(self):
        assert parse_oklch("oklch(0.5 0.1 120 / 0.5)") == pytest.approx((0.5, 0.1, 120.0))

    def test_unreadable_returns_zeros(self, caplog):
        with caplog.at_level(logging.ERROR):
            assert parse_oklch("hsl(0, 0%, 0%)") == (0.0, 0.0, 0.0)
        assert "Could not parse OKLCH string" in caplog.text


class TestToRGB:
    """Device RGB, hex and HSL derivation."""

    def test_from_rgb_rendering(self, stub_renderer):
        stub_renderer.rgb["#b91c1c"] = "rgb(185 28 28)"
        assert to_rgb("#b91c1c", stub_renderer) == RGB(185, 28, 28)

    def test_from_rgba_rendering(self, stub_renderer):
        stub_renderer.rgb["x"] = "rgba(185, 28, 28, 0.5)"
        assert to_rgb("x", stub_renderer) == RGB(185, 28, 28)

    def test_rasterizes_when_rendering_is_not_rgb(self, stub_renderer):
        stub_renderer.rgb["wide"] = "color(display-p3 1 0 0)"
        stub_renderer.raster["wide"] = (255, 0, 0)
        assert to_rgb("wide", stub_renderer) == RGB(255, 0, 0)
        assert ("wide", "raster") in stub_renderer.calls

    def test_rasterizes_when_rendering_fails(self, stub_renderer):
        stub_renderer.raster["paint-only"] = (1, 2, 3)
        assert to_rgb("paint-only", stub_renderer) == RGB(1, 2, 3)

    def test_none_when_nothing_works(self, stub_renderer, caplog):
        with caplog.at_level(logging.WARNING):
            assert to_rgb("nope", stub_renderer) is None
        assert "Could not convert color to RGB" in caplog.text

    def test_canonical_color_input(self, stub_renderer):
        stub_renderer.rgb["oklch(50% 0.1 120)"] = "rgb(100 120 50)"
        assert to_rgb(OKLCHColor(l=0.5, c=0.1, h=120.0), stub_renderer) == RGB(100, 120, 50)

    def test_hex_and_hsl(self, stub_renderer):
        stub_renderer.rgb["green"] = "rgb(0 128 0)"
        assert to_hex("green", stub_renderer) == "#008000"
        assert to_hsl("green", stub_renderer) == "hsl(120, 100%, 25%)"

    def test_hex_and_hsl_defaults(self, stub_renderer):
        assert to_hex("nope", stub_renderer) == "#000000"
        assert to_hsl("nope", stub_renderer) == "hsl(0, 0%, 0%)"


class TestRoundTrip:
    """Hex survives a trip through the canonical OKLCH form."""

    @pytest.mark.parametrize(
        "hex_value",
        ["#b91c1c", "#187c3e", "#d66400", "#0263c9", "#7c3aed", "#ffffff", "#000000", "#777777"],
    )
    def test_hex_round_trip(self, renderer, hex_value):
        canonical = to_canonical(hex_value, renderer)
        result = to_rgb(canonical, renderer)
        assert result is not None

        expected = RGB(
            int(hex_value[1:3], 16), int(hex_value[3:5], 16), int(hex_value[5:7], 16)
        )
        for got, want in zip(result.channels(), expected.channels(), strict=True):
            assert abs(got - want) <= 1

    def test_hex_string_round_trip(self, renderer):
        assert to_hex(to_canonical("#b91c1c", renderer), renderer) == "#b91c1c"
