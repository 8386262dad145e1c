"""Tests for WCAG contrast evaluation."""

import logging

import pytest

from swatchbook.core.contrast import (
    WCAG_AA_RATIO,
    ContrastReport,
    contrast_ratio,
    decide_text_color,
    evaluate_contrast,
    relative_luminance,
    text_color_for,
)
from swatchbook.core.ir.color import BLACK_RGB, RGB, WHITE_RGB
from swatchbook.core.ir.palette import TextColor


class TestRelativeLuminance:
    """sRGB relative luminance."""

    def test_extremes(self):
        assert relative_luminance(WHITE_RGB) == pytest.approx(1.0)
        assert relative_luminance(BLACK_RGB) == 0.0

    def test_linear_segment(self):
        # 10/255 is below the 0.03928 threshold
        assert relative_luminance(RGB(10, 10, 10)) == pytest.approx(10 / 255 / 12.92)

    def test_channel_weights(self):
        assert relative_luminance(RGB(0, 255, 0)) == pytest.approx(0.7152)
        assert relative_luminance(RGB(0, 0, 255)) == pytest.approx(0.0722)


class TestContrastRatio:
    """Ratio between two colors."""

    def test_white_on_black(self):
        assert contrast_ratio(WHITE_RGB, BLACK_RGB) == pytest.approx(21.0)

    def test_same_color(self):
        assert contrast_ratio(WHITE_RGB, WHITE_RGB) == 1.0

    def test_order_independent(self):
        a, b = RGB(185, 28, 28), RGB(240, 240, 200)
        assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_mid_gray(self):
        assert contrast_ratio(RGB(117, 117, 117), WHITE_RGB) == pytest.approx(4.6077, abs=1e-3)
        assert contrast_ratio(RGB(117, 117, 117), BLACK_RGB) == pytest.approx(4.5577, abs=1e-3)


class TestDecideTextColor:
    """White/black selection policy."""

    def test_extremes(self):
        assert decide_text_color(WHITE_RGB) is TextColor.BLACK
        assert decide_text_color(BLACK_RGB) is TextColor.WHITE

    def test_both_pass_higher_ratio_wins(self):
        # White 4.61 and black 4.56 both meet AA
        assert decide_text_color(RGB(117, 117, 117)) is TextColor.WHITE
        # White 4.54 and black 4.62 both meet AA
        assert decide_text_color(RGB(118, 118, 118)) is TextColor.BLACK

    def test_only_one_passes(self):
        # White 4.48 fails, black 4.69 passes
        assert decide_text_color(RGB(119, 119, 119)) is TextColor.BLACK

    def test_passing_option_beats_higher_failing_one(self):
        # White 4.61 passes a 4.6 threshold, black 4.56 does not
        assert decide_text_color(RGB(117, 117, 117), threshold=4.6) is TextColor.WHITE

    def test_neither_passes_higher_ratio_wins(self):
        assert decide_text_color(RGB(117, 117, 117), threshold=7) is TextColor.WHITE
        assert decide_text_color(RGB(119, 119, 119), threshold=7) is TextColor.BLACK

    def test_red_seed(self):
        assert decide_text_color(RGB(185, 28, 28)) is TextColor.WHITE


class TestTextColorFor:
    """Text color from any color expression."""

    def test_convertible(self, stub_renderer):
        stub_renderer.rgb["navy"] = "rgb(0 0 128)"
        assert text_color_for("navy", stub_renderer) is TextColor.WHITE

    def test_unconvertible_defaults_to_black(self, stub_renderer, caplog):
        with caplog.at_level(logging.WARNING):
            assert text_color_for("nope", stub_renderer) is TextColor.BLACK
        assert "defaulting to black text" in caplog.text

    def test_real_renderer(self, renderer):
        assert text_color_for("oklch(97% 0.01 250)", renderer) is TextColor.BLACK
        assert text_color_for("oklch(24.5% 0.08 250)", renderer) is TextColor.WHITE


class TestContrastReport:
    """Displayed contrast figures."""

    def test_evaluate(self):
        report = evaluate_contrast(RGB(117, 117, 117))
        assert report.threshold == WCAG_AA_RATIO
        assert report.white_passes
        assert report.black_passes
        assert report.text_color is TextColor.WHITE

    def test_summary_marks_passing_ratios(self):
        assert evaluate_contrast(WHITE_RGB).summary() == "White: 1.00 / Black: 21.00 √"
        assert evaluate_contrast(RGB(117, 117, 117)).summary() == "White: 4.61 √ / Black: 4.56 √"

    def test_summary_without_passes(self):
        report = ContrastReport(white_ratio=3.2, black_ratio=2.1, text_color=TextColor.WHITE)
        assert report.summary() == "White: 3.20 / Black: 2.10"
