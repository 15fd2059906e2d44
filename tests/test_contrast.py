"""
Unit tests for the WCAG contrast analyzer.
"""

import pytest

from huelab.services.colors.contrast import (
    analyze,
    contrast_ratio,
    relative_luminance,
    suggest_fix,
    wcag_level,
)
from huelab.services.colors.conversions import BLACK, WHITE, hex_to_rgb
from huelab.services.colors.types import Color


class TestLuminance:
    """Test relative luminance"""

    def test_extremes(self):
        """Test black and white luminance"""
        assert relative_luminance(BLACK) == 0.0
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_primaries_follow_weights(self):
        """Test pure primaries return their channel weights"""
        assert relative_luminance(Color(255, 0, 0)) == pytest.approx(0.2126)
        assert relative_luminance(Color(0, 255, 0)) == pytest.approx(0.7152)
        assert relative_luminance(Color(0, 0, 255)) == pytest.approx(0.0722)


class TestContrastRatio:
    """Test contrast ratio and levels"""

    def test_black_on_white(self):
        """Test the maximum ratio"""
        assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)

    def test_symmetric(self):
        """Test ratio does not depend on argument order"""
        a, b = hex_to_rgb("#3498DB"), hex_to_rgb("#2C3E50")
        assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))

    def test_same_color(self):
        """Test identical colors have ratio 1 and fail"""
        result = analyze(WHITE, WHITE)
        assert result.ratio == pytest.approx(1.0)
        assert result.level == "FAIL"
        assert result.passes_normal is False
        assert result.passes_large is False

    def test_gray_777777_on_white_is_level_a(self):
        """Test #777777 on white falls just short of AA"""
        result = analyze(hex_to_rgb("#777777"), WHITE)
        assert result.ratio == pytest.approx(4.48, abs=0.01)
        assert result.level == "A"
        assert result.passes_normal is False
        assert result.passes_large is True

    def test_gray_767676_on_white_is_aa(self):
        """Test #767676 is the lightest gray reaching AA on white"""
        result = analyze(hex_to_rgb("#767676"), WHITE)
        assert result.ratio == pytest.approx(4.54, abs=0.01)
        assert result.level == "AA"
        assert result.passes_normal is True

    def test_black_on_white_is_aaa(self):
        """Test the best pair"""
        result = analyze(BLACK, WHITE)
        assert result.level == "AAA"
        assert result.passes_normal is True
        assert result.passes_large is True

    @pytest.mark.parametrize("ratio,level", [
        (21.0, "AAA"),
        (7.0, "AAA"),
        (6.99, "AA"),
        (4.5, "AA"),
        (4.49, "A"),
        (3.0, "A"),
        (2.99, "FAIL"),
        (1.0, "FAIL"),
    ])
    def test_level_boundaries(self, ratio, level):
        """Test thresholds are inclusive"""
        assert wcag_level(ratio) == level


class TestSuggestFix:
    """Test the coarse foreground fix"""

    def test_darkens_on_light_background(self):
        """Test channels scale by 0.3 on light backgrounds"""
        assert suggest_fix(Color(200, 200, 200), WHITE) == Color(60, 60, 60)

    def test_lightens_on_dark_background(self):
        """Test channels scale by 2.5 on dark backgrounds"""
        assert suggest_fix(Color(50, 60, 70), BLACK) == Color(125, 150, 175)

    def test_lightening_clamps(self):
        """Test channels clamp at 255"""
        assert suggest_fix(Color(200, 100, 10), BLACK) == Color(255, 250, 25)

    def test_alpha_preserved(self):
        """Test fix keeps the foreground alpha"""
        assert suggest_fix(Color(200, 200, 200, 0.4), WHITE).a == 0.4

    def test_fix_improves_ratio(self):
        """Test the fixed color contrasts better than the original"""
        foreground = Color(200, 200, 200)
        fixed = suggest_fix(foreground, WHITE)
        assert contrast_ratio(fixed, WHITE) > contrast_ratio(foreground, WHITE)
