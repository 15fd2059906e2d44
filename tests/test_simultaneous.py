"""
Unit tests for simultaneous contrast analysis and correction.
"""

import pytest

from huelab.services.colors.conversions import rgb_to_hsl
from huelab.services.colors.perception.simultaneous import (
    adaptation_level,
    analyze_contrast,
    apply_correction,
)
from huelab.services.colors.types import Color

RED = Color(255, 0, 0)
ORANGE_RED = Color(255, 43, 0)  # hue ~10.12, s 100, l 50


class TestAdaptation:
    """Test background adaptation level"""

    def test_range(self):
        """Test adaptation is twice the luminance, capped at 1"""
        assert adaptation_level(Color(0, 0, 0)) == 0.0
        assert adaptation_level(RED) == pytest.approx(0.4252)
        assert adaptation_level(Color(255, 255, 255)) == 1.0


class TestAnalyzeContrast:
    """Test contrast deltas"""

    def test_hue_pushed_away_from_background(self):
        """Test a near-red target drifts further from a red background"""
        context = analyze_contrast(ORANGE_RED, RED)
        assert context.adaptation_level == pytest.approx(0.4252)
        assert context.hue_drift == pytest.approx(4.227, abs=1e-3)
        assert context.saturation_boost == pytest.approx(0.0)
        # Equal lightness on a background at 50 moves darker
        assert context.lightness_shift == pytest.approx(-2.5512, abs=1e-4)

    def test_hue_drift_negative_below_background(self):
        """Test a target hue below the background hue drifts lower"""
        context = analyze_contrast(ORANGE_RED, Color(255, 85, 0))
        assert context.hue_drift < 0

    def test_no_wraparound_in_hue_window(self):
        """Test hue difference is the plain absolute difference"""
        # Hues 349.9 and 0 are 10 degrees apart on the wheel, 349.9 numerically
        context = analyze_contrast(Color(255, 0, 43), RED)
        assert context.hue_drift == 0.0

    def test_far_hues_do_not_drift(self):
        """Test hues 30 or more degrees apart are left alone"""
        context = analyze_contrast(Color(0, 0, 255), RED)
        assert context.hue_drift == 0.0

    def test_neutral_background_boosts_saturation(self):
        """Test boost is largest on a fully desaturated background"""
        context = analyze_contrast(ORANGE_RED, Color(128, 128, 128))
        assert context.saturation_boost == pytest.approx(0.2 * context.adaptation_level)
        assert context.saturation_boost > 0

    def test_black_background_has_no_effect(self):
        """Test zero adaptation yields zero deltas"""
        context = analyze_contrast(ORANGE_RED, Color(0, 0, 0))
        assert context.adaptation_level == 0.0
        assert context.hue_drift == 0.0
        assert context.saturation_boost == 0.0
        assert context.lightness_shift == 0.0

    def test_lightness_tie_on_dark_background(self):
        """Test equal lightness on a dark background moves lighter"""
        gray = Color(50, 50, 50)
        assert analyze_contrast(gray, gray).lightness_shift > 0

    def test_lightness_tie_on_light_background(self):
        """Test equal lightness on a light background moves darker"""
        gray = Color(200, 200, 200)
        assert analyze_contrast(gray, gray).lightness_shift < 0

    def test_lightness_pushed_away(self):
        """Test a lighter target gets lighter"""
        context = analyze_contrast(Color(140, 140, 140), Color(128, 128, 128))
        assert context.lightness_shift > 0

    def test_surrounding_recorded(self):
        """Test surrounding colors are kept on the context"""
        surrounding = [Color(1, 2, 3), Color(4, 5, 6)]
        context = analyze_contrast(ORANGE_RED, RED, surrounding)
        assert context.surrounding_colors == (Color(1, 2, 3), Color(4, 5, 6))
        assert context.background_color == RED

    def test_deterministic(self):
        """Test repeated analysis is equal"""
        assert analyze_contrast(ORANGE_RED, RED) == analyze_contrast(ORANGE_RED, RED)


class TestApplyCorrection:
    """Test applying contrast corrections"""

    def test_correction_against_red(self):
        """Test the corrected target"""
        context = analyze_contrast(ORANGE_RED, RED)
        corrected = apply_correction(ORANGE_RED, context)
        assert corrected == Color(242, 58, 0)
        assert rgb_to_hsl(corrected).h > rgb_to_hsl(ORANGE_RED).h

    def test_zero_context_is_identity(self):
        """Test a no-op context returns the same color"""
        target = Color(52, 152, 219)
        context = analyze_contrast(target, Color(0, 0, 0))
        assert apply_correction(target, context) == target

    def test_alpha_preserved(self):
        """Test correction keeps the target alpha"""
        target = Color(255, 43, 0, 0.7)
        context = analyze_contrast(target, RED)
        assert apply_correction(target, context).a == 0.7

    def test_values_stay_in_gamut(self):
        """Test large boosts clamp to valid colors"""
        target = Color(250, 250, 240)
        context = analyze_contrast(target, Color(255, 255, 255))
        corrected = apply_correction(target, context)
        assert all(0 <= channel <= 255 for channel in corrected.rgb)
