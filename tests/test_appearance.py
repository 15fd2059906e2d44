"""
Unit tests for the perceptual appearance model.
"""

import pytest

from huelab.services.colors.errors import OutOfRange, UnsupportedKind
from huelab.services.colors.perception.appearance import (
    D65,
    VIEWING_CONDITIONS,
    appearance,
    appearance_to_color,
    generate_perceptual_harmony,
    resolve_viewing_conditions,
    rgb_to_xyz,
)
from huelab.services.colors.types import Color, ViewingConditions, WhitePoint

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class TestXYZ:
    """Test sRGB -> XYZ"""

    def test_white_is_d65(self):
        """Test white maps onto the D65 white point"""
        x, y, z = rgb_to_xyz(WHITE)
        assert x == pytest.approx(95.047, abs=1e-3)
        assert y == pytest.approx(100.0, abs=1e-3)
        assert z == pytest.approx(108.883, abs=1e-3)

    def test_black_is_origin(self):
        """Test black maps to zero"""
        assert rgb_to_xyz(BLACK) == (0.0, 0.0, 0.0)


class TestAppearance:
    """Test appearance attributes"""

    def test_black(self):
        """Test black has no lightness or brightness and a fixed chroma"""
        result = appearance(BLACK)
        assert result.J == 0.0
        assert result.Q == 0.0
        assert result.s == 0.0
        assert result.C == pytest.approx(72.27, abs=0.01)
        assert result.h == pytest.approx(228.88, abs=0.05)

    def test_white(self):
        """Test white is fully light and achromatic"""
        result = appearance(WHITE)
        assert result.lightness == pytest.approx(100.0)
        assert result.chroma == pytest.approx(0.0, abs=1e-3)
        assert result.brightness == pytest.approx(100.0)

    def test_ranges(self):
        """Test attributes stay in their documented ranges"""
        for color in (Color(255, 0, 0), Color(52, 152, 219), Color(10, 10, 10), Color(0, 255, 0)):
            for preset in VIEWING_CONDITIONS:
                result = appearance(color, preset)
                assert 0 <= result.lightness <= 100
                assert 0 <= result.hue < 360
                assert 0 <= result.saturation <= 100
                assert result.chroma >= 0

    def test_brightness_scales_with_adapting_luminance(self):
        """Test Q = J * sqrt(La / 64)"""
        color = Color(52, 152, 219)
        base = appearance(color, "sRGB")
        dark = appearance(color, "darkRoom")
        assert base.brightness == pytest.approx(base.lightness)
        assert base.colorfulness == pytest.approx(base.chroma)
        assert dark.brightness == pytest.approx(dark.lightness * 0.5)

    def test_print_preset(self):
        """Test the print preset uses D50 and a brighter field"""
        result = appearance(WHITE, "print")
        assert result.lightness == pytest.approx(100.0)
        assert result.brightness == pytest.approx(158.11, abs=0.01)

    def test_default_is_srgb(self):
        """Test None means sRGB"""
        color = Color(200, 30, 90)
        assert appearance(color) == appearance(color, "sRGB")


class TestViewingConditions:
    """Test viewing condition resolution"""

    def test_presets(self):
        """Test named presets resolve"""
        assert resolve_viewing_conditions(None) is VIEWING_CONDITIONS["sRGB"]
        assert resolve_viewing_conditions("darkRoom").surround == "dark"

    def test_unknown_preset(self):
        """Test unknown preset names are rejected"""
        with pytest.raises(UnsupportedKind):
            appearance(WHITE, "cinema")

    def test_custom_conditions(self):
        """Test custom conditions are accepted when valid"""
        custom = ViewingConditions(D65, adapting_luminance=128.0, background_luminance=20.0)
        assert appearance(WHITE, custom).brightness == pytest.approx(100.0 * 2 ** 0.5)

    def test_non_positive_adapting_luminance(self):
        """Test adapting luminance must be positive"""
        with pytest.raises(OutOfRange):
            appearance(WHITE, ViewingConditions(D65, 0.0, 20.0))

    def test_non_positive_white_point(self):
        """Test white point Y must be positive"""
        with pytest.raises(OutOfRange):
            appearance(WHITE, ViewingConditions(WhitePoint(95.0, 0.0, 108.0), 64.0, 20.0))

    def test_unknown_surround(self):
        """Test surround must be dark, dim or average"""
        with pytest.raises(UnsupportedKind):
            appearance(WHITE, ViewingConditions(D65, 64.0, 20.0, surround="bright"))

    @pytest.mark.parametrize("conditions", [
        ViewingConditions(D65, float("nan"), 20.0),
        ViewingConditions(D65, 64.0, float("inf")),
        ViewingConditions(WhitePoint(95.0, float("nan"), 108.0), 64.0, 20.0),
        ViewingConditions(WhitePoint(float("inf"), 100.0, 108.0), 64.0, 20.0),
    ])
    def test_non_finite_values_rejected(self, conditions):
        """Test NaN and infinite viewing values raise out_of_range"""
        with pytest.raises(OutOfRange):
            resolve_viewing_conditions(conditions)


class TestPerceptualHarmony:
    """Test harmonies built in appearance space"""

    def test_appearance_to_color(self):
        """Test saturation 2C and lightness J rendering"""
        assert appearance_to_color(50.0, 50.0, 0.0) == Color(255, 0, 0)
        assert appearance_to_color(50.0, 80.0, 360.0) == Color(255, 0, 0)

    def test_complementary(self):
        """Test the perceptual complement pair"""
        harmony_set = generate_perceptual_harmony(Color(52, 152, 219), "perceptual-complementary")
        assert len(harmony_set) == 2
        assert harmony_set[0] == Color(52, 152, 219)
        assert harmony_set.kind == "perceptual-complementary"

    def test_triadic(self):
        """Test the perceptual triad"""
        assert len(generate_perceptual_harmony(Color(52, 152, 219), "perceptual-triadic")) == 3

    def test_lightness_series_skips_nearby_steps(self):
        """Test white keeps every lightness step"""
        harmony_set = generate_perceptual_harmony(WHITE, "lightness-series")
        assert len(harmony_set) == 6
        assert [entry.l for entry in harmony_set.hsl[1:]] == [20.0, 35.0, 50.0, 65.0, 80.0]

    def test_chroma_series_skips_nearby_steps(self):
        """Test black drops the chroma step within 5 of its own"""
        harmony_set = generate_perceptual_harmony(BLACK, "chroma-series")
        assert len(harmony_set) == 5
        assert [entry.s for entry in harmony_set.hsl[1:]] == [20.0, 60.0, 100.0, 100.0]

    def test_unknown_kind(self):
        """Test unknown perceptual harmonies are rejected"""
        with pytest.raises(UnsupportedKind):
            generate_perceptual_harmony(WHITE, "perceptual-tetradic")
