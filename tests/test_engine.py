"""
Integration tests for the ColorEngine facade.

Covers caching behavior and that each engine operation routes to the
matching component.
"""

import pytest

from huelab.config import Config
from huelab.services.colors.errors import InvalidFormat, OutOfRange, UnsupportedKind
from huelab.services.colors.harmony import HarmonyKind, SchemeKind
from huelab.services.colors.harmony.musical import MusicalMode
from huelab.services.colors.materials import LightingCondition
from huelab.services.colors.perception.appearance import PerceptualHarmonyKind
from huelab.services.colors.types import HSL, Color, HarmonySet
from huelab.services.engine import ColorEngine


class TestEngineConversions:
    """Test conversion entry points"""

    def test_color_inputs(self, engine):
        """Test every accepted input shape"""
        assert engine.color("#3498db") == Color(52, 152, 219)
        assert engine.color((52, 152, 219)) == Color(52, 152, 219)
        assert engine.to_hex("hsl(0, 100%, 50%)") == "#FF0000"
        assert engine.to_hsl("#FF0000") == HSL(0.0, 100.0, 50.0)
        assert engine.from_hsl(HSL(120, 100, 50)) == Color(0, 255, 0)

    def test_round_trips(self, engine):
        """Test CMYK and LAB round trips through the engine"""
        color = Color(52, 152, 219)
        assert engine.from_cmyk(engine.to_cmyk(color)) == color
        assert engine.from_lab(engine.to_lab(color)) == color

    def test_invalid_input(self, engine):
        """Test malformed input raises engine errors"""
        with pytest.raises(InvalidFormat):
            engine.color("blue")
        with pytest.raises(InvalidFormat):
            engine.color(("a",))

    def test_analyze_color_cached(self, engine):
        """Test analysis is served from the conversion layer on repeat"""
        first = engine.analyze_color("#3498DB")
        second = engine.analyze_color("#3498DB")
        assert first is second
        assert first.hex == "#3498DB"


class TestEngineCaching:
    """Test per-layer caching"""

    def test_harmony_cached(self, engine):
        """Test a repeated harmony request hits the cache"""
        first = engine.harmony("#3498DB", "triadic")
        second = engine.harmony("#3498DB", "triadic")
        assert first is second
        assert isinstance(first, HarmonySet)
        assert engine.cache_stats()["stats"]["harmony_hits"] == 1

    def test_mode_is_part_of_key(self, engine):
        """Test musical modes are cached separately"""
        major = engine.harmony("#FF0000", "musical")
        minor = engine.harmony("#FF0000", "musical", "minor")
        assert major.mode == "major"
        assert minor.mode == "minor"

    def test_engines_do_not_share_state(self):
        """Test two engines keep separate caches"""
        first, second = ColorEngine(), ColorEngine()
        first.harmony("#3498DB", "triadic")
        assert second.cache_stats()["sizes"]["harmony"] == 0

    def test_contrast_not_cached(self, engine):
        """Test WCAG verdicts are computed on demand"""
        engine.contrast("#000000", "#FFFFFF")
        engine.contrast("#000000", "#FFFFFF")
        assert engine.cache_stats()["sizes"]["contrast"] == 0

    def test_simultaneous_contrast_cached(self, engine):
        """Test contrast contexts are cached by target, background and surroundings"""
        first = engine.analyze_contrast("#FF2B00", "#FF0000")
        second = engine.analyze_contrast("#FF2B00", "#FF0000")
        third = engine.analyze_contrast("#FF2B00", "#FF0000", ["#00FF00"])
        assert first is second
        assert third is not first
        assert third.surrounding_colors == (Color(0, 255, 0),)

    def test_memory_keyed_on_exact_time(self, engine):
        """Test recall entries are not shared between nearby times"""
        early = engine.recall("#FF0000", 10.2)
        late = engine.recall("#FF0000", 10.7)
        assert early.memory_strength > late.memory_strength
        assert engine.recall("#FF0000", 10.2) is early

    def test_failed_recall_not_cached(self, engine):
        """Test errors never populate the cache"""
        with pytest.raises(OutOfRange):
            engine.recall("#FF0000", -5)
        with pytest.raises(OutOfRange):
            engine.recall("#FF0000", float("nan"))
        assert engine.cache_stats()["sizes"]["memory"] == 0

    def test_enum_and_name_share_entry(self, engine):
        """Test a kind passed as an enum or its name hits the same entry"""
        by_name = engine.harmony("#3498DB", "triadic")
        assert engine.harmony("#3498DB", HarmonyKind.TRIADIC) is by_name
        minor = engine.harmony("#FF0000", "musical", "minor")
        assert engine.harmony("#FF0000", HarmonyKind.MUSICAL, MusicalMode.MINOR) is minor
        scheme = engine.scheme("#FF0000", "analogous")
        assert engine.scheme("#FF0000", SchemeKind.ANALOGOUS) is scheme
        perceptual = engine.perceptual_harmony("#3498DB", "perceptual-triadic")
        assert engine.perceptual_harmony("#3498DB", PerceptualHarmonyKind.TRIADIC) is perceptual
        assert engine.cache_stats()["sizes"]["harmony"] == 4

    def test_mode_ignored_outside_musical(self, engine):
        """Test a stray mode does not split non-musical entries"""
        assert engine.harmony("#3498DB", "triadic", "minor") is engine.harmony("#3498DB", "triadic")

    def test_appearance_cached_per_viewing(self, engine):
        """Test viewing conditions are part of the appearance key"""
        srgb = engine.appearance("#3498DB")
        dark = engine.appearance("#3498DB", "darkRoom")
        assert srgb is engine.appearance("#3498DB", "sRGB")
        assert dark.brightness == pytest.approx(dark.lightness * 0.5)

    def test_disabled_cache_matches_cached(self, engine, uncached_engine):
        """Test caching never changes results"""
        assert uncached_engine.harmony("#3498DB", "hexadic") == engine.harmony("#3498DB", "hexadic")
        assert uncached_engine.recall("#3498DB", 12) == engine.recall("#3498DB", 12)
        assert uncached_engine.cache_stats()["sizes"]["harmony"] == 0

    def test_clear_caches(self, engine):
        """Test clearing empties all layers"""
        engine.harmony("#3498DB", "triadic")
        assert engine.clear_caches() is True
        assert engine.cache_stats()["sizes"]["harmony"] == 0


class TestEngineOperations:
    """Test remaining engine operations"""

    def test_contrast(self, engine):
        """Test WCAG analysis and fix"""
        assert engine.contrast("#000000", "#FFFFFF").level == "AAA"
        assert engine.contrast_ratio("#FFFFFF", "#FFFFFF") == pytest.approx(1.0)
        assert engine.suggest_fix("#C8C8C8", "#FFFFFF") == Color(60, 60, 60)

    def test_vision(self, engine):
        """Test simulation entry points"""
        assert engine.simulate("#FF0000", "protanopia") == Color(145, 142, 0)
        assert len(engine.get_all_simulations("#FF0000")) == 8
        assert engine.simulate_palette(["#FF0000"], "tritanopia") == [Color(242, 0, 0)]

    def test_schemes_and_modal(self, engine):
        """Test scheme and modal palette entry points"""
        assert engine.scheme("#FF0000", "analogous").hexes == ("#FF0000", "#FF0080", "#FF8000")
        palette = engine.modal_palette(0, "dorian")
        assert engine.analyze_musical_harmony(palette.colors).mode == "dorian"

    def test_perceptual_harmony(self, engine):
        """Test perceptual harmonies through the engine"""
        harmony_set = engine.perceptual_harmony("#3498DB", "perceptual-triadic")
        assert len(harmony_set) == 3
        with pytest.raises(UnsupportedKind):
            engine.perceptual_harmony("#3498DB", "bogus")

    def test_apply_correction(self, engine):
        """Test correction through the engine"""
        context = engine.analyze_contrast("#FF2B00", "#FF0000")
        assert engine.apply_correction("#FF2B00", context) == Color(242, 58, 0)

    def test_suggest_default_count(self, engine):
        """Test the configured suggestion count applies"""
        suggestions = engine.suggest("#3498DB")
        assert 1 <= len(suggestions) <= engine.settings.SUGGESTION_COUNT
        assert 0.0 <= engine.score("#00FFFF", "#FF0000") <= 1.0

    def test_color_distance(self, engine):
        """Test distance via the engine"""
        assert engine.color_distance("#000000", "#000000") == 0.0


class TestEngineSettings:
    """Test configuration validation"""

    def test_unknown_default_viewing(self):
        """Test an unknown default preset is rejected"""
        class BadViewing(Config):
            DEFAULT_VIEWING = "cinema"

        with pytest.raises(UnsupportedKind):
            ColorEngine(settings=BadViewing())

    def test_invalid_suggestion_count(self):
        """Test an out-of-range suggestion count is rejected"""
        class BadCount(Config):
            SUGGESTION_COUNT = 0

        with pytest.raises(OutOfRange):
            ColorEngine(settings=BadCount())

    def test_default_viewing_applies(self):
        """Test the configured default preset drives appearance"""
        class DarkRoom(Config):
            DEFAULT_VIEWING = "darkRoom"

        engine = ColorEngine(settings=DarkRoom())
        result = engine.appearance("#3498DB")
        assert result.brightness == pytest.approx(result.lightness * 0.5)


class TestEngineCultureAndMaterials:
    """Test cultural semantics and material simulation entry points"""

    def test_cultural_meaning(self, engine):
        """Test meaning lookup through the engine"""
        meaning = engine.cultural_meaning("#FF0000", "eastern")
        assert meaning.color_name == "red"
        assert "luck" in meaning.meanings
        with pytest.raises(UnsupportedKind):
            engine.cultural_meaning("#FF0000", "martian")

    def test_simulate_material(self, engine):
        """Test material simulation with presets"""
        assert engine.simulate_material("#FF0000") == Color(218, 0, 0)
        assert engine.simulate_material("#FF0000", lighting="tungsten") == Color(128, 0, 0)
        with pytest.raises(UnsupportedKind):
            engine.simulate_material("#FF0000", "glass")

    def test_metamerism_defaults_to_presets(self, engine):
        """Test every lighting preset is checked when none are given"""
        analysis = engine.analyze_metamerism("#808080", "#808080")
        assert len(analysis.match_under) == 4
        assert analysis.differ_under == ()
        assert analysis.delta_e == 0.0

    def test_metamerism_custom_lights(self, engine):
        """Test a dim light hides a difference daylight reveals"""
        dim = LightingCondition(2700.0, 100.0)
        analysis = engine.analyze_metamerism("#000000", "#0A0A0A", [dim, "daylight"])
        assert analysis.match_under == (dim,)
        assert len(analysis.differ_under) == 1
        assert analysis.is_metameric is True
        assert engine.delta_e("#000000", "#0A0A0A") == pytest.approx(analysis.delta_e)
