"""
Huelab Color Engine
Single entry point over the color engine components. A ColorEngine owns its
bounded caches, so independent instances never share state; construct one per
host (or per test) and pass it around.
"""
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger

from huelab.config import Config, config as default_config
from huelab.services.cache import EngineCaches
from huelab.services.colors import contrast as contrast_analyzer
from huelab.services.colors import conversions, harmony, materials, suggestions, vision
from huelab.services.colors.errors import OutOfRange, UnsupportedKind
from huelab.services.colors.harmony import musical
from huelab.services.colors.perception.appearance import (
    appearance as appearance_of,
    generate_perceptual_harmony,
    parse_perceptual_kind,
    resolve_viewing_conditions,
)
from huelab.services.colors.perception import cultural, memory, simultaneous
from huelab.services.colors.types import (
    CMYK,
    HSL,
    LAB,
    Color,
    ColorAnalysis,
    ColorAppearance,
    ColorMemory,
    ContrastContext,
    ContrastResult,
    HarmonySet,
    ViewingConditions,
)

# Anything to_color accepts: Color, "#RRGGBB", "hsl(...)", HSL or an RGB tuple
ColorLike = Any


class ColorEngine:
    """Color engine instance with its own caches."""

    def __init__(self, caches: Optional[EngineCaches] = None, settings: Optional[Config] = None):
        self.settings = settings or default_config
        self.caches = caches or EngineCaches.from_config(self.settings)
        self.default_viewing = self.settings.DEFAULT_VIEWING
        if not self.settings.validate_viewing(self.default_viewing):
            raise UnsupportedKind(f"Unknown default viewing conditions: {self.default_viewing!r}", self.default_viewing)
        if not self.settings.validate_suggestion_count(self.settings.SUGGESTION_COUNT):
            raise OutOfRange(f"Invalid suggestion count: {self.settings.SUGGESTION_COUNT}", self.settings.SUGGESTION_COUNT)

        logger.bind(
            cache_enabled=self.caches.enabled,
            default_viewing=self.default_viewing,
        ).debug("Color engine initialized")

    # Conversion

    def color(self, value: ColorLike) -> Color:
        """Normalize caller input into a Color."""
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return self.caches.cached("conversion", ("parse", value), lambda: conversions.to_color(value))
        return conversions.to_color(value)

    def to_hex(self, value: ColorLike) -> str:
        return conversions.rgb_to_hex(self.color(value))

    def to_hsl(self, value: ColorLike) -> HSL:
        return conversions.rgb_to_hsl(self.color(value))

    def to_cmyk(self, value: ColorLike) -> CMYK:
        return conversions.rgb_to_cmyk(self.color(value))

    def to_lab(self, value: ColorLike) -> LAB:
        return conversions.rgb_to_lab(self.color(value))

    def from_hsl(self, hsl: HSL) -> Color:
        return conversions.hsl_to_rgb(hsl)

    def from_cmyk(self, cmyk: CMYK) -> Color:
        return conversions.cmyk_to_rgb(cmyk)

    def from_lab(self, lab: LAB) -> Color:
        return conversions.lab_to_rgb(lab)

    def analyze_color(self, value: ColorLike) -> ColorAnalysis:
        """Full derived description of a color."""
        color = self.color(value)
        return self.caches.cached("conversion", ("analysis", color), lambda: conversions.analyze_color(color))

    def color_distance(self, first: ColorLike, second: ColorLike) -> float:
        return conversions.color_distance(self.color(first), self.color(second))

    # Accessibility

    def contrast(self, foreground: ColorLike, background: ColorLike) -> ContrastResult:
        """WCAG verdict for a pair. Computed on demand, never cached."""
        return contrast_analyzer.analyze(self.color(foreground), self.color(background))

    def contrast_ratio(self, first: ColorLike, second: ColorLike) -> float:
        return contrast_analyzer.contrast_ratio(self.color(first), self.color(second))

    def suggest_fix(self, foreground: ColorLike, background: ColorLike) -> Color:
        return contrast_analyzer.suggest_fix(self.color(foreground), self.color(background))

    def simulate(self, value: ColorLike, kind: str) -> Color:
        return vision.simulate(self.color(value), kind)

    def get_all_simulations(self, value: ColorLike) -> Dict[str, Color]:
        return vision.get_all_simulations(self.color(value))

    def simulate_palette(self, values: Sequence[ColorLike], kind: str) -> List[Color]:
        return vision.simulate_palette([self.color(value) for value in values], kind)

    # Harmony

    def harmony(self, base: ColorLike, kind: str, mode: Optional[str] = None) -> HarmonySet:
        """
        Generate a harmony set.

        Args:
            base: Base color
            kind: Harmony kind name
            mode: Musical mode (musical kind only)

        Returns:
            HarmonySet
        """
        color = self.color(base)
        resolved = harmony.parse_kind(kind)
        mode_name = None
        if resolved == harmony.HarmonyKind.MUSICAL:
            mode_name = musical.parse_mode(mode or musical.MusicalMode.MAJOR).value
        key = ("harmony", color, resolved.value, mode_name)
        return self.caches.cached("harmony", key, lambda: harmony.generate(color, resolved, mode_name))

    def scheme(self, base: ColorLike, scheme: str, count: int = 5) -> HarmonySet:
        color = self.color(base)
        resolved = harmony.parse_scheme(scheme)
        key = ("scheme", color, resolved.value, count)
        return self.caches.cached("harmony", key, lambda: harmony.generate_scheme(color, resolved, count))

    def modal_palette(
        self,
        root_hue: float,
        mode: str = "ionian",
        saturation: float = 70.0,
        lightness: float = 50.0,
    ) -> HarmonySet:
        return musical.generate_modal_palette(root_hue, mode, saturation, lightness)

    def analyze_musical_harmony(self, values: Sequence[ColorLike]) -> musical.MusicalAnalysis:
        return musical.analyze_musical_harmony([self.color(value) for value in values])

    # Perception

    def _viewing(self, conditions: Union[str, ViewingConditions, None]) -> ViewingConditions:
        return resolve_viewing_conditions(conditions or self.default_viewing)

    def appearance(
        self,
        value: ColorLike,
        conditions: Union[str, ViewingConditions, None] = None,
    ) -> ColorAppearance:
        """Appearance attributes under a preset or custom viewing condition."""
        color = self.color(value)
        viewing = self._viewing(conditions)
        return self.caches.cached(
            "appearance",
            (color, viewing),
            lambda: appearance_of(color, viewing),
        )

    def perceptual_harmony(
        self,
        base: ColorLike,
        kind: str,
        conditions: Union[str, ViewingConditions, None] = None,
    ) -> HarmonySet:
        color = self.color(base)
        viewing = self._viewing(conditions)
        resolved = parse_perceptual_kind(kind)
        return self.caches.cached(
            "harmony",
            ("perceptual", color, resolved.value, viewing),
            lambda: generate_perceptual_harmony(color, resolved, viewing),
        )

    def analyze_contrast(
        self,
        target: ColorLike,
        background: ColorLike,
        surrounding: Sequence[ColorLike] = (),
    ) -> ContrastContext:
        """Simultaneous-contrast context, cached by (target, background, surrounding)."""
        target_color = self.color(target)
        background_color = self.color(background)
        surrounding_colors = tuple(self.color(value) for value in surrounding)
        return self.caches.cached(
            "contrast",
            (target_color, background_color, surrounding_colors),
            lambda: simultaneous.analyze_contrast(target_color, background_color, surrounding_colors),
        )

    def apply_correction(self, target: ColorLike, context: ContrastContext) -> Color:
        return simultaneous.apply_correction(self.color(target), context)

    def recall(self, value: ColorLike, elapsed_seconds: float) -> ColorMemory:
        """
        Remembered color after elapsed_seconds.

        Cached by the exact elapsed time; negative or non-finite times raise
        OutOfRange and are never cached.
        """
        color = self.color(value)
        return self.caches.cached(
            "memory",
            (color, float(elapsed_seconds)),
            lambda: memory.recall(color, elapsed_seconds),
        )

    def cultural_meaning(self, value: ColorLike, culture: str = "western") -> cultural.CulturalMeaning:
        return cultural.analyze_cultural_meaning(self.color(value), culture)

    # Materials

    def simulate_material(
        self,
        value: ColorLike,
        material: Union[str, materials.MaterialProperties, None] = None,
        lighting: Union[str, materials.LightingCondition] = "daylight",
    ) -> Color:
        return materials.simulate_on_material(self.color(value), material, lighting)

    def analyze_metamerism(
        self,
        first: ColorLike,
        second: ColorLike,
        lightings: Optional[Sequence[Union[str, materials.LightingCondition]]] = None,
    ) -> materials.MetamerismAnalysis:
        """Match verdicts for a pair under each light (all presets by default)."""
        if lightings is None:
            lightings = tuple(materials.LIGHTING_PRESETS)
        return materials.analyze_metamerism(self.color(first), self.color(second), lightings)

    def delta_e(self, first: ColorLike, second: ColorLike) -> float:
        return materials.delta_e(self.color(first), self.color(second))

    # Suggestions

    def suggest(
        self,
        base: ColorLike,
        context: Optional[suggestions.SuggestionContext] = None,
        count: Optional[int] = None,
    ) -> List[suggestions.Suggestion]:
        if count is None:
            count = self.settings.SUGGESTION_COUNT
        return suggestions.suggest(self.color(base), context, count)

    def score(
        self,
        candidate: ColorLike,
        base: ColorLike,
        context: Optional[suggestions.SuggestionContext] = None,
        relation: str = "complementary",
    ) -> float:
        return suggestions.score(self.color(candidate), self.color(base), context, relation)

    # Cache management

    def cache_stats(self) -> Dict[str, Any]:
        return self.caches.get_cache_stats()

    def clear_caches(self) -> bool:
        logger.debug("Clearing color engine caches")
        return self.caches.clear_all()
