"""
Huelab Material Simulation

How a color reads on a physical surface under a light source, and metamerism
checks: two colors that match under one light can separate under another.

The surface model is a simple channel scaling (reflectance, roughness and a
saturation gain for metallic finishes) followed by the light's temperature
tint, intensity and color rendering index.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Tuple, Union

from loguru import logger

from .conversions import color_distance, hsl_to_rgb, rgb_to_hsl
from .errors import OutOfRange, UnsupportedKind
from .types import HSL, Color, clamp


# Differences below this are not noticeable
JND_DELTA_E = 2.3

ROUGHNESS_DIMMING = 0.3
METALLIC_THRESHOLD = 0.5
METALLIC_SATURATION_GAIN = 0.5
REFERENCE_LUX = 1000.0

WARM_LIGHT_KELVIN = 3000.0
COOL_LIGHT_KELVIN = 5000.0
WARM_TINT = (1.0, 0.9, 0.7)
NEUTRAL_TINT = (1.0, 1.0, 0.9)
COOL_TINT = (0.9, 0.95, 1.0)


class LightSpectrum(str, Enum):
    DAYLIGHT = "daylight"
    TUNGSTEN = "tungsten"
    FLUORESCENT = "fluorescent"
    LED = "led"
    CUSTOM = "custom"


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise OutOfRange(f"{name} must be finite, got {value!r}", value)


@dataclass(frozen=True)
class MaterialProperties:
    """Surface description; every property is a fraction in [0, 1]."""
    reflectance: float = 1.0
    roughness: float = 0.0
    metallic: float = 0.0
    transparency: float = 0.0
    subsurface_scattering: float = 0.0

    def __post_init__(self):
        for name in ("reflectance", "roughness", "metallic", "transparency", "subsurface_scattering"):
            value = getattr(self, name)
            _require_finite(name, value)
            if not 0.0 <= value <= 1.0:
                raise OutOfRange(f"Material {name}={value} outside [0, 1]", value)


@dataclass(frozen=True)
class LightingCondition:
    """Light source: color temperature in Kelvin, intensity in lux, CRI 0-100."""
    temperature: float
    intensity: float
    cri: float = 100.0
    spectrum: str = LightSpectrum.CUSTOM.value

    def __post_init__(self):
        for name in ("temperature", "intensity", "cri"):
            _require_finite(name, getattr(self, name))
        if self.temperature <= 0:
            raise OutOfRange(f"Light temperature must be positive, got {self.temperature}", self.temperature)
        if self.intensity < 0:
            raise OutOfRange(f"Light intensity must be non-negative, got {self.intensity}", self.intensity)
        if not 0.0 <= self.cri <= 100.0:
            raise OutOfRange(f"Color rendering index {self.cri} outside [0, 100]", self.cri)
        try:
            LightSpectrum(self.spectrum)
        except ValueError:
            raise UnsupportedKind(f"Unsupported light spectrum: {self.spectrum!r}", self.spectrum)


@dataclass(frozen=True)
class MetamerismAnalysis:
    """Per-light match verdicts for a color pair plus their direct difference."""
    first: Color
    second: Color
    match_under: Tuple[LightingCondition, ...]
    differ_under: Tuple[LightingCondition, ...]
    delta_e: float

    @property
    def is_metameric(self) -> bool:
        """True when the pair matches under some lights and not others."""
        return bool(self.match_under) and bool(self.differ_under)


MATERIAL_PRESETS: Dict[str, MaterialProperties] = {
    "neutral": MaterialProperties(),
    "skin": MaterialProperties(roughness=0.3, subsurface_scattering=0.8),
    "wood": MaterialProperties(roughness=0.7, subsurface_scattering=0.2),
    "metal": MaterialProperties(roughness=0.1, metallic=0.9),
    "fabric": MaterialProperties(roughness=0.8, subsurface_scattering=0.4),
    "stone": MaterialProperties(roughness=0.9, subsurface_scattering=0.1),
}

LIGHTING_PRESETS: Dict[str, LightingCondition] = {
    "daylight": LightingCondition(6500.0, 1000.0, 95.0, LightSpectrum.DAYLIGHT.value),
    "tungsten": LightingCondition(2700.0, 500.0, 100.0, LightSpectrum.TUNGSTEN.value),
    "fluorescent": LightingCondition(4000.0, 750.0, 80.0, LightSpectrum.FLUORESCENT.value),
    "led": LightingCondition(5000.0, 1000.0, 90.0, LightSpectrum.LED.value),
}


def resolve_material(material: Union[str, MaterialProperties, None]) -> MaterialProperties:
    if material is None:
        return MATERIAL_PRESETS["neutral"]
    if isinstance(material, MaterialProperties):
        return material
    if material not in MATERIAL_PRESETS:
        logger.debug(f"Rejected material preset: {material!r}")
        raise UnsupportedKind(f"Unknown material preset: {material!r}", material)
    return MATERIAL_PRESETS[material]


def resolve_lighting(lighting: Union[str, LightingCondition]) -> LightingCondition:
    if isinstance(lighting, LightingCondition):
        return lighting
    if lighting not in LIGHTING_PRESETS:
        logger.debug(f"Rejected lighting preset: {lighting!r}")
        raise UnsupportedKind(f"Unknown lighting preset: {lighting!r}", lighting)
    return LIGHTING_PRESETS[lighting]


def temperature_tint(temperature: float) -> Tuple[float, float, float]:
    """Per-channel multipliers for a light's color temperature."""
    if temperature < WARM_LIGHT_KELVIN:
        return WARM_TINT
    if temperature < COOL_LIGHT_KELVIN:
        return NEUTRAL_TINT
    return COOL_TINT


def delta_e(first: Color, second: Color) -> float:
    """RGB color difference scaled so one full-channel step is 100."""
    return color_distance(first, second) / 255.0 * 100.0


def simulate_on_material(
    color: Color,
    material: Union[str, MaterialProperties, None] = None,
    lighting: Union[str, LightingCondition] = "daylight",
) -> Color:
    """
    Simulate a color painted on a surface and lit by a light source.

    Args:
        color: Surface color
        material: Preset name, MaterialProperties or None for a neutral surface
        lighting: Preset name or LightingCondition

    Returns:
        Color as seen; alpha is preserved

    Raises:
        UnsupportedKind: unknown material or lighting preset
    """
    surface = resolve_material(material)
    light = resolve_lighting(lighting)

    factor = surface.reflectance * (1.0 - surface.roughness * ROUGHNESS_DIMMING)
    channels = tuple(value * factor for value in color.rgb)

    if surface.metallic > METALLIC_THRESHOLD:
        hsl = rgb_to_hsl(Color.from_floats(*channels))
        boosted = HSL(hsl.h, clamp(hsl.s * (1.0 + surface.metallic * METALLIC_SATURATION_GAIN), 0.0, 100.0), hsl.l)
        channels = hsl_to_rgb(boosted).rgb

    scale = min(1.0, light.intensity / REFERENCE_LUX) * (light.cri / 100.0)
    tint = temperature_tint(light.temperature)
    r, g, b = (value * weight * scale for value, weight in zip(channels, tint))
    return Color.from_floats(r, g, b, color.a)


def analyze_metamerism(
    first: Color,
    second: Color,
    lightings: Iterable[Union[str, LightingCondition]] = tuple(LIGHTING_PRESETS),
) -> MetamerismAnalysis:
    """
    Check under which lights a pair of colors can be told apart.

    Both colors are simulated on a neutral surface per light; a pair whose
    delta E stays below JND_DELTA_E matches under that light.

    Args:
        first: First color
        second: Second color
        lightings: Lights to test, preset names or LightingCondition

    Returns:
        MetamerismAnalysis with lights in input order and the unlit delta E
    """
    match_under = []
    differ_under = []
    for lighting in lightings:
        light = resolve_lighting(lighting)
        difference = delta_e(
            simulate_on_material(first, None, light),
            simulate_on_material(second, None, light),
        )
        if difference < JND_DELTA_E:
            match_under.append(light)
        else:
            differ_under.append(light)

    return MetamerismAnalysis(
        first=first,
        second=second,
        match_under=tuple(match_under),
        differ_under=tuple(differ_under),
        delta_e=delta_e(first, second),
    )
