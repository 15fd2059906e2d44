"""
Huelab Perceptual Appearance Model

Simplified color appearance transform: sRGB -> XYZ, then lightness, chroma,
hue, brightness, colorfulness and saturation relative to a viewing condition's
white point and adapting luminance.

The forward transform is a reduced CIECAM02-style approximation with fixed
constants; it is not a full CIECAM02 implementation.
"""

import math
from enum import Enum
from typing import Dict, List, Tuple, Union

from loguru import logger

from ..conversions import hsl_to_rgb, rgb_to_hsl
from ..errors import OutOfRange, UnsupportedKind
from ..types import (
    HSL,
    Color,
    ColorAppearance,
    HarmonySet,
    ViewingConditions,
    WhitePoint,
    clamp,
    wrap_hue,
)


D65 = WhitePoint(95.047, 100.0, 108.883)
D50 = WhitePoint(96.422, 100.0, 82.521)

VIEWING_CONDITIONS: Dict[str, ViewingConditions] = {
    "sRGB": ViewingConditions(
        white_point=D65,
        adapting_luminance=64.0,
        background_luminance=20.0,
        surround="average",
        discounting_illuminant=False,
    ),
    "print": ViewingConditions(
        white_point=D50,
        adapting_luminance=160.0,
        background_luminance=32.0,
        surround="average",
        discounting_illuminant=True,
    ),
    "darkRoom": ViewingConditions(
        white_point=D65,
        adapting_luminance=16.0,
        background_luminance=3.2,
        surround="dark",
        discounting_illuminant=False,
    ),
}

SURROUNDS = ("dark", "dim", "average")

# Linear sRGB -> XYZ (D65)
SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

REFERENCE_LUMINANCE = 64.0
LIGHTNESS_EXPONENT = 0.42


class PerceptualHarmonyKind(str, Enum):
    """Harmony sets built in appearance space."""
    COMPLEMENTARY = "perceptual-complementary"
    TRIADIC = "perceptual-triadic"
    LIGHTNESS_SERIES = "lightness-series"
    CHROMA_SERIES = "chroma-series"


LIGHTNESS_STEPS = (20.0, 35.0, 50.0, 65.0, 80.0)
CHROMA_STEPS = (10.0, 30.0, 50.0, 70.0, 90.0)
SERIES_MIN_GAP = 5.0


def resolve_viewing_conditions(conditions: Union[str, ViewingConditions, None]) -> ViewingConditions:
    """
    Resolve a preset name or validate a custom viewing condition.

    Raises:
        UnsupportedKind: unknown preset name or surround
        OutOfRange: non-finite values, or non-positive adapting luminance or white point Y
    """
    if conditions is None:
        return VIEWING_CONDITIONS["sRGB"]

    if isinstance(conditions, str):
        if conditions not in VIEWING_CONDITIONS:
            logger.debug(f"Rejected viewing conditions preset: {conditions!r}")
            raise UnsupportedKind(f"Unknown viewing conditions preset: {conditions!r}", conditions)
        return VIEWING_CONDITIONS[conditions]

    values = (
        conditions.adapting_luminance,
        conditions.background_luminance,
        conditions.white_point.x,
        conditions.white_point.y,
        conditions.white_point.z,
    )
    if not all(math.isfinite(value) for value in values):
        raise OutOfRange(f"Viewing conditions must be finite, got {values}", values)
    if conditions.adapting_luminance <= 0:
        raise OutOfRange(
            f"Adapting luminance must be positive, got {conditions.adapting_luminance}",
            conditions.adapting_luminance,
        )
    if conditions.white_point.y <= 0:
        raise OutOfRange(
            f"White point Y must be positive, got {conditions.white_point.y}",
            conditions.white_point.y,
        )
    if conditions.surround not in SURROUNDS:
        raise UnsupportedKind(f"Unknown surround: {conditions.surround!r}", conditions.surround)

    return conditions


def _decode_srgb(value: int) -> float:
    c = value / 255.0
    if c > 0.04045:
        return ((c + 0.055) / 1.055) ** 2.4
    return c / 12.92


def rgb_to_xyz(color: Color) -> Tuple[float, float, float]:
    """
    Convert a color to CIE XYZ (D65), scaled to 0-100.

    Args:
        color: Color to convert

    Returns:
        Tuple of (X, Y, Z)
    """
    linear = (_decode_srgb(color.r), _decode_srgb(color.g), _decode_srgb(color.b))
    x, y, z = (
        sum(coefficient * channel for coefficient, channel in zip(row, linear)) * 100.0
        for row in SRGB_TO_XYZ
    )
    return x, y, z


def appearance(color: Color, conditions: Union[str, ViewingConditions, None] = None) -> ColorAppearance:
    """
    Calculate perceptual appearance attributes.

    J = 100 * (Y/Yw)^0.42, clamped to [0, 100]
    C = sqrt((X-Xw)^2 + (Z-Zw)^2) / 2
    h = atan2(Z-Zw, X-Xw) in degrees, wrapped to [0, 360)
    Q = J * sqrt(La/64)
    M = C * (La/64)^0.25
    s = M/Q * 100, clamped to [0, 100] and 0 when Q is 0

    Args:
        color: Color to evaluate
        conditions: Preset name, ViewingConditions or None for sRGB

    Returns:
        ColorAppearance
    """
    vc = resolve_viewing_conditions(conditions)
    wp = vc.white_point
    x, y, z = rgb_to_xyz(color)

    lightness = clamp(100.0 * (max(y, 0.0) / wp.y) ** LIGHTNESS_EXPONENT, 0.0, 100.0)
    dx = x - wp.x
    dz = z - wp.z
    chroma = math.sqrt(dx * dx + dz * dz) / 2.0
    hue = wrap_hue(math.degrees(math.atan2(dz, dx)))

    adaptation = vc.adapting_luminance / REFERENCE_LUMINANCE
    brightness = lightness * math.sqrt(adaptation)
    colorfulness = chroma * adaptation ** 0.25

    if brightness > 0:
        saturation = clamp(colorfulness / brightness * 100.0, 0.0, 100.0)
    else:
        saturation = 0.0

    return ColorAppearance(
        lightness=lightness,
        chroma=chroma,
        hue=hue,
        brightness=brightness,
        colorfulness=colorfulness,
        saturation=saturation,
    )


def appearance_to_hsl(lightness: float, chroma: float, hue: float) -> HSL:
    """Approximate inverse of the appearance transform in HSL terms."""
    return HSL(wrap_hue(hue), clamp(chroma * 2.0, 0.0, 100.0), clamp(lightness, 0.0, 100.0))


def appearance_to_color(lightness: float, chroma: float, hue: float) -> Color:
    """
    Render appearance attributes back to a color.

    Not a true inverse: saturation is taken as 2*C and lightness as J.
    """
    return hsl_to_rgb(appearance_to_hsl(lightness, chroma, hue))


def parse_perceptual_kind(kind: Union[str, PerceptualHarmonyKind]) -> PerceptualHarmonyKind:
    try:
        return PerceptualHarmonyKind(kind)
    except ValueError:
        raise UnsupportedKind(f"Unsupported perceptual harmony: {kind!r}", kind)


def generate_perceptual_harmony(
    base: Color,
    kind: Union[str, PerceptualHarmonyKind],
    conditions: Union[str, ViewingConditions, None] = None,
) -> HarmonySet:
    """
    Build a harmony set in appearance space.

    Hue rotations use the appearance hue rather than the HSL hue. Series kinds
    step lightness or chroma and skip steps within 5 units of the base.

    Args:
        base: Base color (element 0 of the result)
        kind: PerceptualHarmonyKind name
        conditions: Viewing conditions for the base appearance

    Returns:
        HarmonySet whose kind is the perceptual harmony name
    """
    resolved = parse_perceptual_kind(kind)
    base_appearance = appearance(base, conditions)
    j, c, h = base_appearance.lightness, base_appearance.chroma, base_appearance.hue

    entries: List[HSL] = []
    if resolved == PerceptualHarmonyKind.COMPLEMENTARY:
        entries.append(appearance_to_hsl(j, c, h + 180.0))
    elif resolved == PerceptualHarmonyKind.TRIADIC:
        for i in (1, 2):
            entries.append(appearance_to_hsl(j, c, h + i * 120.0))
    elif resolved == PerceptualHarmonyKind.LIGHTNESS_SERIES:
        for step in LIGHTNESS_STEPS:
            if abs(step - j) > SERIES_MIN_GAP:
                entries.append(appearance_to_hsl(step, c, h))
    else:
        for step in CHROMA_STEPS:
            if abs(step - c) > SERIES_MIN_GAP:
                entries.append(appearance_to_hsl(j, step, h))

    colors = [base] + [hsl_to_rgb(entry, base.a) for entry in entries]
    return HarmonySet(resolved.value, colors, [rgb_to_hsl(base)] + entries)
