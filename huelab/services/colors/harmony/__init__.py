"""
Huelab Harmony Generator

Generates harmonically related color sets by rotating the base hue around the
color wheel while holding saturation and lightness. n-adic harmonies divide
the wheel evenly; the musical harmony follows a mode offset table (see
musical.py). Auxiliary palette schemes (analogous, split-complementary,
monochromatic, golden-ratio, fibonacci) live alongside as SchemeKind.
"""

from enum import Enum
from typing import List, Optional, Union

from loguru import logger

from ..conversions import hsl_to_rgb, rgb_to_hsl
from ..errors import UnsupportedKind
from ..types import HSL, Color, HarmonySet, clamp, wrap_hue
from .musical import MusicalMode, musical_hues, parse_mode


class HarmonyKind(str, Enum):
    """Supported harmony kinds."""
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    PENTADIC = "pentadic"
    HEXADIC = "hexadic"
    HEPTADIC = "heptadic"
    OCTADIC = "octadic"
    MUSICAL = "musical"


# Number of colors produced per kind
HARMONY_SIZES = {
    HarmonyKind.COMPLEMENTARY: 2,
    HarmonyKind.TRIADIC: 3,
    HarmonyKind.TETRADIC: 4,
    HarmonyKind.PENTADIC: 5,
    HarmonyKind.HEXADIC: 6,
    HarmonyKind.HEPTADIC: 7,
    HarmonyKind.OCTADIC: 8,
    HarmonyKind.MUSICAL: 7,
}


class SchemeKind(str, Enum):
    """Palette schemes that are not evenly spaced harmonies."""
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split-complementary"
    MONOCHROMATIC = "monochromatic"
    GOLDEN_RATIO = "golden-ratio"
    FIBONACCI = "fibonacci"


GOLDEN_ANGLE = 137.508
ANALOGOUS_STEP = 30.0
SPLIT_COMPLEMENT_SPREAD = 30.0

# Hue offsets after the base are Fibonacci numbers in 15 degree units
FIBONACCI_OFFSETS = (1, 2, 3, 5, 8, 13, 21, 34, 55)
FIBONACCI_DEGREES = 15.0


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue in [0, 360)
    """
    return wrap_hue(h + degrees)


def get_hue_separation(h1: float, h2: float) -> float:
    """
    Calculate the minimum angular separation between two hues.

    Args:
        h1: First hue in degrees
        h2: Second hue in degrees

    Returns:
        Minimum separation in degrees [0, 180]
    """
    diff = abs(h1 - h2) % 360.0

    # Consider wraparound
    return min(diff, 360.0 - diff)


def parse_kind(kind: Union[str, HarmonyKind]) -> HarmonyKind:
    try:
        return HarmonyKind(kind)
    except ValueError:
        logger.debug(f"Rejected harmony kind: {kind!r}")
        raise UnsupportedKind(f"Unsupported harmony kind: {kind!r}", kind)


def parse_scheme(scheme: Union[str, SchemeKind]) -> SchemeKind:
    try:
        return SchemeKind(scheme)
    except ValueError:
        logger.debug(f"Rejected palette scheme: {scheme!r}")
        raise UnsupportedKind(f"Unsupported palette scheme: {scheme!r}", scheme)


def _build_set(kind: str, base: Color, entries: List[HSL], mode: Optional[str] = None) -> HarmonySet:
    """Render HSL entries; entry 0 is always the base color itself."""
    colors = [base] + [hsl_to_rgb(entry, base.a) for entry in entries[1:]]
    return HarmonySet(kind, colors, entries, mode=mode)


def n_adic_hues(base_hue: float, count: int) -> List[float]:
    """Evenly spaced hues starting at base_hue."""
    step = 360.0 / count
    return [rotate_hue(base_hue, i * step) for i in range(count)]


def generate(
    base: Color,
    kind: Union[str, HarmonyKind],
    mode: Union[str, MusicalMode, None] = None,
) -> HarmonySet:
    """
    Generate a harmony set for a base color.

    Args:
        base: Base color (element 0 of the result)
        kind: Harmony kind name or HarmonyKind
        mode: Musical mode, only used by the musical kind (default major)

    Returns:
        HarmonySet of HARMONY_SIZES[kind] colors

    Raises:
        UnsupportedKind: unknown kind or mode name
    """
    resolved = parse_kind(kind)
    base_hsl = rgb_to_hsl(base)

    if resolved == HarmonyKind.MUSICAL:
        musical_mode = parse_mode(mode or MusicalMode.MAJOR)
        hues = musical_hues(base_hsl.h, musical_mode)
        mode_name = musical_mode.value
    else:
        hues = n_adic_hues(base_hsl.h, HARMONY_SIZES[resolved])
        mode_name = None

    # Saturation 0 still yields distinct hues; they all render gray
    entries = [HSL(h, base_hsl.s, base_hsl.l) for h in hues]
    return _build_set(resolved.value, base, entries, mode=mode_name)


def generate_scheme(base: Color, scheme: Union[str, SchemeKind], count: int = 5) -> HarmonySet:
    """
    Generate an auxiliary palette scheme.

    Args:
        base: Base color (element 0 of the result)
        scheme: Scheme name or SchemeKind
        count: Total colors for the monochromatic, golden-ratio and fibonacci
            schemes, base included. Raised to 2; fibonacci stops at 10.

    Returns:
        HarmonySet whose kind is the scheme name
    """
    resolved = parse_scheme(scheme)
    if count < 2:
        count = 2

    base_hsl = rgb_to_hsl(base)
    h, s, l = base_hsl.h, base_hsl.s, base_hsl.l

    if resolved == SchemeKind.ANALOGOUS:
        entries = [
            base_hsl,
            HSL(rotate_hue(h, -ANALOGOUS_STEP), s, l),
            HSL(rotate_hue(h, ANALOGOUS_STEP), s, l),
        ]
    elif resolved == SchemeKind.SPLIT_COMPLEMENTARY:
        complement = rotate_hue(h, 180.0)
        entries = [
            base_hsl,
            HSL(rotate_hue(complement, -SPLIT_COMPLEMENT_SPREAD), s, l),
            HSL(rotate_hue(complement, SPLIT_COMPLEMENT_SPREAD), s, l),
        ]
    elif resolved == SchemeKind.MONOCHROMATIC:
        # Lightness rungs start at 20 and step 80/(count - 1), clamped to [10, 90]
        step = 80.0 / (count - 1)
        entries = [base_hsl] + [
            HSL(h, s, clamp(20.0 + step * i, 10.0, 90.0)) for i in range(count - 1)
        ]
    elif resolved == SchemeKind.FIBONACCI:
        entries = [base_hsl] + [
            HSL(rotate_hue(h, offset * FIBONACCI_DEGREES), s, l)
            for offset in FIBONACCI_OFFSETS[:count - 1]
        ]
    else:
        entries = [HSL(rotate_hue(h, GOLDEN_ANGLE * i), s, l) for i in range(count)]

    return _build_set(resolved.value, base, entries)


__all__ = [
    "FIBONACCI_DEGREES",
    "FIBONACCI_OFFSETS",
    "HARMONY_SIZES",
    "HarmonyKind",
    "MusicalMode",
    "SchemeKind",
    "generate",
    "generate_scheme",
    "get_hue_separation",
    "n_adic_hues",
    "rotate_hue",
]
