"""
Huelab Musical Harmony

Maps musical modes onto the color wheel. Two models are provided:

- MusicalMode: the compact offset table used by the "musical" harmony kind.
  The set is the base, the base shifted by the mode offset, then five more
  72 degree steps beyond that offset.
- MUSICAL_SCALES: full seven-note scales, one semitone = 30 degrees of hue,
  used for modal palettes and for recognizing a mode in an existing palette.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from loguru import logger

from ..conversions import hsl_to_rgb, rgb_to_hsl
from ..errors import UnsupportedKind
from ..types import HSL, Color, HarmonySet, clamp, round_half_up, wrap_hue


class MusicalMode(str, Enum):
    """Modes accepted by the musical harmony kind."""
    MAJOR = "major"
    MINOR = "minor"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    LOCRIAN = "locrian"


MODE_OFFSETS = {
    MusicalMode.MAJOR: 0.0,
    MusicalMode.MINOR: 30.0,
    MusicalMode.DORIAN: 45.0,
    MusicalMode.PHRYGIAN: 60.0,
    MusicalMode.LYDIAN: 15.0,
    MusicalMode.MIXOLYDIAN: 75.0,
    MusicalMode.LOCRIAN: 90.0,
}

MUSICAL_STEP = 72.0
MUSICAL_STEPS = 5

SEMITONE_DEGREES = 30.0


@dataclass(frozen=True)
class MusicalScale:
    """A seven-note scale and the palette character it implies."""
    name: str
    intervals: Sequence[int]  # semitones from the root
    energy: str  # low, medium, high, intense, expansive
    emotion: str


MUSICAL_SCALES: Dict[str, MusicalScale] = {
    "ionian": MusicalScale("Ionian (Major)", (0, 2, 4, 5, 7, 9, 11), "high",
                           "bright, happy, optimistic"),
    "dorian": MusicalScale("Dorian", (0, 2, 3, 5, 7, 9, 10), "medium",
                           "sophisticated, contemplative, bittersweet"),
    "phrygian": MusicalScale("Phrygian", (0, 1, 3, 5, 7, 8, 10), "intense",
                             "exotic, mysterious, intense"),
    "lydian": MusicalScale("Lydian", (0, 2, 4, 6, 7, 9, 11), "expansive",
                           "ethereal, dreamy, floating"),
    "mixolydian": MusicalScale("Mixolydian", (0, 2, 4, 5, 7, 9, 10), "medium",
                               "warm, grounded, bluesy"),
    "aeolian": MusicalScale("Aeolian (Natural Minor)", (0, 2, 3, 5, 7, 8, 10), "low",
                            "melancholic, introspective, deep"),
    "locrian": MusicalScale("Locrian", (0, 1, 3, 5, 6, 8, 10), "intense",
                            "dissonant, unstable, experimental"),
}

SCALE_ALIASES = {"major": "ionian", "minor": "aeolian"}

# Lightness shift and bounds per scale
SCALE_LIGHTNESS = {
    "ionian": (10.0, None, 80.0),
    "lydian": (15.0, None, 85.0),
    "aeolian": (-15.0, 25.0, None),
    "phrygian": (-20.0, 20.0, None),
    "locrian": (-25.0, 15.0, None),
    "dorian": (-5.0, 30.0, None),
    "mixolydian": (0.0, None, None),
}


@dataclass(frozen=True)
class MusicalAnalysis:
    """Best matching scale for a palette."""
    mode: Optional[str]
    confidence: int  # 0-100
    intervals: List[int]
    analysis: str


def parse_mode(mode: Union[str, MusicalMode]) -> MusicalMode:
    try:
        return MusicalMode(mode)
    except ValueError:
        logger.debug(f"Rejected musical mode: {mode!r}")
        raise UnsupportedKind(f"Unsupported musical mode: {mode!r}", mode)


def musical_hues(base_hue: float, mode: MusicalMode) -> List[float]:
    """
    Hues of the musical harmony for a base hue.

    Returns seven hues: base, base + offset, then base + offset + 72k for
    k = 1..5. The last step completes the circle, so it lands on the same hue
    as the offset entry.
    """
    offset_hue = wrap_hue(base_hue + MODE_OFFSETS[mode])
    hues = [wrap_hue(base_hue), offset_hue]
    for k in range(1, MUSICAL_STEPS + 1):
        hues.append(wrap_hue(offset_hue + MUSICAL_STEP * k))
    return hues


def resolve_scale(mode: str) -> str:
    """Normalize a scale name, accepting major/minor aliases."""
    key = str(mode).lower()
    key = SCALE_ALIASES.get(key, key)
    if key not in MUSICAL_SCALES:
        logger.debug(f"Rejected musical scale: {mode!r}")
        raise UnsupportedKind(f"Unknown musical mode: {mode!r}", mode)
    return key


def _scale_saturation(saturation: float, scale: MusicalScale) -> float:
    if scale.energy == "high":
        return min(100.0, saturation + 15)
    if scale.energy == "intense":
        return min(100.0, saturation + 10)
    if scale.energy == "expansive":
        return max(20.0, saturation - 10)
    if scale.energy == "low":
        return max(20.0, saturation - 20)
    return saturation


def _scale_lightness(lightness: float, key: str) -> float:
    shift, floor, ceiling = SCALE_LIGHTNESS[key]
    value = lightness + shift
    if floor is not None:
        value = max(floor, value)
    if ceiling is not None:
        value = min(ceiling, value)
    return value


def _interval_saturation(interval: int) -> float:
    # Tonic and dominant keep full saturation, third/fourth get a lift
    if interval in (0, 7):
        return 0.0
    if interval in (4, 5):
        return 5.0
    return -3.0


def _interval_lightness(interval: int) -> float:
    if interval == 0:
        return 0.0
    if interval == 7:
        return 3.0
    if interval == 11:
        return -5.0
    return math.sin(interval * math.pi / 6) * 2


def generate_modal_palette(
    root_hue: float,
    mode: str = "ionian",
    saturation: float = 70.0,
    lightness: float = 50.0,
) -> HarmonySet:
    """
    Generate a seven-color palette from a musical scale.

    Each scale degree is rotated from the root by its semitone interval
    (30 degrees each). Scale energy adjusts saturation, the scale itself
    adjusts lightness, and individual degrees get small variations.

    Args:
        root_hue: Root hue in degrees
        mode: Scale name (ionian ... locrian, or major/minor)
        saturation: Base saturation [0, 100]
        lightness: Base lightness [0, 100]

    Returns:
        HarmonySet with kind "modal" and the resolved scale name as mode
    """
    key = resolve_scale(mode)
    scale = MUSICAL_SCALES[key]

    scale_s = _scale_saturation(saturation, scale)
    scale_l = _scale_lightness(lightness, key)

    entries = []
    for interval in scale.intervals:
        entries.append(HSL(
            wrap_hue(root_hue + interval * SEMITONE_DEGREES),
            clamp(scale_s + _interval_saturation(interval), 0.0, 100.0),
            clamp(scale_l + _interval_lightness(interval), 0.0, 100.0),
        ))

    colors = [hsl_to_rgb(entry) for entry in entries]
    return HarmonySet("modal", colors, entries, mode=key)


def _mode_confidence(actual: List[int], intervals: Sequence[int]) -> int:
    matches = [interval for interval in actual if interval in intervals]
    return round_half_up(len(matches) / max(len(actual), len(intervals)) * 100)


def analyze_musical_harmony(colors: Sequence[Color]) -> MusicalAnalysis:
    """
    Find the scale whose intervals best explain a palette.

    Hues are measured relative to the first color and snapped to semitones.
    Fewer than three colors cannot be analyzed.
    """
    colors = list(colors)
    if len(colors) < 3:
        return MusicalAnalysis(None, 0, [], "Need at least 3 colors to analyze musical harmony")

    hues = [round_half_up(rgb_to_hsl(color).h) for color in colors]
    root = hues[0]
    intervals = sorted(
        round_half_up(((hue - root) % 360) / SEMITONE_DEGREES) % 12 for hue in hues
    )

    best_key, best_confidence = None, 0
    for key, scale in MUSICAL_SCALES.items():
        confidence = _mode_confidence(intervals, scale.intervals)
        if confidence > best_confidence:
            best_key, best_confidence = key, confidence

    if best_key is not None and best_confidence > 70:
        analysis = f"Strong {MUSICAL_SCALES[best_key].name} characteristics detected"
    elif best_key is not None and best_confidence > 40:
        analysis = f"Moderate {MUSICAL_SCALES[best_key].name} influence"
    else:
        analysis = "No clear musical mode pattern detected"

    return MusicalAnalysis(
        mode=best_key if best_confidence > 40 else None,
        confidence=best_confidence,
        intervals=intervals,
        analysis=analysis,
    )
