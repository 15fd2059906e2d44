"""
Huelab Color Memory

Temporal decay model for remembered colors: saturation fades and lightness
drifts toward middle gray as the memory weakens. Hue is the most stable
attribute and is kept unchanged.
"""

import math

from ..conversions import hsl_to_rgb, rgb_to_hsl
from ..errors import OutOfRange
from ..types import HSL, Color, ColorMemory


DECAY_SECONDS = 30.0
GRAY_POINT = 50.0
SATURATION_FADE = 0.3
LIGHTNESS_DRIFT = 0.2
MIN_CONFIDENCE = 0.1


def memory_strength(elapsed_seconds: float) -> float:
    """exp(-t/30); 1 at t=0."""
    return math.exp(-elapsed_seconds / DECAY_SECONDS)


def recall(color: Color, elapsed_seconds: float) -> ColorMemory:
    """
    Simulate how a color is remembered after some time.

    Args:
        color: Original color
        elapsed_seconds: Seconds since the color was seen

    Returns:
        ColorMemory with the perceived color and confidence (floored at 0.1)

    Raises:
        OutOfRange: elapsed_seconds is negative or not finite
    """
    if not math.isfinite(elapsed_seconds) or elapsed_seconds < 0:
        raise OutOfRange(
            f"Elapsed time must be finite and non-negative, got {elapsed_seconds}", elapsed_seconds
        )

    strength = memory_strength(elapsed_seconds)
    fade = 1.0 - strength
    hsl = rgb_to_hsl(color)

    perceived = HSL(
        hsl.h,
        hsl.s * (1.0 - fade * SATURATION_FADE),
        hsl.l + (GRAY_POINT - hsl.l) * fade * LIGHTNESS_DRIFT,
    )

    return ColorMemory(
        original_color=color,
        time_elapsed_seconds=float(elapsed_seconds),
        memory_strength=strength,
        perceived_color=hsl_to_rgb(perceived, color.a),
        confidence_level=max(MIN_CONFIDENCE, strength),
    )
