"""
Huelab Simultaneous Contrast

Estimates how a background shifts the apparent hue, saturation and lightness
of a target color, and applies the matching correction so the target reads
as intended in place.
"""

from typing import Sequence

from ..contrast import relative_luminance
from ..conversions import hsl_to_rgb, rgb_to_hsl
from ..types import HSL, Color, ContrastContext, clamp, wrap_hue


HUE_WINDOW = 30.0
HUE_DRIFT_RATE = 0.5
SATURATION_BOOST_RATE = 0.2
LIGHTNESS_WINDOW = 20.0
LIGHTNESS_SHIFT_RATE = 0.3


def adaptation_level(background: Color) -> float:
    """Observer adaptation in [0, 1], driven by background luminance."""
    return min(1.0, relative_luminance(background) * 2.0)


def _away(target: float, background: float, tie_sign: float) -> float:
    if target > background:
        return 1.0
    if target < background:
        return -1.0
    return tie_sign


def analyze_contrast(
    target: Color,
    background: Color,
    surrounding: Sequence[Color] = (),
) -> ContrastContext:
    """
    Compute simultaneous-contrast deltas for a target on a background.

    Hue and lightness are pushed away from the background when they are
    within 30 degrees / 20 units of it. Saturation is boosted more on
    neutral backgrounds. Hue difference is the plain absolute difference,
    without wraparound.

    Args:
        target: Color being viewed
        background: Color directly behind it
        surrounding: Other nearby colors (recorded, not weighted)

    Returns:
        ContrastContext
    """
    target_hsl = rgb_to_hsl(target)
    background_hsl = rgb_to_hsl(background)
    adaptation = adaptation_level(background)

    hue_drift = 0.0
    hue_difference = abs(target_hsl.h - background_hsl.h)
    if hue_difference < HUE_WINDOW:
        magnitude = (HUE_WINDOW - hue_difference) * HUE_DRIFT_RATE * adaptation
        hue_drift = magnitude * _away(target_hsl.h, background_hsl.h, 1.0)

    saturation_boost = (100.0 - background_hsl.s) / 100.0 * SATURATION_BOOST_RATE * adaptation

    lightness_shift = 0.0
    lightness_difference = abs(target_hsl.l - background_hsl.l)
    if lightness_difference < LIGHTNESS_WINDOW:
        magnitude = (LIGHTNESS_WINDOW - lightness_difference) * LIGHTNESS_SHIFT_RATE * adaptation
        # Equal lightness: move toward whichever end the background is farther from
        tie_sign = 1.0 if background_hsl.l < 50.0 else -1.0
        lightness_shift = magnitude * _away(target_hsl.l, background_hsl.l, tie_sign)

    return ContrastContext(
        background_color=background,
        surrounding_colors=tuple(surrounding),
        adaptation_level=adaptation,
        hue_drift=hue_drift,
        saturation_boost=saturation_boost,
        lightness_shift=lightness_shift,
    )


def apply_correction(target: Color, context: ContrastContext) -> Color:
    """
    Apply a ContrastContext to a color.

    Hue is wrapped mod 360, saturation is scaled by (1 + boost) and lightness
    is shifted; both are clamped to [0, 100]. Alpha is preserved.
    """
    hsl = rgb_to_hsl(target)
    corrected = HSL(
        wrap_hue(hsl.h + context.hue_drift),
        clamp(hsl.s * (1.0 + context.saturation_boost), 0.0, 100.0),
        clamp(hsl.l + context.lightness_shift, 0.0, 100.0),
    )
    return hsl_to_rgb(corrected, target.a)
