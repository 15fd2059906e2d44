"""
Huelab Contrast Analyzer

WCAG 2.x relative luminance, contrast ratio and conformance levels, plus a
coarse foreground fix-up for failing pairs.
"""

from .types import Color, ContrastResult


# WCAG thresholds
AAA_RATIO = 7.0
AA_RATIO = 4.5
A_RATIO = 3.0

# suggest_fix scale factors
DARKEN_FACTOR = 0.3
LIGHTEN_FACTOR = 2.5


def _linearize(value: int) -> float:
    c = value / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """
    Calculate WCAG relative luminance.

    Args:
        color: Color to measure

    Returns:
        Luminance in [0, 1]
    """
    return (
        0.2126 * _linearize(color.r)
        + 0.7152 * _linearize(color.g)
        + 0.0722 * _linearize(color.b)
    )


def contrast_ratio(first: Color, second: Color) -> float:
    """
    Calculate the WCAG contrast ratio between two colors.

    The ratio is symmetric and lies in [1, 21].
    """
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float) -> str:
    """Map a contrast ratio to AAA / AA / A / FAIL."""
    if ratio >= AAA_RATIO:
        return "AAA"
    if ratio >= AA_RATIO:
        return "AA"
    if ratio >= A_RATIO:
        return "A"
    return "FAIL"


def analyze(foreground: Color, background: Color) -> ContrastResult:
    """
    Evaluate a foreground/background pair.

    Args:
        foreground: Text color
        background: Surface color

    Returns:
        ContrastResult with ratio, level and normal/large text pass flags
    """
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=ratio,
        level=wcag_level(ratio),
        passes_normal=ratio >= AA_RATIO,
        passes_large=ratio >= A_RATIO,
    )


def suggest_fix(foreground: Color, background: Color) -> Color:
    """
    Push the foreground away from the background luminance.

    Darkens on light backgrounds (channels x0.3) and lightens on dark ones
    (channels x2.5). This is a single coarse step, not a search, so the result
    is not guaranteed to reach AA.
    """
    factor = DARKEN_FACTOR if relative_luminance(background) > 0.5 else LIGHTEN_FACTOR
    return Color.from_floats(
        foreground.r * factor,
        foreground.g * factor,
        foreground.b * factor,
        foreground.a,
    )
