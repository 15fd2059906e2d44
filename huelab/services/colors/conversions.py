"""
Huelab Color Space Conversions

Canonical RGB <-> HSL <-> CMYK <-> LAB <-> hex conversions. All functions are
pure and total over valid inputs; only malformed text raises.

LAB here is a simplified linear approximation (not CIE L*a*b*) and must stay
exactly as written: downstream scoring assumes these constants.
"""

import math
import re
from typing import Any

from .contrast import contrast_ratio, relative_luminance
from .errors import InvalidFormat
from .types import CMYK, HSL, LAB, Color, ColorAnalysis, clamp, round_half_up, wrap_hue


HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

# Simplified LAB constants
LAB_LUMA_WEIGHTS = (0.299, 0.587, 0.114)
LAB_AXIS_SCALE = 127.0 / 255.0

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def hex_to_rgb(hex_color: str) -> Color:
    """
    Parse a hex literal into a Color.

    Args:
        hex_color: Color in format #RRGGBB (either case)

    Returns:
        Opaque Color

    Raises:
        InvalidFormat: missing '#', wrong length or non-hex digits
    """
    if not isinstance(hex_color, str) or not HEX_PATTERN.match(hex_color):
        raise InvalidFormat(f"Invalid hex color format: {hex_color!r}", hex_color)

    return Color(
        int(hex_color[1:3], 16),
        int(hex_color[3:5], 16),
        int(hex_color[5:7], 16),
    )


def rgb_to_hex(color: Color) -> str:
    """Render a Color as uppercase #RRGGBB."""
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


def rgb_to_hsl(color: Color) -> HSL:
    """
    Convert RGB to HSL.

    Values are returned unrounded so that hsl_to_rgb(rgb_to_hsl(c)) reproduces
    c exactly; use HSL.rounded() for display.
    """
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    l = (c_max + c_min) / 2.0

    if c_max == c_min:
        return HSL(0.0, 0.0, l * 100.0)

    d = c_max - c_min
    s = d / (2.0 - c_max - c_min) if l > 0.5 else d / (c_max + c_min)

    if c_max == r:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif c_max == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0

    return HSL(wrap_hue(h * 60.0), s * 100.0, l * 100.0)


def hsl_to_rgb(hsl: HSL, alpha: float = 1.0) -> Color:
    """
    Convert HSL to RGB with the piecewise hue-sector formula.

    Hue is wrapped mod 360 and saturation/lightness are clamped first, so any
    float input renders to a valid Color.
    """
    hsl = hsl.normalized()
    s = hsl.s / 100.0
    l = hsl.l / 100.0

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    hp = hsl.h / 60.0
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    m = l - c / 2.0

    if hp < 1:
        r, g, b = c, x, 0.0
    elif hp < 2:
        r, g, b = x, c, 0.0
    elif hp < 3:
        r, g, b = 0.0, c, x
    elif hp < 4:
        r, g, b = 0.0, x, c
    elif hp < 5:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return Color.from_floats((r + m) * 255.0, (g + m) * 255.0, (b + m) * 255.0, alpha)


def hsl_to_hex(hsl: HSL) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


def rgb_to_cmyk(color: Color) -> CMYK:
    """Convert RGB to CMYK percentages."""
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    k = 1.0 - max(r, g, b)

    if k >= 1.0:
        return CMYK(0.0, 0.0, 0.0, 100.0)

    c = (1.0 - r - k) / (1.0 - k)
    m = (1.0 - g - k) / (1.0 - k)
    y = (1.0 - b - k) / (1.0 - k)

    return CMYK(c * 100.0, m * 100.0, y * 100.0, k * 100.0)


def cmyk_to_rgb(cmyk: CMYK, alpha: float = 1.0) -> Color:
    """Convert CMYK percentages back to RGB (inputs clamped to [0, 100])."""
    c, m, y, k = (clamp(v, 0.0, 100.0) / 100.0 for v in (cmyk.c, cmyk.m, cmyk.y, cmyk.k))
    return Color.from_floats(
        255.0 * (1.0 - c) * (1.0 - k),
        255.0 * (1.0 - m) * (1.0 - k),
        255.0 * (1.0 - y) * (1.0 - k),
        alpha,
    )


def rgb_to_lab(color: Color) -> LAB:
    """
    Simplified linear LAB.

    L = (0.299R + 0.587G + 0.114B) scaled to 0-100
    a = (R - G) * 127/255
    b = (G - B) * 127/255
    """
    wr, wg, wb = LAB_LUMA_WEIGHTS
    luma = wr * color.r + wg * color.g + wb * color.b
    return LAB(
        luma / 255.0 * 100.0,
        (color.r - color.g) * LAB_AXIS_SCALE,
        (color.g - color.b) * LAB_AXIS_SCALE,
    )


def lab_to_rgb(lab: LAB, alpha: float = 1.0) -> Color:
    """Exact inverse of rgb_to_lab; out-of-gamut results are clamped."""
    wr, _, wb = LAB_LUMA_WEIGHTS
    luma = lab.l / 100.0 * 255.0
    r_minus_g = lab.a / LAB_AXIS_SCALE
    g_minus_b = lab.b / LAB_AXIS_SCALE

    # luma = G + wr*(R-G) - wb*(G-B) since the weights sum to 1
    g = luma - wr * r_minus_g + wb * g_minus_b
    return Color.from_floats(g + r_minus_g, g, g - g_minus_b, alpha)


def to_color(value: Any) -> Color:
    """
    Normalize caller input into a Color.

    Accepts a Color, a #RRGGBB string, an hsl() string, an HSL value, or an
    (r, g, b) / (r, g, b, a) sequence.

    Raises:
        InvalidFormat: value is none of the accepted shapes
        OutOfRange: an RGB triple has channels outside [0, 255]
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, HSL):
        return hsl_to_rgb(value)
    if isinstance(value, str):
        if value.strip().lower().startswith("hsl"):
            return hsl_to_rgb(HSL.parse(value))
        return hex_to_rgb(value)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        return Color(*value)
    raise InvalidFormat(f"Unsupported color value: {value!r}", value)


def color_temperature(color: Color) -> int:
    """Rough correlated color temperature in Kelvin, clamped to 2000-10000."""
    r, b = color.r / 255.0, color.b / 255.0
    ratio = (r - b) / (r + b + 0.001)
    return int(clamp(round_half_up(6500 + ratio * 2000), 2000, 10000))


def color_distance(first: Color, second: Color) -> float:
    """Euclidean distance in RGB space."""
    return math.sqrt(
        (first.r - second.r) ** 2 + (first.g - second.g) ** 2 + (first.b - second.b) ** 2
    )


def analyze_color(color: Color) -> ColorAnalysis:
    """Derive every representation plus luminance/contrast facts for a color."""
    luminance = relative_luminance(color)
    contrast_white = contrast_ratio(color, WHITE)
    contrast_black = contrast_ratio(color, BLACK)
    best = max(contrast_white, contrast_black)

    return ColorAnalysis(
        hex=rgb_to_hex(color),
        rgb=color.rgb,
        hsl=rgb_to_hsl(color),
        cmyk=rgb_to_cmyk(color),
        lab=rgb_to_lab(color),
        temperature=color_temperature(color),
        luminance=luminance,
        contrast_white=contrast_white,
        contrast_black=contrast_black,
        wcag_aa=best >= 4.5,
        wcag_aaa=best >= 7.0,
    )
