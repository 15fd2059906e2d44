"""
Huelab Color Value Types

Immutable value types shared by every engine component. Color is the canonical
representation; HSL, CMYK and LAB are always derived from it and never stored
as a source of truth.
"""

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidFormat, OutOfRange


HSL_TEXT_PATTERN = re.compile(
    r"^\s*hsl\(\s*(-?\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)%?\s*,\s*(\d+(?:\.\d+)?)%?\s*\)\s*$",
    re.IGNORECASE,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def wrap_hue(degrees: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    wrapped = degrees % 360.0
    # A tiny negative input wraps to exactly 360.0 in float arithmetic
    return 0.0 if wrapped >= 360.0 else wrapped


@dataclass(frozen=True)
class Color:
    """Canonical RGBA color: integer channels 0-255, alpha 0-1."""
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise OutOfRange(f"Channel {name} must be an integer, got {value!r}", value)
            if not 0 <= value <= 255:
                raise OutOfRange(f"Channel {name}={value} outside [0, 255]", value)
        if not 0.0 <= self.a <= 1.0:
            raise OutOfRange(f"Alpha {self.a} outside [0, 1]", self.a)

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Build a color from unbounded float channels (round half-up, clamp)."""
        return cls(
            int(clamp(round_half_up(r), 0, 255)),
            int(clamp(round_half_up(g), 0, 255)),
            int(clamp(round_half_up(b), 0, 255)),
            float(clamp(a, 0.0, 1.0)),
        )

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class HSL:
    """Hue [0, 360), saturation [0, 100], lightness [0, 100]."""
    h: float
    s: float
    l: float

    def __post_init__(self):
        for name in ("h", "s", "l"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise OutOfRange(f"HSL {name} must be finite, got {value!r}", value)

    def normalized(self) -> "HSL":
        """Wrap hue mod 360 and clamp saturation/lightness."""
        return HSL(wrap_hue(self.h), clamp(self.s, 0.0, 100.0), clamp(self.l, 0.0, 100.0))

    def rounded(self) -> Tuple[int, int, int]:
        """Integer display values (round half-up)."""
        return (round_half_up(self.h) % 360, round_half_up(self.s), round_half_up(self.l))

    @classmethod
    def parse(cls, text: str) -> "HSL":
        """
        Parse CSS-like HSL text such as ``hsl(204, 70%, 53%)``.

        Raises:
            InvalidFormat: text is not an hsl() literal
            OutOfRange: saturation or lightness above 100
        """
        if not isinstance(text, str):
            raise InvalidFormat(f"Invalid HSL text: {text!r}", text)
        match = HSL_TEXT_PATTERN.match(text)
        if not match:
            raise InvalidFormat(f"Invalid HSL text: {text!r}", text)
        h, s, l = (float(part) for part in match.groups())
        if s > 100 or l > 100:
            raise OutOfRange(f"HSL saturation/lightness outside [0, 100]: {text!r}", text)
        return cls(wrap_hue(h), s, l)


@dataclass(frozen=True)
class CMYK:
    """Cyan, magenta, yellow, key; each [0, 100]."""
    c: float
    m: float
    y: float
    k: float


@dataclass(frozen=True)
class LAB:
    """Simplified linear LAB: l [0, 100], a/b [-128, 127]."""
    l: float
    a: float
    b: float


@dataclass(frozen=True)
class ColorAppearance:
    """Perceptual appearance attributes of a color under viewing conditions."""
    lightness: float
    chroma: float
    hue: float
    brightness: float
    colorfulness: float
    saturation: float

    # Single-letter appearance notation
    @property
    def J(self) -> float:
        return self.lightness

    @property
    def C(self) -> float:
        return self.chroma

    @property
    def h(self) -> float:
        return self.hue

    @property
    def Q(self) -> float:
        return self.brightness

    @property
    def M(self) -> float:
        return self.colorfulness

    @property
    def s(self) -> float:
        return self.saturation


@dataclass(frozen=True)
class WhitePoint:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class ViewingConditions:
    """Adapting field description used by the appearance model."""
    white_point: WhitePoint
    adapting_luminance: float  # cd/m²
    background_luminance: float  # cd/m²
    surround: str = "average"  # "dark", "dim" or "average"
    discounting_illuminant: bool = False


@dataclass(frozen=True)
class ContrastResult:
    """WCAG contrast verdict for a foreground/background pair."""
    ratio: float
    level: str  # "AAA", "AA", "A" or "FAIL"
    passes_normal: bool
    passes_large: bool


@dataclass(frozen=True)
class ContrastContext:
    """Simultaneous-contrast deltas for a target against its surroundings."""
    background_color: Color
    surrounding_colors: Tuple[Color, ...]
    adaptation_level: float
    hue_drift: float
    saturation_boost: float
    lightness_shift: float


@dataclass(frozen=True)
class ColorMemory:
    """How a color is remembered after some seconds have elapsed."""
    original_color: Color
    time_elapsed_seconds: float
    memory_strength: float
    perceived_color: Color
    confidence_level: float


class HarmonySet(Sequence):
    """
    Ordered, immutable set of harmonically related colors.

    Behaves as a sequence of Color. The exact (unquantized) HSL value each
    color was rendered from is kept in ``hsl`` so hue spacing can be checked
    without rounding noise.
    """

    __slots__ = ("_colors", "_hsl", "_kind", "_mode")

    def __init__(self, kind: str, colors, hsl, mode: Optional[str] = None):
        colors = tuple(colors)
        hsl = tuple(hsl)
        if len(colors) != len(hsl):
            raise ValueError("HarmonySet colors and hsl entries must align")
        self._colors = colors
        self._hsl = hsl
        self._kind = kind
        self._mode = mode

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def mode(self) -> Optional[str]:
        return self._mode

    @property
    def hsl(self) -> Tuple[HSL, ...]:
        return self._hsl

    @property
    def colors(self) -> Tuple[Color, ...]:
        return self._colors

    @property
    def hexes(self) -> Tuple[str, ...]:
        return tuple(color.hex for color in self._colors)

    def __getitem__(self, index):
        return self._colors[index]

    def __len__(self) -> int:
        return len(self._colors)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HarmonySet):
            return NotImplemented
        return (
            self._kind == other._kind
            and self._mode == other._mode
            and self._colors == other._colors
            and self._hsl == other._hsl
        )

    def __hash__(self) -> int:
        return hash((self._kind, self._mode, self._colors, self._hsl))

    def __repr__(self) -> str:
        return f"HarmonySet(kind={self._kind!r}, colors={list(self.hexes)!r})"


@dataclass(frozen=True)
class ColorAnalysis:
    """Full derived description of a single color."""
    hex: str
    rgb: Tuple[int, int, int]
    hsl: HSL
    cmyk: CMYK
    lab: LAB
    temperature: int
    luminance: float
    contrast_white: float
    contrast_black: float
    wcag_aa: bool
    wcag_aaa: bool
