"""
Huelab Color Vision Deficiency Simulation

Simulates how colors appear under the common color vision deficiencies using
fixed 3x3 channel-mixing matrices. Anomalous trichromacies are approximated as
an even blend of the original and the matching dichromacy.
"""

from enum import Enum
from typing import Dict, Iterable, List, Union

import numpy as np
from loguru import logger

from .errors import UnsupportedKind
from .types import Color


class ColorBlindnessKind(str, Enum):
    """Supported color vision deficiency types."""
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"
    ACHROMATOMALY = "achromatomaly"


# Matrices operate on 0-255 channel vectors
SIMULATION_MATRICES = {
    ColorBlindnessKind.PROTANOPIA: np.array([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    ColorBlindnessKind.DEUTERANOPIA: np.array([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    ColorBlindnessKind.TRITANOPIA: np.array([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
    ColorBlindnessKind.ACHROMATOPSIA: np.array([
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
    ]),
}

# Anomalous trichromacy -> full dichromacy it is blended with
ANOMALY_BASES = {
    ColorBlindnessKind.PROTANOMALY: ColorBlindnessKind.PROTANOPIA,
    ColorBlindnessKind.DEUTERANOMALY: ColorBlindnessKind.DEUTERANOPIA,
    ColorBlindnessKind.TRITANOMALY: ColorBlindnessKind.TRITANOPIA,
    ColorBlindnessKind.ACHROMATOMALY: ColorBlindnessKind.ACHROMATOPSIA,
}


def parse_kind(kind: Union[str, ColorBlindnessKind]) -> ColorBlindnessKind:
    """
    Resolve a deficiency name.

    Raises:
        UnsupportedKind: name is not one of the eight supported types
    """
    try:
        return ColorBlindnessKind(kind)
    except ValueError:
        logger.debug(f"Rejected color blindness type: {kind!r}")
        raise UnsupportedKind(f"Unsupported color blindness type: {kind!r}", kind)


def _round_channels(values: np.ndarray) -> np.ndarray:
    # np.round is banker's rounding; channel math rounds half-up
    return np.clip(np.floor(values + 0.5), 0, 255).astype(int)


def _simulate_rgb(rgb: np.ndarray, kind: ColorBlindnessKind) -> np.ndarray:
    """Simulate an (N, 3) array of 0-255 channels, returning rounded ints."""
    if kind in ANOMALY_BASES:
        dichromat = _simulate_rgb(rgb, ANOMALY_BASES[kind])
        return _round_channels((rgb + dichromat) / 2.0)

    # Row-wise multiply and sum, so one color and a batch round identically
    mixed = (rgb[:, np.newaxis, :] * SIMULATION_MATRICES[kind]).sum(axis=-1)
    return _round_channels(mixed)


def simulate(color: Color, kind: Union[str, ColorBlindnessKind]) -> Color:
    """
    Simulate one color under a color vision deficiency.

    Args:
        color: Color to simulate
        kind: Deficiency name or ColorBlindnessKind

    Returns:
        Simulated color; alpha is preserved
    """
    resolved = parse_kind(kind)
    r, g, b = _simulate_rgb(np.array([color.rgb], dtype=float), resolved)[0]
    return Color(int(r), int(g), int(b), color.a)


def get_all_simulations(color: Color) -> Dict[str, Color]:
    """Simulate a color under all eight deficiency types, keyed by name."""
    return {kind.value: simulate(color, kind) for kind in ColorBlindnessKind}


def simulate_palette(colors: Iterable[Color], kind: Union[str, ColorBlindnessKind]) -> List[Color]:
    """
    Simulate a whole palette in one vectorized pass.

    Produces exactly the same colors as calling simulate() on each entry.
    """
    resolved = parse_kind(kind)
    colors = list(colors)
    if not colors:
        return []

    rgb = np.array([color.rgb for color in colors], dtype=float)
    simulated = _simulate_rgb(rgb, resolved)

    return [
        Color(int(row[0]), int(row[1]), int(row[2]), color.a)
        for row, color in zip(simulated, colors)
    ]
