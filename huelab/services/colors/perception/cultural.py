"""
Huelab Cultural Color Semantics

Maps a color to a coarse color name and looks up what that name carries in a
culture: associated meanings, typical usage, taboos and celebrations. The
tables are intentionally small and deterministic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from loguru import logger

from ..conversions import rgb_to_hsl
from ..errors import UnsupportedKind
from ..types import HSL, Color


class Culture(str, Enum):
    """Cultures with meaning tables."""
    WESTERN = "western"
    EASTERN = "eastern"


# Upper hue bound (exclusive) for each chromatic name; hues >= 345 wrap to red
HUE_NAMES = (
    (15.0, "red"),
    (45.0, "orange"),
    (75.0, "yellow"),
    (165.0, "green"),
    (195.0, "cyan"),
    (255.0, "blue"),
    (285.0, "purple"),
    (315.0, "magenta"),
    (345.0, "pink"),
)

ACHROMATIC_SATURATION = 10.0
WHITE_LIGHTNESS = 85.0
BLACK_LIGHTNESS = 15.0

CULTURAL_MEANINGS: Dict[Culture, Dict[str, Tuple[str, ...]]] = {
    Culture.WESTERN: {
        "red": ("passion", "danger", "love", "energy"),
        "orange": ("enthusiasm", "creativity", "warmth"),
        "yellow": ("happiness", "optimism", "caution"),
        "green": ("nature", "growth", "harmony", "money"),
        "blue": ("trust", "stability", "calm", "professional"),
        "purple": ("luxury", "mystery", "spirituality"),
        "pink": ("femininity", "romance", "playfulness"),
    },
    Culture.EASTERN: {
        "red": ("luck", "prosperity", "celebration", "joy"),
        "orange": ("spirituality", "sacred", "courage"),
        "yellow": ("imperial", "wisdom", "earth"),
        "green": ("harmony", "balance", "health"),
        "blue": ("immortality", "healing", "wood"),
        "purple": ("nobility", "spiritual awareness"),
        "pink": ("marriage", "love", "honor"),
    },
}
DEFAULT_MEANINGS = ("neutral", "balanced")

CONTEXTUAL_USAGE: Dict[str, Tuple[str, ...]] = {
    "red": ("warnings", "call-to-action", "branding", "celebrations"),
    "blue": ("corporate", "technology", "healthcare", "trust-building"),
    "green": ("environmental", "financial", "health", "growth"),
    "yellow": ("attention", "optimism", "children", "food"),
    "purple": ("luxury", "beauty", "spirituality", "creativity"),
    "orange": ("energy", "sports", "food", "enthusiasm"),
    "pink": ("beauty", "fashion", "romance", "youth"),
}
DEFAULT_USAGE = ("general", "neutral")

TABOOS: Dict[Tuple[Culture, str], Tuple[str, ...]] = {
    (Culture.EASTERN, "white"): ("mourning", "death", "funerals"),
}

CELEBRATIONS: Dict[Tuple[Culture, str], Tuple[str, ...]] = {
    (Culture.EASTERN, "red"): ("Chinese New Year", "weddings", "festivals"),
    (Culture.WESTERN, "green"): ("St. Patrick's Day", "Christmas", "Earth Day"),
}


@dataclass(frozen=True)
class CulturalMeaning:
    """What a color signals within one culture."""
    culture: str
    color: Color
    color_name: str
    meanings: Tuple[str, ...]
    emotional_weight: float
    contextual_usage: Tuple[str, ...]
    taboos: Tuple[str, ...]
    celebrations: Tuple[str, ...]


def parse_culture(culture: Union[str, Culture]) -> Culture:
    try:
        return Culture(culture)
    except ValueError:
        logger.debug(f"Rejected culture: {culture!r}")
        raise UnsupportedKind(f"Unsupported culture: {culture!r}", culture)


def hue_to_color_name(hue: float) -> str:
    """Coarse chromatic name for a hue in degrees."""
    for upper, name in HUE_NAMES:
        if hue < upper:
            return name
    return "red"


def color_name(hsl: HSL) -> str:
    """Name a color, treating near-zero saturation as white, black or gray."""
    if hsl.s < ACHROMATIC_SATURATION:
        if hsl.l >= WHITE_LIGHTNESS:
            return "white"
        if hsl.l <= BLACK_LIGHTNESS:
            return "black"
        return "gray"
    return hue_to_color_name(hsl.h)


def emotional_weight(hsl: HSL) -> float:
    """Mean of saturation and distance from mid lightness, both on [0, 1]."""
    return (hsl.s / 100.0 + abs(hsl.l - 50.0) / 50.0) / 2.0


def analyze_cultural_meaning(color: Color, culture: Union[str, Culture] = Culture.WESTERN) -> CulturalMeaning:
    """
    Describe the cultural associations of a color.

    Args:
        color: Color to describe
        culture: Culture name (western or eastern)

    Returns:
        CulturalMeaning; unknown color names fall back to neutral meanings
        and general usage

    Raises:
        UnsupportedKind: unknown culture
    """
    resolved = parse_culture(culture)
    hsl = rgb_to_hsl(color)
    name = color_name(hsl)

    return CulturalMeaning(
        culture=resolved.value,
        color=color,
        color_name=name,
        meanings=CULTURAL_MEANINGS[resolved].get(name, DEFAULT_MEANINGS),
        emotional_weight=emotional_weight(hsl),
        contextual_usage=CONTEXTUAL_USAGE.get(name, DEFAULT_USAGE),
        taboos=TABOOS.get((resolved, name), ()),
        celebrations=CELEBRATIONS.get((resolved, name), ()),
    )
