"""
Huelab Suggestion Scorer

Heuristic color suggestions for a base color. Candidates come from a
perceptual complement, time-of-day / season / purpose lookup tables and a
trending list; each is scored by hue relationship, saturation similarity and
how well it fits the context. Plain deterministic heuristics, no learning.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .conversions import hex_to_rgb, rgb_to_hsl
from .errors import UnsupportedKind
from .harmony import get_hue_separation
from .perception.appearance import generate_perceptual_harmony
from .types import Color, clamp


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class Mood(str, Enum):
    ENERGETIC = "energetic"
    CALM = "calm"
    CREATIVE = "creative"
    FOCUSED = "focused"
    ROMANTIC = "romantic"


class Purpose(str, Enum):
    BRANDING = "branding"
    INTERIOR = "interior"
    FASHION = "fashion"
    DIGITAL = "digital"
    ART = "art"


TIME_COLORS = {
    TimeOfDay.MORNING: ("#FFE4B5", "#87CEEB", "#98FB98", "#F0E68C"),
    TimeOfDay.AFTERNOON: ("#FFA500", "#4169E1", "#32CD32", "#FF6347"),
    TimeOfDay.EVENING: ("#FF8C00", "#8A2BE2", "#DC143C", "#B22222"),
    TimeOfDay.NIGHT: ("#191970", "#2F4F4F", "#483D8B", "#8B008B"),
}

SEASON_COLORS = {
    Season.SPRING: ("#98FB98", "#FFB6C1", "#87CEEB", "#F0E68C"),
    Season.SUMMER: ("#FF6347", "#4169E1", "#32CD32", "#FFD700"),
    Season.FALL: ("#FF8C00", "#8B4513", "#DC143C", "#DAA520"),
    Season.WINTER: ("#4682B4", "#2F4F4F", "#8B008B", "#708090"),
}

PURPOSE_COLORS = {
    Purpose.BRANDING: ("#FF6B35", "#4ECDC4", "#45B7D1", "#96CEB4"),
    Purpose.INTERIOR: ("#F5F5DC", "#DEB887", "#8FBC8F", "#D2B48C"),
    Purpose.FASHION: ("#FF1493", "#8A2BE2", "#FF8C00", "#DC143C"),
    Purpose.DIGITAL: ("#4169E1", "#32CD32", "#FF6347", "#8A2BE2"),
    Purpose.ART: ("#FF69B4", "#9370DB", "#20B2AA", "#FF4500"),
}

TRENDING_COLORS = ("#FF6B35", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7")

# Prior confidence per suggestion source
SOURCE_CONFIDENCE = {
    "complementary": 0.85,
    "time": 0.75,
    "season": 0.7,
    "purpose": 0.8,
    "trending": 0.65,
}

HARMONY_WEIGHT = 0.6
CONTEXT_WEIGHT = 0.4

RELATIONS = ("complementary", "similar")


def time_of_day_for_hour(hour: int) -> TimeOfDay:
    if hour < 6:
        return TimeOfDay.NIGHT
    if hour < 12:
        return TimeOfDay.MORNING
    if hour < 18:
        return TimeOfDay.AFTERNOON
    if hour < 22:
        return TimeOfDay.EVENING
    return TimeOfDay.NIGHT


def season_for_month(month_index: int) -> Season:
    """Season for a 0-based month index (0 = January), northern hemisphere."""
    if 2 <= month_index <= 4:
        return Season.SPRING
    if 5 <= month_index <= 7:
        return Season.SUMMER
    if 8 <= month_index <= 10:
        return Season.FALL
    return Season.WINTER


def _parse(enum_cls, value, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise UnsupportedKind(f"Unsupported {label}: {value!r}", value)


@dataclass(frozen=True)
class SuggestionContext:
    """Context the suggestions are tailored to."""
    time_of_day: TimeOfDay = TimeOfDay.AFTERNOON
    season: Season = Season.SUMMER
    mood: Mood = Mood.FOCUSED
    purpose: Purpose = Purpose.DIGITAL

    def __post_init__(self):
        # Accept plain strings; frozen, so go through object.__setattr__
        object.__setattr__(self, "time_of_day", _parse(TimeOfDay, self.time_of_day, "time of day"))
        object.__setattr__(self, "season", _parse(Season, self.season, "season"))
        object.__setattr__(self, "mood", _parse(Mood, self.mood, "mood"))
        object.__setattr__(self, "purpose", _parse(Purpose, self.purpose, "purpose"))

    @classmethod
    def from_datetime(
        cls,
        moment: datetime,
        mood: Union[str, Mood] = Mood.FOCUSED,
        purpose: Union[str, Purpose] = Purpose.DIGITAL,
    ) -> "SuggestionContext":
        """Derive time of day and season from an explicit datetime."""
        return cls(
            time_of_day=time_of_day_for_hour(moment.hour),
            season=season_for_month(moment.month - 1),
            mood=mood,
            purpose=purpose,
        )


@dataclass(frozen=True)
class Suggestion:
    """A scored suggestion."""
    color: Color
    confidence: float
    reasoning: str
    category: str  # complementary, contextual or trending
    metadata: Dict[str, float] = field(default_factory=dict)


def _hsl(color: Color) -> Tuple[float, float, float]:
    hsl = rgb_to_hsl(color)
    return hsl.h, hsl.s, hsl.l


def seasonal_relevance(color: Color, season: Season) -> float:
    """Closeness of the color's hue to the nearest seasonal palette hue, [0, 1]."""
    h, _, _ = _hsl(color)
    best = 0.0
    for hex_color in SEASON_COLORS[season]:
        seasonal_h, _, _ = _hsl(hex_to_rgb(hex_color))
        best = max(best, 1.0 - get_hue_separation(h, seasonal_h) / 180.0)
    return best


def mood_alignment(color: Color, mood: Mood) -> float:
    h, s, l = _hsl(color)
    if mood == Mood.ENERGETIC:
        return 0.9 if s > 70 and l > 40 else 0.4
    if mood == Mood.CALM:
        return 0.9 if s < 50 and l > 60 else 0.5
    if mood == Mood.CREATIVE:
        return 0.8 if s > 60 else 0.6
    if mood == Mood.FOCUSED:
        return 0.8 if s < 60 and l < 70 else 0.5
    # Romantic: reds, pinks and magentas with some saturation
    return 0.9 if (h > 300 or h < 60) and s > 50 else 0.4


def purpose_suitability(color: Color, purpose: Purpose) -> float:
    _, s, l = _hsl(color)
    if purpose == Purpose.BRANDING:
        return 0.9 if s > 50 and 30 < l < 80 else 0.6
    if purpose == Purpose.INTERIOR:
        return 0.8 if s < 70 and l > 40 else 0.5
    if purpose == Purpose.FASHION:
        return 0.8 if s > 40 else 0.6
    if purpose == Purpose.DIGITAL:
        return 0.9 if s > 60 and 30 < l < 90 else 0.7
    return 0.8


def harmony_score(candidate: Color, base: Color, relation: str = "complementary") -> float:
    """
    Hue relationship and saturation similarity, [0, 1].

    "complementary" rewards hues near base + 180; "similar" rewards hues near
    the base hue.
    """
    if relation not in RELATIONS:
        raise UnsupportedKind(f"Unsupported suggestion relation: {relation!r}", relation)

    base_h, base_s, _ = _hsl(base)
    cand_h, cand_s, _ = _hsl(candidate)
    separation = get_hue_separation(base_h, cand_h)

    if relation == "complementary":
        relation_score = 1.0 - abs(separation - 180.0) / 180.0
    else:
        relation_score = 1.0 - separation / 180.0

    saturation_score = 1.0 - abs(base_s - cand_s) / 100.0
    return (relation_score + saturation_score) / 2.0


def context_score(candidate: Color, context: SuggestionContext) -> float:
    return (
        seasonal_relevance(candidate, context.season)
        + mood_alignment(candidate, context.mood)
        + purpose_suitability(candidate, context.purpose)
    ) / 3.0


def score(
    candidate: Color,
    base: Color,
    context: Optional[SuggestionContext] = None,
    relation: str = "complementary",
) -> float:
    """
    Confidence that candidate is a good suggestion for base in context.

    Args:
        candidate: Suggested color
        base: Color the suggestion is for
        context: Suggestion context (defaults apply when None)
        relation: "complementary" or "similar"

    Returns:
        Confidence in [0, 1]
    """
    context = context or SuggestionContext()
    blended = (
        HARMONY_WEIGHT * harmony_score(candidate, base, relation)
        + CONTEXT_WEIGHT * context_score(candidate, context)
    )
    return clamp(blended, 0.0, 1.0)


def select_best_match(base: Color, candidates: Sequence[str]) -> Optional[Color]:
    """Candidate with the best complementary harmony score; first wins ties."""
    best_color, best_score = None, -1.0
    for hex_color in candidates:
        color = hex_to_rgb(hex_color)
        value = harmony_score(color, base, "complementary")
        if value > best_score:
            best_color, best_score = color, value
    return best_color


def _metadata(candidate: Color, base: Color, context: SuggestionContext) -> Dict[str, float]:
    return {
        "harmony": harmony_score(candidate, base, "complementary"),
        "seasonal_relevance": seasonal_relevance(candidate, context.season),
        "mood_alignment": mood_alignment(candidate, context.mood),
        "purpose_suitability": purpose_suitability(candidate, context.purpose),
    }


def suggest(
    base: Color,
    context: Optional[SuggestionContext] = None,
    count: int = 5,
) -> List[Suggestion]:
    """
    Ranked suggestions for a base color.

    Each source contributes at most one candidate. Confidence is the mean of
    the source's prior and the candidate's score. Results are sorted by
    confidence (stable), duplicates keep their best entry, and at most count
    are returned.
    """
    context = context or SuggestionContext()
    raw: List[Tuple[str, str, Color, str]] = []

    complement = generate_perceptual_harmony(base, "perceptual-complementary")
    raw.append(("complementary", "complementary", complement[1],
                "Perceptually balanced complementary color"))

    time_color = select_best_match(base, TIME_COLORS[context.time_of_day])
    raw.append(("time", "contextual", time_color,
                f"Suited to {context.time_of_day.value} viewing conditions"))

    season_color = select_best_match(base, SEASON_COLORS[context.season])
    raw.append(("season", "contextual", season_color,
                f"Fits {context.season.value} color palettes"))

    purpose_color = select_best_match(base, PURPOSE_COLORS[context.purpose])
    raw.append(("purpose", "contextual", purpose_color,
                f"Works well for {context.purpose.value} applications"))

    trending_color = select_best_match(base, TRENDING_COLORS)
    raw.append(("trending", "trending", trending_color,
                "Currently trending in design communities"))

    suggestions = [
        Suggestion(
            color=color,
            confidence=(SOURCE_CONFIDENCE[source] + score(color, base, context)) / 2.0,
            reasoning=reasoning,
            category=category,
            metadata=_metadata(color, base, context),
        )
        for source, category, color, reasoning in raw
    ]
    suggestions.sort(key=lambda item: item.confidence, reverse=True)

    ranked, seen = [], set()
    for suggestion in suggestions:
        if suggestion.color.hex in seen:
            continue
        seen.add(suggestion.color.hex)
        ranked.append(suggestion)

    return ranked[:max(0, count)]
