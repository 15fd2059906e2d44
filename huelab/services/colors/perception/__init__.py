"""
Huelab Perception Models

Appearance under viewing conditions, simultaneous contrast, color memory and
cultural color semantics.
"""

from .appearance import (
    VIEWING_CONDITIONS,
    PerceptualHarmonyKind,
    appearance,
    appearance_to_color,
    generate_perceptual_harmony,
    resolve_viewing_conditions,
    rgb_to_xyz,
)
from .cultural import Culture, analyze_cultural_meaning
from .memory import recall
from .simultaneous import analyze_contrast, apply_correction

__all__ = [
    "VIEWING_CONDITIONS",
    "Culture",
    "PerceptualHarmonyKind",
    "analyze_contrast",
    "analyze_cultural_meaning",
    "appearance",
    "appearance_to_color",
    "apply_correction",
    "generate_perceptual_harmony",
    "recall",
    "resolve_viewing_conditions",
    "rgb_to_xyz",
]
