"""
Huelab Color Engine

Deterministic color science: conversions, harmony, accessibility, vision
simulation, perceptual appearance, simultaneous contrast, color memory and
context-aware suggestions.
"""

__version__ = "1.0.0"
