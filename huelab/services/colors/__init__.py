"""
Huelab Colors Module

Pure color engine components: conversions, contrast, vision simulation,
harmony, perception models, material simulation and suggestion scoring.
"""
