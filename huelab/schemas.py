"""
Huelab API Schemas
Pydantic models for color engine request/response validation.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("huelab-color-engine", description="Service name")


class ErrorResponse(BaseModel):
    """Error response raised by the color engine."""
    detail: str = Field(..., description="Error message")
    code: str = Field(..., description="Stable error code (invalid_format, out_of_range, unsupported_kind)")


# ============================================================================
# COLOR REPRESENTATIONS
# ============================================================================

class RGBModel(BaseModel):
    """Integer RGB triple."""
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HSLModel(BaseModel):
    """HSL color; hue in degrees, saturation/lightness in percent."""
    h: float = Field(..., ge=0.0, lt=360.0, description="Hue [0, 360)")
    s: float = Field(..., ge=0.0, le=100.0, description="Saturation [0, 100]")
    l: float = Field(..., ge=0.0, le=100.0, description="Lightness [0, 100]")


class CMYKModel(BaseModel):
    c: float
    m: float
    y: float
    k: float


class LABModel(BaseModel):
    """Simplified linear LAB (not CIE L*a*b*)."""
    l: float
    a: float
    b: float


class ConvertRequest(BaseModel):
    """Color to convert; provide exactly one of color, rgb or hsl."""
    color: Optional[str] = Field(
        None,
        description="Hex color #RRGGBB or CSS-like hsl(h, s%, l%) text"
    )
    rgb: Optional[RGBModel] = Field(None, description="Integer RGB triple")
    hsl: Optional[HSLModel] = Field(None, description="HSL color")


class ConvertResponse(BaseModel):
    """Every representation of a color plus luminance facts."""
    hex: str = Field(..., pattern=HEX_PATTERN)
    rgb: RGBModel
    hsl: HSLModel
    cmyk: CMYKModel
    lab: LABModel
    temperature: int = Field(..., description="Approximate color temperature in Kelvin")
    luminance: float = Field(..., ge=0.0, description="WCAG relative luminance")
    contrast_white: float
    contrast_black: float
    wcag_aa: bool
    wcag_aaa: bool


# ============================================================================
# ACCESSIBILITY
# ============================================================================

class ContrastRequest(BaseModel):
    foreground: str = Field(..., pattern=HEX_PATTERN, description="Text color")
    background: str = Field(..., pattern=HEX_PATTERN, description="Surface color")


class ContrastResponse(BaseModel):
    ratio: float = Field(..., ge=1.0, description="Contrast ratio, 1 to 21")
    level: str = Field(..., description="AAA, AA, A or FAIL")
    passes_normal: bool
    passes_large: bool
    suggested_fix: Optional[str] = Field(
        None,
        description="Adjusted foreground when the pair fails normal text"
    )


class VisionRequest(BaseModel):
    color: str = Field(..., pattern=HEX_PATTERN)
    kind: Optional[str] = Field(None, description="Single deficiency type; all eight when omitted")


class VisionResponse(BaseModel):
    original: str
    simulations: Dict[str, str]


# ============================================================================
# HARMONY
# ============================================================================

class HarmonyRequest(BaseModel):
    base: str = Field(..., pattern=HEX_PATTERN, description="Base color")
    kind: str = Field(..., description="Harmony kind, palette scheme or perceptual harmony name")
    mode: Optional[str] = Field(None, description="Musical mode for the musical kind")
    count: int = Field(5, ge=2, le=12, description="Colors for count-based palette schemes")


class HarmonyResponse(BaseModel):
    kind: str
    mode: Optional[str] = None
    colors: List[str]
    hsl: List[HSLModel]


# ============================================================================
# PERCEPTION
# ============================================================================

class ViewingConditionsModel(BaseModel):
    """Custom viewing conditions."""
    white_point: List[float] = Field(..., min_length=3, max_length=3, description="XYZ white point")
    adapting_luminance: float = Field(..., description="Adapting field luminance in cd/m2")
    background_luminance: float = Field(..., description="Background luminance in cd/m2")
    surround: str = Field("average", pattern="^(dark|dim|average)$")
    discounting_illuminant: bool = False


class AppearanceRequest(BaseModel):
    color: str = Field(..., pattern=HEX_PATTERN)
    viewing: Optional[str] = Field(None, description="Preset name: sRGB, print or darkRoom")
    custom: Optional[ViewingConditionsModel] = Field(None, description="Custom viewing conditions")


class AppearanceResponse(BaseModel):
    lightness: float
    chroma: float
    hue: float
    brightness: float
    colorfulness: float
    saturation: float


class SimultaneousContrastRequest(BaseModel):
    target: str = Field(..., pattern=HEX_PATTERN)
    background: str = Field(..., pattern=HEX_PATTERN)
    surrounding: List[str] = Field(default_factory=list, max_length=16)

    @field_validator("surrounding")
    @classmethod
    def validate_surrounding(cls, v):
        for value in v:
            if not isinstance(value, str) or len(value) != 7 or not value.startswith("#"):
                raise ValueError("surrounding colors must be #RRGGBB")
        return v


class SimultaneousContrastResponse(BaseModel):
    adaptation_level: float
    hue_drift: float
    saturation_boost: float
    lightness_shift: float
    corrected: str = Field(..., description="Target after applying the correction")


class MemoryRequest(BaseModel):
    color: str = Field(..., pattern=HEX_PATTERN)
    elapsed_seconds: float = Field(..., description="Seconds since the color was seen")


class MemoryResponse(BaseModel):
    original: str
    perceived: str
    time_elapsed_seconds: float
    memory_strength: float = Field(..., ge=0.0, le=1.0)
    confidence_level: float = Field(..., ge=0.1, le=1.0)


# ============================================================================
# SUGGESTIONS
# ============================================================================

class SuggestionsRequest(BaseModel):
    base: str = Field(..., pattern=HEX_PATTERN)
    time_of_day: str = Field("afternoon", pattern="^(morning|afternoon|evening|night)$")
    season: str = Field("summer", pattern="^(spring|summer|fall|winter)$")
    mood: str = Field("focused", pattern="^(energetic|calm|creative|focused|romantic)$")
    purpose: str = Field("digital", pattern="^(branding|interior|fashion|digital|art)$")
    count: Optional[int] = Field(None, ge=1, le=20)


class SuggestionItem(BaseModel):
    color: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    reasoning: str
    category: str
    metadata: Dict[str, float]


class SuggestionsResponse(BaseModel):
    base: str
    suggestions: List[SuggestionItem]


# ============================================================================
# CULTURE
# ============================================================================

class CulturalMeaningRequest(BaseModel):
    color: str = Field(..., pattern=HEX_PATTERN)
    culture: str = Field("western", pattern="^(western|eastern)$")


class CulturalMeaningResponse(BaseModel):
    culture: str
    color: str
    color_name: str
    meanings: List[str]
    emotional_weight: float = Field(..., ge=0.0, le=1.0)
    contextual_usage: List[str]
    taboos: List[str]
    celebrations: List[str]


# ============================================================================
# MATERIALS
# ============================================================================

class MaterialModel(BaseModel):
    """Custom surface; every property is a fraction."""
    reflectance: float = Field(1.0, ge=0.0, le=1.0)
    roughness: float = Field(0.0, ge=0.0, le=1.0)
    metallic: float = Field(0.0, ge=0.0, le=1.0)
    transparency: float = Field(0.0, ge=0.0, le=1.0)
    subsurface_scattering: float = Field(0.0, ge=0.0, le=1.0)


class LightingModel(BaseModel):
    """Custom light source."""
    temperature: float = Field(..., gt=0.0, description="Color temperature in Kelvin")
    intensity: float = Field(..., ge=0.0, description="Illuminance in lux")
    cri: float = Field(100.0, ge=0.0, le=100.0, description="Color rendering index")
    spectrum: str = Field("custom", pattern="^(daylight|tungsten|fluorescent|led|custom)$")


class MaterialRequest(BaseModel):
    color: str = Field(..., pattern=HEX_PATTERN)
    material: Optional[str] = Field(None, description="Material preset; neutral surface when omitted")
    properties: Optional[MaterialModel] = Field(None, description="Custom surface, overrides material")
    lighting: str = Field("daylight", description="Lighting preset")
    custom_lighting: Optional[LightingModel] = Field(None, description="Custom light, overrides lighting")


class MaterialResponse(BaseModel):
    original: str
    simulated: str


class MetamerismRequest(BaseModel):
    first: str = Field(..., pattern=HEX_PATTERN)
    second: str = Field(..., pattern=HEX_PATTERN)
    lightings: Optional[List[str]] = Field(None, description="Lighting presets; all when omitted")


class MetamerismResponse(BaseModel):
    first: str
    second: str
    match_under: List[str]
    differ_under: List[str]
    delta_e: float = Field(..., ge=0.0)
    is_metameric: bool
