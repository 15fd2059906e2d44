"""
Huelab v1 API Routes
Thin HTTP exposure of the color engine. Routes validate input with pydantic,
call the shared ColorEngine and shape plain responses; engine errors are
turned into 422 responses by the handler registered in huelab.main.
"""
from typing import List

from fastapi import APIRouter, HTTPException

from huelab.schemas import (
    AppearanceRequest,
    AppearanceResponse,
    CMYKModel,
    ContrastRequest,
    ContrastResponse,
    ConvertRequest,
    ConvertResponse,
    CulturalMeaningRequest,
    CulturalMeaningResponse,
    ErrorResponse,
    HarmonyRequest,
    HarmonyResponse,
    HSLModel,
    LABModel,
    MaterialRequest,
    MaterialResponse,
    MemoryRequest,
    MemoryResponse,
    MetamerismRequest,
    MetamerismResponse,
    RGBModel,
    SimultaneousContrastRequest,
    SimultaneousContrastResponse,
    SuggestionItem,
    SuggestionsRequest,
    SuggestionsResponse,
    VisionRequest,
    VisionResponse,
)
from huelab.services.colors.harmony import HarmonyKind, SchemeKind
from huelab.services.colors.materials import LIGHTING_PRESETS, LightingCondition, MaterialProperties
from huelab.services.colors.perception.appearance import PerceptualHarmonyKind
from huelab.services.colors.suggestions import SuggestionContext
from huelab.services.colors.types import HSL, HarmonySet, ViewingConditions, WhitePoint
from huelab.services.engine import ColorEngine
from huelab.utils.logging import get_logger

router = APIRouter(
    prefix="/v1",
    tags=["Color Engine"],
    responses={422: {"model": ErrorResponse, "description": "Color engine input error"}},
)

# Shared engine for the host process
engine = ColorEngine()

SCHEME_NAMES = {kind.value for kind in SchemeKind}
PERCEPTUAL_NAMES = {kind.value for kind in PerceptualHarmonyKind}


def _hsl_model(hsl: HSL) -> HSLModel:
    hsl = hsl.normalized()
    return HSLModel(h=hsl.h, s=hsl.s, l=hsl.l)


def _harmony_response(harmony_set: HarmonySet) -> HarmonyResponse:
    return HarmonyResponse(
        kind=harmony_set.kind,
        mode=harmony_set.mode,
        colors=list(harmony_set.hexes),
        hsl=[_hsl_model(entry) for entry in harmony_set.hsl],
    )


@router.post("/convert", response_model=ConvertResponse,
             summary="Convert a color",
             description="Return hex, RGB, HSL, CMYK, LAB and luminance facts for a color")
async def convert(request: ConvertRequest) -> ConvertResponse:
    if request.color is not None:
        value = request.color
    elif request.rgb is not None:
        value = (request.rgb.r, request.rgb.g, request.rgb.b)
    elif request.hsl is not None:
        value = HSL(request.hsl.h, request.hsl.s, request.hsl.l)
    else:
        raise HTTPException(status_code=400, detail="Provide one of color, rgb or hsl")

    analysis = engine.analyze_color(value)
    r, g, b = analysis.rgb
    return ConvertResponse(
        hex=analysis.hex,
        rgb=RGBModel(r=r, g=g, b=b),
        hsl=_hsl_model(analysis.hsl),
        cmyk=CMYKModel(c=analysis.cmyk.c, m=analysis.cmyk.m, y=analysis.cmyk.y, k=analysis.cmyk.k),
        lab=LABModel(l=analysis.lab.l, a=analysis.lab.a, b=analysis.lab.b),
        temperature=analysis.temperature,
        luminance=analysis.luminance,
        contrast_white=analysis.contrast_white,
        contrast_black=analysis.contrast_black,
        wcag_aa=analysis.wcag_aa,
        wcag_aaa=analysis.wcag_aaa,
    )


@router.post("/contrast", response_model=ContrastResponse,
             summary="WCAG contrast check")
async def contrast(request: ContrastRequest) -> ContrastResponse:
    result = engine.contrast(request.foreground, request.background)
    suggested = None
    if not result.passes_normal:
        suggested = engine.suggest_fix(request.foreground, request.background).hex

    return ContrastResponse(
        ratio=result.ratio,
        level=result.level,
        passes_normal=result.passes_normal,
        passes_large=result.passes_large,
        suggested_fix=suggested,
    )


@router.post("/harmony", response_model=HarmonyResponse,
             summary="Generate a harmony set",
             description="Harmony kinds, palette schemes and perceptual harmonies share this route")
async def generate_harmony(request: HarmonyRequest) -> HarmonyResponse:
    if request.kind in SCHEME_NAMES:
        harmony_set = engine.scheme(request.base, request.kind, request.count)
    elif request.kind in PERCEPTUAL_NAMES:
        harmony_set = engine.perceptual_harmony(request.base, request.kind)
    else:
        harmony_set = engine.harmony(request.base, request.kind, request.mode)
    return _harmony_response(harmony_set)


@router.get("/harmony/kinds", summary="List harmony kinds and schemes")
async def harmony_kinds():
    return {
        "harmony": [kind.value for kind in HarmonyKind],
        "schemes": sorted(SCHEME_NAMES),
        "perceptual": sorted(PERCEPTUAL_NAMES),
    }


@router.post("/vision", response_model=VisionResponse,
             summary="Color vision deficiency simulation")
async def vision(request: VisionRequest) -> VisionResponse:
    if request.kind:
        simulations = {request.kind: engine.simulate(request.color, request.kind).hex}
    else:
        simulations = {name: color.hex for name, color in engine.get_all_simulations(request.color).items()}
    return VisionResponse(original=engine.to_hex(request.color), simulations=simulations)


@router.post("/appearance", response_model=AppearanceResponse,
             summary="Perceptual appearance under viewing conditions")
async def appearance(request: AppearanceRequest) -> AppearanceResponse:
    conditions = request.viewing
    if request.custom is not None:
        x, y, z = request.custom.white_point
        conditions = ViewingConditions(
            white_point=WhitePoint(x, y, z),
            adapting_luminance=request.custom.adapting_luminance,
            background_luminance=request.custom.background_luminance,
            surround=request.custom.surround,
            discounting_illuminant=request.custom.discounting_illuminant,
        )

    result = engine.appearance(request.color, conditions)
    return AppearanceResponse(
        lightness=result.lightness,
        chroma=result.chroma,
        hue=result.hue,
        brightness=result.brightness,
        colorfulness=result.colorfulness,
        saturation=result.saturation,
    )


@router.post("/simultaneous-contrast", response_model=SimultaneousContrastResponse,
             summary="Simultaneous contrast analysis and correction")
async def simultaneous_contrast(request: SimultaneousContrastRequest) -> SimultaneousContrastResponse:
    context = engine.analyze_contrast(request.target, request.background, request.surrounding)
    corrected = engine.apply_correction(request.target, context)
    return SimultaneousContrastResponse(
        adaptation_level=context.adaptation_level,
        hue_drift=context.hue_drift,
        saturation_boost=context.saturation_boost,
        lightness_shift=context.lightness_shift,
        corrected=corrected.hex,
    )


@router.post("/memory", response_model=MemoryResponse,
             summary="Temporal color memory")
async def color_memory(request: MemoryRequest) -> MemoryResponse:
    remembered = engine.recall(request.color, request.elapsed_seconds)
    return MemoryResponse(
        original=remembered.original_color.hex,
        perceived=remembered.perceived_color.hex,
        time_elapsed_seconds=remembered.time_elapsed_seconds,
        memory_strength=remembered.memory_strength,
        confidence_level=remembered.confidence_level,
    )


@router.post("/cultural-meaning", response_model=CulturalMeaningResponse,
             summary="Cultural color semantics")
async def cultural_meaning(request: CulturalMeaningRequest) -> CulturalMeaningResponse:
    meaning = engine.cultural_meaning(request.color, request.culture)
    return CulturalMeaningResponse(
        culture=meaning.culture,
        color=meaning.color.hex,
        color_name=meaning.color_name,
        meanings=list(meaning.meanings),
        emotional_weight=meaning.emotional_weight,
        contextual_usage=list(meaning.contextual_usage),
        taboos=list(meaning.taboos),
        celebrations=list(meaning.celebrations),
    )


@router.post("/material", response_model=MaterialResponse,
             summary="Color on a material under a light")
async def material(request: MaterialRequest) -> MaterialResponse:
    surface = request.material
    if request.properties is not None:
        surface = MaterialProperties(**request.properties.model_dump())
    lighting = request.lighting
    if request.custom_lighting is not None:
        lighting = LightingCondition(**request.custom_lighting.model_dump())

    simulated = engine.simulate_material(request.color, surface, lighting)
    return MaterialResponse(original=engine.to_hex(request.color), simulated=simulated.hex)


@router.post("/metamerism", response_model=MetamerismResponse,
             summary="Metamerism across lighting presets")
async def metamerism(request: MetamerismRequest) -> MetamerismResponse:
    names = request.lightings or list(LIGHTING_PRESETS)
    analysis = engine.analyze_metamerism(request.first, request.second, names)
    matching = set(analysis.match_under)
    return MetamerismResponse(
        first=analysis.first.hex,
        second=analysis.second.hex,
        match_under=[name for name in names if LIGHTING_PRESETS[name] in matching],
        differ_under=[name for name in names if LIGHTING_PRESETS[name] not in matching],
        delta_e=analysis.delta_e,
        is_metameric=analysis.is_metameric,
    )


@router.post("/suggestions", response_model=SuggestionsResponse,
             summary="Context-aware color suggestions")
async def color_suggestions(request: SuggestionsRequest) -> SuggestionsResponse:
    context = SuggestionContext(
        time_of_day=request.time_of_day,
        season=request.season,
        mood=request.mood,
        purpose=request.purpose,
    )
    ranked = engine.suggest(request.base, context, request.count)

    items: List[SuggestionItem] = [
        SuggestionItem(
            color=item.color.hex,
            confidence=item.confidence,
            reasoning=item.reasoning,
            category=item.category,
            metadata=item.metadata,
        )
        for item in ranked
    ]

    get_logger().debug("Suggestions generated", {"base": request.base, "count": len(items)})
    return SuggestionsResponse(base=engine.to_hex(request.base), suggestions=items)


@router.get("/cache/stats", summary="Engine cache statistics")
async def cache_stats():
    return engine.cache_stats()
