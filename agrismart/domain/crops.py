from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..schemas.recommendation import (
    CropDetails,
    CropRecommendation,
    CropSuitability,
    GrowingConditions,
)
from .enums import Season
from .normalizers import AliasNormalizer, same_label
from .soil import classify_score
from .tables import (
    COMMON_DISEASES,
    COMMON_PESTS,
    CROP_PROFILES,
    IRRIGATION_FREQUENCY,
    PLANTING_MONTHS,
    SEASONAL_CALENDAR,
    YEAR_ROUND,
    CropProfile,
)


TIER_POINTS = {"High": 10, "Medium": 6}
TIER_FALLBACK = 3
LOW_NITROGEN = 280
ACIDIC_PH = 6.0
HUMID = 80
HEAVY_RAIN = 50


def current_season(month: Optional[int] = None) -> Season:
    """Indian cropping season for a calendar month (1-12)."""
    if month is None:
        month = date.today().month
    if 6 <= month <= 10:
        return Season.KHARIF
    if month >= 11 or month <= 3:
        return Season.RABI
    return Season.ZAID


def resolve_crop(name: Optional[str]) -> Optional[str]:
    canonical = AliasNormalizer.canonical("crop", name)
    if canonical is not None:
        return canonical
    if name is None:
        return None
    for known in CROP_PROFILES:
        if same_label(known, name):
            return known
    return None


def _season_points(profile: CropProfile, season: Season) -> int:
    if season.value in profile.seasons or YEAR_ROUND in profile.seasons:
        return 25
    return 0


def _soil_points(profile: CropProfile, soil_type: Optional[str]) -> int:
    if not soil_type:
        return 10
    if any(same_label(known, soil_type) for known in profile.soil_types):
        return 20
    return 0


def _ph_points(profile: CropProfile, ph: Optional[float]) -> int:
    if ph is None:
        return 10
    if profile.ph_min <= ph <= profile.ph_max:
        return 20
    if abs(ph - profile.ph_optimal) <= 1:
        return 10
    return 0


def _temperature_points(profile: CropProfile, temperature: Optional[float]) -> int:
    if temperature is None:
        return 8
    if profile.temp_min <= temperature <= profile.temp_max:
        return 15
    if abs(temperature - profile.temp_optimal) <= 5:
        return 8
    return 0


def score_profile(profile: CropProfile, conditions: GrowingConditions) -> int:
    season = conditions.season or current_season()
    weather = conditions.weather
    score = (
        _season_points(profile, season)
        + _soil_points(profile, conditions.soil_type)
        + _ph_points(profile, conditions.ph)
        + _temperature_points(profile, weather.temperature if weather else None)
        + TIER_POINTS.get(profile.market_demand, TIER_FALLBACK)
        + TIER_POINTS.get(profile.profitability, TIER_FALLBACK)
    )
    # weights sum to 100, so the raw score is already a percentage
    return max(0, min(100, round(score)))


def score_crop(crop: str, conditions: GrowingConditions) -> Optional[CropSuitability]:
    name = resolve_crop(crop)
    if name is None:
        return None
    score = score_profile(CROP_PROFILES[name], conditions)
    return CropSuitability(crop=name, score=score, bucket=classify_score(score))


def best_practices(crop: str, conditions: GrowingConditions) -> List[str]:
    practices = [
        f"Plant {crop} at recommended spacing",
        "Use certified seeds for better yield",
        "Apply organic manure before planting",
    ]
    if conditions.nitrogen is not None and conditions.nitrogen < LOW_NITROGEN:
        practices.append("Apply nitrogen fertilizer as per soil test")
    if conditions.ph is not None and conditions.ph < ACIDIC_PH:
        practices.append("Apply lime to correct soil acidity")
    return practices


def crop_risks(crop: str, conditions: GrowingConditions) -> List[str]:
    risks: List[str] = []
    weather = conditions.weather
    if weather and weather.humidity is not None and weather.humidity > HUMID:
        risks.append("High humidity may cause fungal diseases")
    if weather and weather.rainfall is not None and weather.rainfall > HEAVY_RAIN:
        risks.append("Heavy rainfall expected - ensure proper drainage")
    if crop == "Cotton":
        risks.append("Monitor for bollworm infestation")
    if crop == "Rice":
        risks.append("Watch for stem borer and leaf folder")
    return risks or ["Normal risk levels"]


def rank_crops(
    conditions: GrowingConditions, *, limit: int = 10, min_score: int = 30
) -> List[CropRecommendation]:
    ranked: List[CropRecommendation] = []
    for name, profile in CROP_PROFILES.items():
        score = score_profile(profile, conditions)
        if score <= min_score:
            continue
        ranked.append(
            CropRecommendation(
                name=name,
                suitability_score=score,
                bucket=classify_score(score),
                expected_yield=f"{round(score * 0.5 + 20)} quintals/hectare",
                market_demand=profile.market_demand,
                profitability=profile.profitability,
                water_requirement=profile.water_requirement,
                growing_period=profile.growing_period,
                best_practices=best_practices(name, conditions),
                risks=crop_risks(name, conditions),
            )
        )
    # stable sort keeps table order among ties
    ranked.sort(key=lambda item: item.suitability_score, reverse=True)
    return ranked[:limit]


def planting_months(seasons) -> List[str]:
    months: List[str] = []
    for season in seasons:
        months.extend(PLANTING_MONTHS.get(season, []))
    return months


def describe_crop(crop: str) -> Optional[CropDetails]:
    name = resolve_crop(crop)
    if name is None:
        return None
    profile = CROP_PROFILES[name]
    return CropDetails(
        crop=name,
        seasons=list(profile.seasons),
        soil_types=list(profile.soil_types),
        ph_range={"min": profile.ph_min, "max": profile.ph_max},
        temperature={
            "min": profile.temp_min,
            "max": profile.temp_max,
            "optimal": profile.temp_optimal,
        },
        rainfall={
            "min": profile.rain_min,
            "max": profile.rain_max,
            "optimal": profile.rain_optimal,
        },
        water_requirement=profile.water_requirement,
        growing_period=profile.growing_period,
        market_demand=profile.market_demand,
        profitability=profile.profitability,
        best_months=planting_months(profile.seasons),
        fertilizer={
            "basal": "NPK 10:26:26 - 100 kg/hectare",
            "topDressing": "Urea - 50 kg/hectare after 30 days",
        },
        irrigation={
            "frequency": IRRIGATION_FREQUENCY.get(
                profile.water_requirement, IRRIGATION_FREQUENCY["Low"]
            ),
            "criticalStages": ["Germination", "Flowering", "Grain filling"],
        },
        diseases=COMMON_DISEASES.get(name, ["Various fungal and bacterial diseases"]),
        pests=COMMON_PESTS.get(name, ["Various insect pests"]),
    )


def seasonal_calendar() -> dict:
    return {name: dict(entry) for name, entry in SEASONAL_CALENDAR.items()}
