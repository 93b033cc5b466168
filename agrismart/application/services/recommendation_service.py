from __future__ import annotations

import random
from typing import List, Optional

from ...domain.crops import (
    current_season,
    describe_crop,
    rank_crops,
    score_crop,
    seasonal_calendar,
)
from ...domain.disease import (
    actions_for,
    severity_for,
    stage_for,
    symptoms_for,
    treatment_for,
)
from ...domain.soil import clamp, score_soil
from ...observability.logging_utils import log_event
from ...schemas.recommendation import (
    CropDetails,
    CropRecommendation,
    CropRecommendationSet,
    CropSuitability,
    DiseaseDetectionResult,
    GrowingConditions,
    SoilHealthReport,
    SoilSample,
    WeatherFactors,
    WeatherObservation,
)
from .disease_predictor import DiseasePredictor, SimulatedDiseasePredictor


FAVORABLE_CONDITIONS = "Favorable for disease spread"


class RecommendationEngine:
    """
    Advisory outputs for the farmer-facing pages.

    Build one per application and hand it to request handlers. Every method
    answers for any numeric input: odd readings are clamped and a missing crop
    falls back to default tables.
    """

    def __init__(
        self,
        predictor: Optional[DiseasePredictor] = None,
        *,
        rng: Optional[random.Random] = None,
        crop_limit: int = 10,
        min_suitability: int = 30,
    ):
        self._rng = rng or random.Random()
        self.predictor = predictor or SimulatedDiseasePredictor(self._rng)
        self.crop_limit = crop_limit
        self.min_suitability = min_suitability

    # -------------------------------------------------------------- disease

    def _weather_factors(self, weather: Optional[WeatherObservation]) -> WeatherFactors:
        temperature = weather.temperature if weather else None
        humidity = weather.humidity if weather else None
        if temperature is None:
            temperature = 25 + self._rng.random() * 10
        if humidity is None:
            humidity = 60 + self._rng.random() * 30
        return WeatherFactors(
            temperature=round(temperature, 1),
            humidity=round(clamp(humidity, 0, 100), 1),
            conditions=FAVORABLE_CONDITIONS,
        )

    def detect_disease(
        self,
        crop_type: Optional[str],
        image_ref: Optional[str] = None,
        weather: Optional[WeatherObservation] = None,
    ) -> DiseaseDetectionResult:
        prediction = self.predictor.predict(crop_type, image_ref)
        confidence = clamp(prediction.confidence, 0, 100)
        plan = treatment_for(prediction.disease)
        result = DiseaseDetectionResult(
            disease=prediction.disease,
            confidence=round(confidence),
            severity=severity_for(confidence),
            affected_area=round(clamp(prediction.affected_area, 0, 100)),
            stage=stage_for(confidence),
            treatment_plan=plan,
            recommended_actions=actions_for(plan),
            symptoms=symptoms_for(prediction.disease),
            weather_factors=self._weather_factors(weather),
        )
        log_event(
            "disease_detected",
            crop_type=crop_type,
            disease=result.disease,
            confidence=result.confidence,
            severity=result.severity.value,
            predictor=prediction.source,
        )
        return result

    # -------------------------------------------------------------- soil

    def analyze_soil_health(self, sample: SoilSample) -> SoilHealthReport:
        report = score_soil(sample)
        log_event(
            "soil_health_analyzed",
            health_score=report.health_score,
            classification=report.classification.value,
            issues=len(report.recommendations),
        )
        return report

    # -------------------------------------------------------------- crops

    def score_crop(self, crop: str, conditions: GrowingConditions) -> Optional[CropSuitability]:
        return score_crop(crop, conditions)

    def recommend_crops(
        self,
        conditions: GrowingConditions,
        *,
        limit: Optional[int] = None,
        min_score: Optional[int] = None,
    ) -> List[CropRecommendation]:
        return rank_crops(
            conditions,
            limit=limit if limit is not None else self.crop_limit,
            min_score=min_score if min_score is not None else self.min_suitability,
        )

    def crop_recommendation_set(self, conditions: GrowingConditions) -> CropRecommendationSet:
        season = conditions.season or current_season()
        conditions = conditions.model_copy(update={"season": season})
        recommendations = self.recommend_crops(conditions)
        weather = conditions.weather
        log_event(
            "crop_recommendations_built",
            season=season.value,
            region=conditions.region,
            count=len(recommendations),
        )
        return CropRecommendationSet(
            season=season,
            region=conditions.region or "Default",
            recommendations=recommendations,
            factors={
                "soilType": conditions.soil_type or "Not available",
                "soilPH": conditions.ph if conditions.ph is not None else "Not available",
                "currentTemperature": (
                    weather.temperature
                    if weather and weather.temperature is not None
                    else "Not available"
                ),
            },
        )

    def crop_details(self, crop: str) -> Optional[CropDetails]:
        return describe_crop(crop)

    def seasonal_calendar(self) -> dict:
        return {"currentSeason": current_season().value, "calendar": seasonal_calendar()}
