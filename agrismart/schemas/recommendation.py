from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..domain.enums import DiseaseStage, HealthBucket, Season, Severity
from ..domain.normalizers import AliasNormalizer


class RecordModel(BaseModel):
    """Engine records; serialized with camelCase keys for the HTTP layer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> Dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------- inputs


class WeatherObservation(RecordModel):
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    rainfall: Optional[float] = None


class SoilSample(RecordModel):
    """Raw soil reading; the engine clamps rather than rejects odd values."""

    ph: Optional[float] = Field(default=None, alias="pH")
    nitrogen: Optional[float] = None
    phosphorus: Optional[float] = None
    potassium: Optional[float] = None
    organic_matter: Optional[float] = None


class GrowingConditions(RecordModel):
    season: Optional[Season] = None
    region: Optional[str] = None
    soil_type: Optional[str] = None
    ph: Optional[float] = None
    nitrogen: Optional[float] = None
    weather: Optional[WeatherObservation] = None

    @field_validator("season", mode="before")
    @classmethod
    def _season_alias(cls, value: Any) -> Any:
        # "monsoon", "winter", "summer" and casing variants
        if isinstance(value, Season):
            return value
        return AliasNormalizer.normalize("season", value)


# ---------------------------------------------------------------- disease detection


class DiseasePrediction(RecordModel):
    """What a DiseasePredictor reports before the engine derives the rest."""

    disease: str
    confidence: float = Field(..., description="Raw score on a 0-100 scale.")
    affected_area: float = Field(default=0.0, description="Percent of canopy.")
    source: str = "simulated"


class Remedy(RecordModel):
    name: str
    dosage: str
    frequency: str
    cost: int
    safety_period: Optional[str] = None


class TreatmentPlan(RecordModel):
    organic: List[Remedy] = Field(default_factory=list)
    chemical: List[Remedy] = Field(default_factory=list)
    immediate: List[str] = Field(default_factory=list)
    preventive: List[str] = Field(default_factory=list)


class RecommendedAction(RecordModel):
    type: Literal["immediate", "curative", "preventive"]
    description: str
    priority: int
    timeline: str


class WeatherFactors(RecordModel):
    temperature: float
    humidity: float
    conditions: str


class DiseaseDetectionResult(RecordModel):
    disease: str
    confidence: int
    severity: Severity
    affected_area: int
    stage: DiseaseStage
    treatment_plan: TreatmentPlan
    recommended_actions: List[RecommendedAction] = Field(default_factory=list)
    symptoms: List[str] = Field(default_factory=list)
    weather_factors: WeatherFactors


# ---------------------------------------------------------------- soil health


class SoilIssue(RecordModel):
    issue: str
    solution: str


class SoilHealthReport(RecordModel):
    health_score: int
    classification: HealthBucket
    recommendations: List[SoilIssue] = Field(default_factory=list)


# ---------------------------------------------------------------- crops


class CropSuitability(RecordModel):
    crop: str
    score: int
    bucket: HealthBucket


class CropRecommendation(RecordModel):
    name: str
    suitability_score: int
    bucket: HealthBucket
    expected_yield: str
    market_demand: str
    profitability: str
    water_requirement: str
    growing_period: str
    best_practices: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)


class CropRecommendationSet(RecordModel):
    season: Season
    region: str
    recommendations: List[CropRecommendation] = Field(default_factory=list)
    factors: Dict[str, object] = Field(default_factory=dict)


class CropDetails(RecordModel):
    crop: str
    seasons: List[str]
    soil_types: List[str]
    ph_range: Dict[str, float]
    temperature: Dict[str, float]
    rainfall: Dict[str, float]
    water_requirement: str
    growing_period: str
    market_demand: str
    profitability: str
    best_months: List[str]
    fertilizer: Dict[str, str]
    irrigation: Dict[str, object]
    diseases: List[str]
    pests: List[str]
