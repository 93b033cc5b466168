from __future__ import annotations

from typing import List, Optional, Tuple

from ..schemas.recommendation import RecommendedAction, TreatmentPlan
from .enums import DiseaseStage, Severity
from .normalizers import AliasNormalizer
from .tables import (
    CROP_DISEASES,
    DEFAULT_DISEASES,
    DEFAULT_SYMPTOMS,
    DEFAULT_TREATMENT,
    SYMPTOMS,
    TREATMENTS,
)


def candidate_diseases(crop_type: Optional[str]) -> Tuple[str, ...]:
    """Diseases a crop can be diagnosed with; unknown or missing crops get the default slice."""
    crop = AliasNormalizer.canonical("crop", crop_type)
    return CROP_DISEASES.get(crop, DEFAULT_DISEASES) if crop else DEFAULT_DISEASES


def severity_for(confidence: float) -> Severity:
    if confidence > 85:
        return Severity.CRITICAL
    if confidence > 75:
        return Severity.HIGH
    if confidence > 65:
        return Severity.MEDIUM
    return Severity.LOW


def stage_for(confidence: float) -> DiseaseStage:
    if confidence > 80:
        return DiseaseStage.ADVANCED
    if confidence > 60:
        return DiseaseStage.MID
    return DiseaseStage.EARLY


def treatment_for(disease: str) -> TreatmentPlan:
    raw = TREATMENTS.get(disease) or TREATMENTS[DEFAULT_TREATMENT]
    return TreatmentPlan.model_validate(raw)


def symptoms_for(disease: str) -> List[str]:
    return list(SYMPTOMS.get(disease, DEFAULT_SYMPTOMS))


def actions_for(plan: TreatmentPlan) -> List[RecommendedAction]:
    actions: List[RecommendedAction] = []
    if plan.immediate:
        actions.append(
            RecommendedAction(
                type="immediate",
                description=plan.immediate[0],
                priority=5,
                timeline="Within 24 hours",
            )
        )
    if plan.chemical:
        actions.append(
            RecommendedAction(
                type="curative",
                description=f"Apply {plan.chemical[0].name}",
                priority=4,
                timeline="Within 2-3 days",
            )
        )
    if plan.preventive:
        actions.append(
            RecommendedAction(
                type="preventive",
                description=plan.preventive[0],
                priority=3,
                timeline="Ongoing",
            )
        )
    return actions
