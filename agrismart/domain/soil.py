from __future__ import annotations

from typing import List, Optional

from ..schemas.recommendation import SoilHealthReport, SoilIssue, SoilSample
from .enums import HealthBucket


PH_RANGE = (6.0, 7.5)
NITROGEN_MIN = 250
PHOSPHORUS_MIN = 25
POTASSIUM_MIN = 200
ORGANIC_MATTER_MIN = 2

WEIGHTS = {
    "ph": 25,
    "nitrogen": 20,
    "phosphorus": 20,
    "potassium": 20,
    "organic_matter": 15,
}


def clamp(value: Optional[float], low: float, high: Optional[float] = None) -> Optional[float]:
    if value is None:
        return None
    value = max(low, float(value))
    if high is not None:
        value = min(high, value)
    return value


def classify_score(score: float) -> HealthBucket:
    if score > 75:
        return HealthBucket.EXCELLENT
    if score > 50:
        return HealthBucket.GOOD
    if score > 25:
        return HealthBucket.FAIR
    return HealthBucket.POOR


def clamp_sample(sample: SoilSample) -> SoilSample:
    return SoilSample(
        ph=clamp(sample.ph, 0, 14),
        nitrogen=clamp(sample.nitrogen, 0),
        phosphorus=clamp(sample.phosphorus, 0),
        potassium=clamp(sample.potassium, 0),
        organic_matter=clamp(sample.organic_matter, 0, 100),
    )


def _ph_solution(ph: Optional[float]) -> str:
    if ph is None:
        return "Get soil pH tested"
    if ph < PH_RANGE[0]:
        return "Add lime to increase pH"
    return "Add sulfur to decrease pH"


def score_soil(sample: SoilSample) -> SoilHealthReport:
    """
    Weighted-sum health score over pH, NPK and organic matter.

    Missing readings score nothing and produce an advisory entry; out-of-range
    readings are clamped first, so this never raises for numeric input.
    """
    sample = clamp_sample(sample)
    score = 0
    issues: List[SoilIssue] = []

    if sample.ph is not None and PH_RANGE[0] <= sample.ph <= PH_RANGE[1]:
        score += WEIGHTS["ph"]
    else:
        issues.append(SoilIssue(issue="pH imbalance", solution=_ph_solution(sample.ph)))

    if sample.nitrogen is not None and sample.nitrogen > NITROGEN_MIN:
        score += WEIGHTS["nitrogen"]
    else:
        issues.append(SoilIssue(issue="Low nitrogen", solution="Add urea or organic compost"))

    if sample.phosphorus is not None and sample.phosphorus > PHOSPHORUS_MIN:
        score += WEIGHTS["phosphorus"]
    else:
        issues.append(SoilIssue(issue="Low phosphorus", solution="Add DAP or rock phosphate"))

    if sample.potassium is not None and sample.potassium > POTASSIUM_MIN:
        score += WEIGHTS["potassium"]
    else:
        issues.append(SoilIssue(issue="Low potassium", solution="Add MOP or wood ash"))

    if sample.organic_matter is not None and sample.organic_matter > ORGANIC_MATTER_MIN:
        score += WEIGHTS["organic_matter"]
    else:
        issues.append(
            SoilIssue(issue="Low organic matter", solution="Add compost or green manure")
        )

    score = min(score, 100)
    return SoilHealthReport(
        health_score=score,
        classification=classify_score(score),
        recommendations=issues,
    )
