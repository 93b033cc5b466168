from enum import Enum


class PayloadSource(str, Enum):
    """Request part a payload was read from."""

    BODY = "body"
    QUERY = "query"
    PARAMS = "params"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class DiseaseStage(str, Enum):
    EARLY = "Early"
    MID = "Mid"
    ADVANCED = "Advanced"


class HealthBucket(str, Enum):
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class Season(str, Enum):
    KHARIF = "Kharif"
    RABI = "Rabi"
    ZAID = "Zaid"
