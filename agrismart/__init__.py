"""
AgriSmart core: payload validation and rule-based farm recommendations.
"""

__version__ = "1.0.0"

from agrismart.application.services.recommendation_service import RecommendationEngine
from agrismart.domain.validation import validate_payload
from agrismart.schemas.registry import get_schema

__all__ = [
    "RecommendationEngine",
    "get_schema",
    "validate_payload",
]
