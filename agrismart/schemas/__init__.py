from .payloads import (
    CreateDiseaseScanPayload,
    CreateNotificationPayload,
    CreateOrderPayload,
    CreateProductPayload,
    CreateSchemePayload,
    CreateSoilReportPayload,
    ForgotPasswordPayload,
    LoginPayload,
    RegisterPayload,
    ResetPasswordPayload,
    SoilHealthPayload,
    UpdateOrderStatusPayload,
    UpdateProductPayload,
)
from .queries import (
    CropParams,
    CropRecommendationQuery,
    ObjectIdParams,
    PaginationQuery,
    ProductQuery,
)
from .recommendation import (
    CropDetails,
    CropRecommendation,
    CropRecommendationSet,
    CropSuitability,
    DiseaseDetectionResult,
    DiseasePrediction,
    GrowingConditions,
    RecommendedAction,
    Remedy,
    SoilHealthReport,
    SoilIssue,
    SoilSample,
    TreatmentPlan,
    WeatherFactors,
    WeatherObservation,
)
from .registry import SCHEMAS, UnknownSchemaError, get_schema, schema_names
from .results import ApiResponse, ErrorResponse, FieldError, ValidationResult

__all__ = [
    "ApiResponse",
    "CreateDiseaseScanPayload",
    "CreateNotificationPayload",
    "CreateOrderPayload",
    "CreateProductPayload",
    "CreateSchemePayload",
    "CreateSoilReportPayload",
    "CropDetails",
    "CropParams",
    "CropRecommendation",
    "CropRecommendationQuery",
    "CropRecommendationSet",
    "CropSuitability",
    "DiseaseDetectionResult",
    "DiseasePrediction",
    "ErrorResponse",
    "FieldError",
    "ForgotPasswordPayload",
    "GrowingConditions",
    "LoginPayload",
    "ObjectIdParams",
    "PaginationQuery",
    "ProductQuery",
    "RecommendedAction",
    "RegisterPayload",
    "Remedy",
    "ResetPasswordPayload",
    "SCHEMAS",
    "SoilHealthPayload",
    "SoilHealthReport",
    "SoilIssue",
    "SoilSample",
    "TreatmentPlan",
    "UnknownSchemaError",
    "UpdateOrderStatusPayload",
    "UpdateProductPayload",
    "ValidationResult",
    "WeatherFactors",
    "WeatherObservation",
    "get_schema",
    "schema_names",
]
