from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..application.services.recommendation_service import RecommendationEngine
from ..schemas.recommendation import GrowingConditions, SoilSample, WeatherObservation
from ..schemas.results import ApiResponse, ErrorResponse
from .validation import validate_body, validate_params, validate_query


Payload = Dict[str, Any]

router = APIRouter(prefix="/api/v1")


def get_engine(request: Request) -> RecommendationEngine:
    return request.app.state.engine


# ---------------------------------------------------------------- auth


def _public_account(payload: Payload) -> Payload:
    return {key: value for key, value in payload.items() if key != "password"}


@router.post("/auth/register", status_code=201)
async def register(body: Payload = Depends(validate_body("register"))):
    return ApiResponse.created(_public_account(body), "Registration accepted").to_json()


@router.post("/auth/login")
async def login(body: Payload = Depends(validate_body("login"))):
    return ApiResponse.success({"email": body["email"]}, "Credentials accepted").to_json()


@router.post("/auth/forgot-password")
async def forgot_password(body: Payload = Depends(validate_body("forgotPassword"))):
    return ApiResponse.success(
        {"email": body["email"]}, "Password reset instructions queued"
    ).to_json()


@router.post("/auth/reset-password")
async def reset_password(_: Payload = Depends(validate_body("resetPassword"))):
    return ApiResponse.success(None, "Password reset accepted").to_json()


# ---------------------------------------------------------------- products


@router.get("/products")
async def list_products(query: Payload = Depends(validate_query("productQuery"))):
    filters = {k: v for k, v in query.items() if k not in {"page", "limit"}}
    return ApiResponse.paginated(
        {"filters": filters, "items": []}, query["page"], query["limit"], 0
    ).to_json()


@router.post("/products", status_code=201)
async def create_product(body: Payload = Depends(validate_body("createProduct"))):
    return ApiResponse.created(body, "Product listed").to_json()


@router.patch("/products/{id}")
async def update_product(
    params: Payload = Depends(validate_params("objectIdParams")),
    body: Payload = Depends(validate_body("updateProduct")),
):
    return ApiResponse.success({"id": params["id"], **body}, "Product updated").to_json()


# ---------------------------------------------------------------- orders


@router.post("/orders", status_code=201)
async def create_order(body: Payload = Depends(validate_body("createOrder"))):
    return ApiResponse.created(body, "Order placed").to_json()


@router.patch("/orders/{id}/status")
async def update_order_status(
    params: Payload = Depends(validate_params("objectIdParams")),
    body: Payload = Depends(validate_body("updateOrderStatus")),
):
    return ApiResponse.success(
        {"id": params["id"], **body}, "Order status updated"
    ).to_json()


# ---------------------------------------------------------------- soil


@router.post("/soil/reports", status_code=201)
async def create_soil_report(
    body: Payload = Depends(validate_body("createSoilReport")),
    engine: RecommendationEngine = Depends(get_engine),
):
    sample = SoilSample.model_validate(body["soilParameters"])
    report = engine.analyze_soil_health(sample)
    return ApiResponse.created(
        {**body, "analysis": report.to_json()}, "Soil report recorded"
    ).to_json()


@router.post("/soil/health")
async def soil_health(
    body: Payload = Depends(validate_body("soilHealthAnalysis")),
    engine: RecommendationEngine = Depends(get_engine),
):
    report = engine.analyze_soil_health(SoilSample.model_validate(body))
    return ApiResponse.success(report.to_json(), "Soil health analyzed").to_json()


# ---------------------------------------------------------------- disease


# sync so the threadpool absorbs a blocking remote predictor
@router.post("/disease/detect", status_code=201)
def detect_disease(
    body: Payload = Depends(validate_body("createDiseaseScan")),
    engine: RecommendationEngine = Depends(get_engine),
):
    result = engine.detect_disease(body["crop"], body.get("imageUrl"))
    return ApiResponse.created(result.to_json(), "Disease analysis completed").to_json()


# ---------------------------------------------------------------- crops


@router.get("/crops/recommendations")
async def crop_recommendations(
    query: Payload = Depends(validate_query("cropRecommendationQuery")),
    engine: RecommendationEngine = Depends(get_engine),
):
    weather = WeatherObservation(
        temperature=query.get("temperature"),
        humidity=query.get("humidity"),
        rainfall=query.get("rainfall"),
    )
    conditions = GrowingConditions(
        season=query.get("season"),
        region=query.get("region"),
        soil_type=query.get("soilType"),
        ph=query.get("ph"),
        nitrogen=query.get("nitrogen"),
        weather=weather,
    )
    result = engine.crop_recommendation_set(conditions)
    return ApiResponse.success(result.to_json()).to_json()


@router.get("/crops/calendar")
async def crop_calendar(engine: RecommendationEngine = Depends(get_engine)):
    return ApiResponse.success(engine.seasonal_calendar()).to_json()


@router.get("/crops/{crop}")
async def crop_details(
    params: Payload = Depends(validate_params("cropParams")),
    engine: RecommendationEngine = Depends(get_engine),
):
    details = engine.crop_details(params["crop"])
    if details is None:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(message="Crop information not found").model_dump(
                mode="json"
            ),
        )
    return ApiResponse.success(details.to_json()).to_json()


# ---------------------------------------------------------------- info


@router.post("/schemes", status_code=201)
async def create_scheme(body: Payload = Depends(validate_body("createScheme"))):
    return ApiResponse.created(body, "Scheme published").to_json()


@router.post("/notifications", status_code=201)
async def create_notification(
    body: Payload = Depends(validate_body("createNotification")),
):
    return ApiResponse.created(body, "Notification queued").to_json()
