from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, ValidationInfo, field_validator

from .common import ObjectId, PayloadModel, Text, check_reference
from .payloads import ProductQuality, SoilType


SortOrder = Literal["asc", "desc"]
SeasonName = Literal["Kharif", "Rabi", "Zaid"]


class PaginationQuery(PayloadModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    sort_by: Optional[Text] = None
    order: SortOrder = "desc"


class ProductQuery(PayloadModel):
    """Marketplace listing filters; every value arrives as a query string."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    category: Optional[Text] = None
    subcategory: Optional[Text] = None
    min_price: Optional[float] = Field(default=None, ge=0)
    max_price: Optional[float] = None
    organic: Optional[bool] = None
    seller: Optional[ObjectId] = None
    search: Optional[Text] = None
    sort_by: Literal["price", "createdAt", "rating", "name"] = "createdAt"
    order: SortOrder = "desc"
    quality: Optional[ProductQuality] = None
    state: Optional[Text] = None
    district: Optional[Text] = None

    @field_validator("max_price")
    @classmethod
    def _max_above_min(cls, value: Optional[float], info: ValidationInfo):
        return check_reference(
            value, info.data.get("min_price"), reference_label="minPrice", strict=True
        )


class CropRecommendationQuery(PayloadModel):
    season: Optional[SeasonName] = None
    region: Optional[Text] = None
    soil_type: Optional[SoilType] = None
    ph: Optional[float] = Field(default=None, ge=0, le=14)
    nitrogen: Optional[float] = Field(default=None, ge=0)
    temperature: Optional[float] = None
    humidity: Optional[float] = Field(default=None, ge=0, le=100)
    rainfall: Optional[float] = Field(default=None, ge=0)


class ObjectIdParams(PayloadModel):
    id: ObjectId


class CropParams(PayloadModel):
    crop: str = Field(..., min_length=1, max_length=50)
