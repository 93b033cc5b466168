from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AnyUrl, Field, ValidationInfo, field_validator, model_validator
from pydantic_core import PydanticCustomError

from .common import (
    Coordinates,
    Email,
    IndianMobile,
    ObjectId,
    OptionalPostalAddress,
    Percentage,
    PayloadModel,
    PostalAddress,
    RegionRef,
    StrongPassword,
    Text,
    check_reference,
)


ProductUnit = Literal["kg", "gram", "piece", "dozen", "quintal"]
ProductQuality = Literal["A", "B", "C"]
OrderStatus = Literal[
    "pending",
    "confirmed",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
    "refunded",
]
PaymentMethod = Literal["cod", "upi", "card", "netbanking", "wallet"]
SoilType = Literal[
    "alluvial",
    "black",
    "red",
    "laterite",
    "desert",
    "mountain",
    "clay",
    "sandy",
    "loamy",
    "peaty",
    "saline",
]
NotificationType = Literal[
    "Alert", "Reminder", "Update", "Warning", "Info", "Success", "Error"
]
NotificationCategory = Literal[
    "Weather", "Pest", "Disease", "Price", "Order", "Irrigation", "System", "Scheme"
]
NotificationPriority = Literal["Low", "Medium", "High", "Critical"]
DeliveryChannel = Literal["InApp", "Email", "SMS", "Push"]


# ---------------------------------------------------------------- auth


class RegisterPayload(PayloadModel):
    """New farmer/buyer account."""

    name: str = Field(..., min_length=3, max_length=50)
    email: Email
    password: StrongPassword
    role: Literal["Farmer", "Buyer"]
    contact: IndianMobile
    address: PostalAddress


class LoginPayload(PayloadModel):
    email: Email
    password: Text


class ForgotPasswordPayload(PayloadModel):
    email: Email


class ResetPasswordPayload(PayloadModel):
    token: Text
    password: StrongPassword


# ---------------------------------------------------------------- products


class BulkPricing(PayloadModel):
    enabled: bool = False
    price: Optional[float] = Field(default=None, gt=0)
    minimum_quantity: float = Field(default=100, ge=1)


class CreateProductPayload(PayloadModel):
    """Listing created by a farmer; order limits and shelf life are cross-checked."""

    name: str = Field(..., min_length=3, max_length=100)
    category: Text
    subcategory: Optional[Text] = None
    description: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    price: float = Field(..., gt=0)
    unit: ProductUnit
    quantity: float = Field(..., ge=0)
    minimum_order: float = Field(default=1, ge=1)
    maximum_order: Optional[float] = None
    quality: ProductQuality = "A"
    organic: bool = False
    harvest_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    location: Optional[RegionRef] = None
    tags: Optional[List[Text]] = None
    bulk_pricing: Optional[BulkPricing] = None

    @field_validator("maximum_order")
    @classmethod
    def _maximum_not_below_minimum(cls, value: Optional[float], info: ValidationInfo):
        return check_reference(
            value, info.data.get("minimum_order"), reference_label="minimumOrder"
        )

    @field_validator("expiry_date")
    @classmethod
    def _expiry_after_harvest(cls, value: Optional[datetime], info: ValidationInfo):
        return check_reference(
            value,
            info.data.get("harvest_date"),
            reference_label="harvestDate",
            strict=True,
        )


class UpdateProductPayload(PayloadModel):
    """Partial listing update; no defaults, at least one field."""

    name: Optional[str] = Field(default=None, min_length=3, max_length=100)
    category: Optional[Text] = None
    subcategory: Optional[Text] = None
    description: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    price: Optional[float] = Field(default=None, gt=0)
    quantity: Optional[float] = Field(default=None, ge=0)
    minimum_order: Optional[float] = Field(default=None, ge=1)
    maximum_order: Optional[float] = None
    quality: Optional[ProductQuality] = None
    organic: Optional[bool] = None
    harvest_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    location: Optional[RegionRef] = None
    tags: Optional[List[Text]] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "UpdateProductPayload":
        provided = [
            name for name in self.model_fields_set if getattr(self, name) is not None
        ]
        if not provided:
            raise PydanticCustomError(
                "object_min_fields", "At least one field must be provided"
            )
        return self


# ---------------------------------------------------------------- orders


class OrderItem(PayloadModel):
    product: ObjectId
    quantity: float = Field(..., ge=1)


class ShippingAddress(PostalAddress):
    phone: IndianMobile


class CreateOrderPayload(PayloadModel):
    items: List[OrderItem] = Field(..., min_length=1)
    order_type: Literal["B2C", "B2B"] = "B2C"
    shipping_address: ShippingAddress
    billing_address: Optional[OptionalPostalAddress] = None
    payment_method: PaymentMethod = "cod"
    notes: Optional[str] = Field(default=None, min_length=1, max_length=500)


class UpdateOrderStatusPayload(PayloadModel):
    order_status: OrderStatus
    tracking_number: Optional[Text] = None
    courier_partner: Optional[Text] = None
    expected_delivery_date: Optional[datetime] = None
    cancellation_reason: Optional[Text] = Field(default=None, validate_default=True)

    @field_validator("cancellation_reason")
    @classmethod
    def _reason_when_cancelled(cls, value: Optional[str], info: ValidationInfo):
        if value is None and info.data.get("order_status") == "cancelled":
            raise PydanticCustomError(
                "required_when", "Field required when orderStatus is 'cancelled'"
            )
        return value


# ---------------------------------------------------------------- disease scans


class ScanLocation(RegionRef):
    coordinates: Optional[Coordinates] = None


class CreateDiseaseScanPayload(PayloadModel):
    crop: Text
    image_url: Optional[Text] = None
    location: Optional[ScanLocation] = None


# ---------------------------------------------------------------- soil


class Micronutrients(PayloadModel):
    zinc: Optional[float] = None
    iron: Optional[float] = None
    manganese: Optional[float] = None
    copper: Optional[float] = None
    boron: Optional[float] = None


class SoilParameters(PayloadModel):
    ph: Optional[float] = Field(default=None, ge=0, le=14, alias="pH")
    nitrogen: Optional[float] = Field(default=None, ge=0)
    phosphorus: Optional[float] = Field(default=None, ge=0)
    potassium: Optional[float] = Field(default=None, ge=0)
    organic_matter: Optional[Percentage] = None
    ec: Optional[float] = Field(default=None, ge=0)
    cec: Optional[float] = Field(default=None, ge=0)
    moisture: Optional[Percentage] = None
    temperature: Optional[float] = None
    micronutrients: Optional[Micronutrients] = None


class FieldAddress(PayloadModel):
    village: Optional[Text] = None
    district: Optional[Text] = None
    state: Optional[Text] = None


class FieldLocation(PayloadModel):
    name: Optional[Text] = None
    area: Optional[float] = Field(default=None, ge=0)
    area_unit: Literal["acre", "hectare", "bigha"] = "acre"
    coordinates: Optional[Coordinates] = None
    address: Optional[FieldAddress] = None


class SoilTexture(PayloadModel):
    sand: Optional[Percentage] = None
    silt: Optional[Percentage] = None
    clay: Optional[Percentage] = None


class CreateSoilReportPayload(PayloadModel):
    field_location: Optional[FieldLocation] = None
    soil_parameters: SoilParameters
    soil_type: SoilType
    texture: Optional[SoilTexture] = None


class SoilHealthPayload(PayloadModel):
    """Minimal reading needed for a health score."""

    ph: float = Field(..., ge=0, le=14, alias="pH")
    nitrogen: float = Field(..., ge=0)
    phosphorus: float = Field(..., ge=0)
    potassium: float = Field(..., ge=0)
    organic_matter: Percentage


# ---------------------------------------------------------------- schemes


class LandSize(PayloadModel):
    min: Optional[float] = Field(default=None, ge=0)
    max: Optional[float] = None
    unit: Optional[Text] = None

    @field_validator("max")
    @classmethod
    def _max_not_below_min(cls, value: Optional[float], info: ValidationInfo):
        return check_reference(value, info.data.get("min"), reference_label="min")


class SchemeEligibility(PayloadModel):
    farmer_type: Optional[List[Text]] = None
    land_size: Optional[LandSize] = None
    crops: Optional[List[Text]] = None
    states: Optional[List[Text]] = None


class CreateSchemePayload(PayloadModel):
    """Government scheme listing shown on the schemes page."""

    scheme_name: Text
    scheme_code: Optional[Text] = None
    category: Text
    department: Optional[Text] = None
    description: Text
    benefits: Optional[List[Text]] = None
    eligibility: Optional[SchemeEligibility] = None
    application_url: Optional[AnyUrl] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_active: bool = True
    featured: bool = False

    @field_validator("end_date")
    @classmethod
    def _ends_after_start(cls, value: Optional[datetime], info: ValidationInfo):
        return check_reference(
            value, info.data.get("start_date"), reference_label="startDate", strict=True
        )


# ---------------------------------------------------------------- notifications


class CreateNotificationPayload(PayloadModel):
    type: NotificationType = "Info"
    category: NotificationCategory
    title: Text
    message: Text
    priority: NotificationPriority = "Medium"
    action_url: Optional[AnyUrl] = None
    expires_at: Optional[datetime] = None
    delivery_channels: List[DeliveryChannel] = Field(
        default_factory=lambda: ["InApp"]
    )
