from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple, Type

from pydantic import BaseModel

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


class UnknownSchemaError(LookupError):
    """Raised when code asks for a schema name nobody registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown schema {name!r}; registered schemas: {', '.join(schema_names())}"
        )


SCHEMAS: Mapping[str, Type[BaseModel]] = MappingProxyType(
    {
        "register": RegisterPayload,
        "login": LoginPayload,
        "forgotPassword": ForgotPasswordPayload,
        "resetPassword": ResetPasswordPayload,
        "createProduct": CreateProductPayload,
        "updateProduct": UpdateProductPayload,
        "createOrder": CreateOrderPayload,
        "updateOrderStatus": UpdateOrderStatusPayload,
        "createDiseaseScan": CreateDiseaseScanPayload,
        "createSoilReport": CreateSoilReportPayload,
        "soilHealthAnalysis": SoilHealthPayload,
        "createScheme": CreateSchemePayload,
        "createNotification": CreateNotificationPayload,
        "paginationQuery": PaginationQuery,
        "productQuery": ProductQuery,
        "cropRecommendationQuery": CropRecommendationQuery,
        "objectIdParams": ObjectIdParams,
        "cropParams": CropParams,
    }
)


def schema_names() -> Tuple[str, ...]:
    return tuple(sorted(SCHEMAS))


def get_schema(name: str) -> Type[BaseModel]:
    try:
        return SCHEMAS[name]
    except KeyError:
        raise UnknownSchemaError(name) from None
