from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")
EMAIL_RE = re.compile(r"^[^@\s]+@[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9-]+)+$")
INDIAN_MOBILE_RE = re.compile(r"^[6-9]\d{9}$")
PIN_CODE_RE = re.compile(r"^\d{6}$")
# pydantic's rust regex engine has no lookahead support, so this one runs through `re`.
STRONG_PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


class PayloadModel(BaseModel):
    """Base for every inbound payload: camelCase keys in, unknown keys dropped.

    Only the wire names bind; a snake_case spelling of a declared field is an
    unknown key like any other.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        allow_inf_nan=False,
    )


def _matches(pattern: re.Pattern, error_type: str, message: str):
    def _check(value: str) -> str:
        if not pattern.search(value):
            raise PydanticCustomError(error_type, message)
        return value

    return AfterValidator(_check)


Text = Annotated[str, Field(min_length=1)]
ObjectId = Annotated[
    str,
    _matches(OBJECT_ID_RE, "object_id", "Input should be a 24-character hex id"),
]
Email = Annotated[
    str,
    _matches(EMAIL_RE, "email", "Input should be a valid email address"),
]
IndianMobile = Annotated[
    str,
    _matches(
        INDIAN_MOBILE_RE,
        "indian_mobile",
        "Please provide a valid 10-digit Indian mobile number",
    ),
]
PinCode = Annotated[
    str,
    _matches(PIN_CODE_RE, "pin_code", "Please provide a valid 6-digit PIN code"),
]
StrongPassword = Annotated[
    str,
    Field(min_length=8),
    _matches(
        STRONG_PASSWORD_RE,
        "password_strength",
        "Password must contain at least one uppercase letter, "
        "one lowercase letter, and one number",
    ),
]
Latitude = Annotated[float, Field(ge=-90, le=90)]
Longitude = Annotated[float, Field(ge=-180, le=180)]
Percentage = Annotated[float, Field(ge=0, le=100)]


def _comparable(value: Any, reference: Any) -> tuple[Any, Any]:
    # naive and aware datetimes cannot be ordered; read naive ones as UTC
    if isinstance(value, datetime) and isinstance(reference, datetime):
        if (value.tzinfo is None) != (reference.tzinfo is None):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            else:
                reference = reference.replace(tzinfo=timezone.utc)
    return value, reference


def check_reference(
    value: Any,
    reference: Any,
    *,
    reference_label: str,
    strict: bool = False,
) -> Any:
    """
    Enforce ``value >= reference`` (or ``>`` when strict) for cross-field rules.

    The rule is skipped when either side is absent, which also covers a
    reference that failed its own validation and never reached ``info.data``.
    """
    if value is None or reference is None:
        return value
    left, right = _comparable(value, reference)
    if left < right or (strict and left == right):
        relation = "greater than" if strict else "greater than or equal to"
        raise PydanticCustomError(
            "reference",
            "Input should be {relation} {reference}",
            {"relation": relation, "reference": reference_label},
        )
    return value


class Coordinates(PayloadModel):
    lat: Optional[Latitude] = None
    lng: Optional[Longitude] = None


class RegionRef(PayloadModel):
    """State/district/village triple used by product and scan locations."""

    state: Optional[Text] = None
    district: Optional[Text] = None
    village: Optional[Text] = None


class PostalAddress(PayloadModel):
    street: Optional[str] = None
    village: Text
    district: Text
    state: Text
    zipcode: Optional[PinCode] = None


class OptionalPostalAddress(PayloadModel):
    street: Optional[Text] = None
    village: Optional[Text] = None
    district: Optional[Text] = None
    state: Optional[Text] = None
    zipcode: Optional[PinCode] = None
