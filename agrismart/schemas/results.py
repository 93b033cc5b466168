from __future__ import annotations

import math
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..domain.enums import PayloadSource


FAILURE_MESSAGES = {
    PayloadSource.BODY: "Validation failed",
    PayloadSource.QUERY: "Invalid query parameters",
    PayloadSource.PARAMS: "Invalid parameters",
}
FAILURE_STATUS_CODES = {
    PayloadSource.BODY: 422,
    PayloadSource.QUERY: 400,
    PayloadSource.PARAMS: 400,
}


class FieldError(BaseModel):
    """One violation; ``field`` is the dotted path, empty for the whole payload."""

    field: str
    message: str


class ValidationResult(BaseModel):
    """Outcome of running one payload through one schema."""

    schema_name: str
    source: PayloadSource = PayloadSource.BODY
    payload: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def failure_message(self) -> str:
        return FAILURE_MESSAGES[self.source]

    @property
    def status_code(self) -> int:
        return FAILURE_STATUS_CODES[self.source]


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
    errors: List[FieldError] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ErrorResponse":
        return cls(message=result.failure_message, errors=list(result.errors))


class PageMeta(BaseModel):
    page: int
    limit: int
    total: int
    pages: int
    has_next: bool = Field(serialization_alias="hasNext")
    has_prev: bool = Field(serialization_alias="hasPrev")


class ApiResponse(BaseModel):
    """Success envelope shared by every handler."""

    status: Literal["success"] = "success"
    message: str = "Success"
    data: Any = None
    meta: Optional[PageMeta] = None

    @classmethod
    def success(cls, data: Any, message: str = "Success") -> "ApiResponse":
        return cls(data=data, message=message)

    @classmethod
    def created(cls, data: Any, message: str = "Created successfully") -> "ApiResponse":
        return cls(data=data, message=message)

    @classmethod
    def paginated(cls, data: Any, page: int, limit: int, total: int) -> "ApiResponse":
        meta = PageMeta(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if limit else 0,
            has_next=page * limit < total,
            has_prev=page > 1,
        )
        return cls(data=data, meta=meta)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
