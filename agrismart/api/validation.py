from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from ..domain.enums import PayloadSource
from ..domain.validation import validate_with
from ..observability.logging_utils import log_validation_failure
from ..schemas.registry import get_schema
from ..schemas.results import ErrorResponse, FieldError, ValidationResult


MALFORMED_JSON = "Malformed JSON body"

PayloadDependency = Callable[[Request], Awaitable[Dict[str, Any]]]


class PayloadValidationError(Exception):
    """Carries a failed ValidationResult out of a dependency to the error handler."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(f"{result.schema_name}: {len(result.errors)} validation error(s)")


class _MalformedBody(Exception):
    pass


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {token}")


async def _read_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise _MalformedBody(str(exc)) from exc


async def _read_query(request: Request) -> Dict[str, str]:
    return dict(request.query_params)


async def _read_params(request: Request) -> Dict[str, str]:
    return dict(request.path_params)


_READERS = {
    PayloadSource.BODY: _read_body,
    PayloadSource.QUERY: _read_query,
    PayloadSource.PARAMS: _read_params,
}


def _reject(result: ValidationResult) -> None:
    log_validation_failure(
        result.schema_name,
        result.source.value,
        (error.field for error in result.errors),
    )
    raise PayloadValidationError(result)


def _payload_dependency(schema_name: str, source: PayloadSource) -> PayloadDependency:
    # resolved now so a typo breaks route wiring, not a live request
    schema = get_schema(schema_name)
    reader = _READERS[source]

    async def dependency(request: Request) -> Dict[str, Any]:
        try:
            raw = await reader(request)
        except _MalformedBody:
            _reject(
                ValidationResult(
                    schema_name=schema_name,
                    source=source,
                    errors=[FieldError(field="", message=MALFORMED_JSON)],
                )
            )
        result = validate_with(schema, raw, schema_name=schema_name, source=source)
        if not result.is_valid:
            _reject(result)
        setattr(request.state, source.value, result.payload)
        return result.payload

    dependency.__name__ = f"validate_{source.value}_{schema_name}"
    return dependency


def validate_body(schema_name: str) -> PayloadDependency:
    return _payload_dependency(schema_name, PayloadSource.BODY)


def validate_query(schema_name: str) -> PayloadDependency:
    return _payload_dependency(schema_name, PayloadSource.QUERY)


def validate_params(schema_name: str) -> PayloadDependency:
    return _payload_dependency(schema_name, PayloadSource.PARAMS)


async def payload_validation_handler(
    _: Request, exc: PayloadValidationError
) -> JSONResponse:
    body = ErrorResponse.from_result(exc.result)
    return JSONResponse(status_code=exc.result.status_code, content=body.model_dump(mode="json"))
