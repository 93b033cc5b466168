from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from ..schemas.registry import get_schema
from ..schemas.results import FieldError, ValidationResult
from .enums import PayloadSource


NOT_AN_OBJECT = "Payload must be a JSON object"


def error_path(loc: Iterable[Union[str, int]]) -> str:
    """Join a pydantic ``loc`` tuple into ``address.village`` / ``items.0.product``."""
    return ".".join(str(part) for part in loc)


def collect_errors(exc: ValidationError) -> List[FieldError]:
    return [
        FieldError(field=error_path(item["loc"]), message=item["msg"])
        for item in exc.errors(include_url=False)
    ]


def sanitize(instance: BaseModel) -> Dict[str, Any]:
    """JSON-ready payload: declared keys only, defaults filled, absent optionals omitted."""
    return instance.model_dump(mode="json", by_alias=True, exclude_none=True)


def validate_with(
    schema: Type[BaseModel],
    payload: Optional[Mapping[str, Any]],
    *,
    schema_name: str,
    source: PayloadSource = PayloadSource.BODY,
) -> ValidationResult:
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        return ValidationResult(
            schema_name=schema_name,
            source=source,
            errors=[FieldError(field="", message=NOT_AN_OBJECT)],
        )
    try:
        instance = schema.model_validate(dict(payload))
    except ValidationError as exc:
        return ValidationResult(
            schema_name=schema_name, source=source, errors=collect_errors(exc)
        )
    return ValidationResult(
        schema_name=schema_name, source=source, payload=sanitize(instance)
    )


def validate_payload(
    schema_name: str,
    payload: Optional[Mapping[str, Any]],
    source: PayloadSource = PayloadSource.BODY,
) -> ValidationResult:
    """
    Run a raw request part through the named schema.

    Every violation is reported in one pass. Unknown keys are dropped and
    defaults applied, so a valid result's payload validates again unchanged.

    Raises:
        UnknownSchemaError: if ``schema_name`` is not registered.
    """
    schema = get_schema(schema_name)
    return validate_with(schema, payload, schema_name=schema_name, source=source)
