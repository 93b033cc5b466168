from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from contextvars import ContextVar
from typing import Any, Dict, Iterable, List, Optional


_TRACE_ID_CTX: ContextVar[str] = ContextVar("trace_id", default="unknown")
_LOGGER = logging.getLogger("agrismart.events")
_INITIALIZED = False


def init_logging(*, log_path: Optional[str] = None) -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    handlers = []
    if log_path:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
        )
    else:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
    )
    _LOGGER.setLevel(logging.INFO)
    _INITIALIZED = True


def set_trace_id(trace_id: str):
    return _TRACE_ID_CTX.set(trace_id)


def reset_trace_id(token) -> None:
    _TRACE_ID_CTX.reset(token)


def get_trace_id() -> str:
    value = _TRACE_ID_CTX.get()
    return value or "unknown"


# credential-bearing keys from auth payloads and predictor settings
SECRET_FIELDS = frozenset(
    {"password", "token", "api_key", "apiKey", "authorization", "Authorization"}
)
REDACTED = "***"


def redact(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of ``fields`` with secrets masked, nested dicts included."""
    clean: Dict[str, Any] = {}
    for key, value in fields.items():
        if key in SECRET_FIELDS:
            clean[key] = REDACTED
        elif isinstance(value, dict):
            clean[key] = redact(value)
        else:
            clean[key] = value
    return clean


def _build_payload(event: str, fields: Dict[str, Any]) -> str:
    payload = {"event": event, "trace_id": get_trace_id(), **redact(fields)}
    return json.dumps(payload, ensure_ascii=True, default=str)


def log_event(event: str, **fields: Any) -> None:
    _LOGGER.info(_build_payload(event, fields))


def log_error(event: str, **fields: Any) -> None:
    _LOGGER.error(_build_payload(event, fields))


def summarize_fields(fields: Iterable[str], limit: int = 10) -> List[str]:
    """First ``limit`` distinct field paths, for log lines about failed payloads."""
    seen: List[str] = []
    for field in fields:
        if field not in seen:
            seen.append(field)
        if len(seen) >= limit:
            break
    return seen


def log_validation_failure(
    schema_name: str, source: str, fields: Iterable[str]
) -> None:
    """One ``validation_failed`` line per rejected request part."""
    paths = list(fields)
    log_event(
        "validation_failed",
        schema=schema_name,
        source=source,
        error_count=len(paths),
        fields=summarize_fields(paths),
    )
