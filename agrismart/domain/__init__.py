from __future__ import annotations

from typing import Any


_EXPORTS = {
    "validation": {
        "collect_errors",
        "error_path",
        "sanitize",
        "validate_payload",
        "validate_with",
    },
    "soil": {"classify_score", "score_soil"},
    "crops": {
        "current_season",
        "describe_crop",
        "rank_crops",
        "score_crop",
        "seasonal_calendar",
    },
    "disease": {
        "actions_for",
        "candidate_diseases",
        "severity_for",
        "stage_for",
        "symptoms_for",
        "treatment_for",
    },
}
_LOOKUP = {name: module for module, names in _EXPORTS.items() for name in names}

__all__ = sorted(_LOOKUP)


def __getattr__(name: str) -> Any:
    # lazy so that schemas can import domain.enums without a cycle
    module = _LOOKUP.get(name)
    if module is not None:
        from importlib import import_module

        return getattr(import_module(f"{__name__}.{module}"), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
