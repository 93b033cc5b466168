from __future__ import annotations

import random
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from ..application.services.disease_predictor import (
    DiseasePredictor,
    SimulatedDiseasePredictor,
)
from ..observability.logging_utils import log_event
from ..schemas.recommendation import DiseasePrediction
from .config import AppConfig


DEFAULT_TIMEOUT = 10.0
LOCAL_PROVIDERS = {"simulated", "mock", "local"}
REMOTE_PROVIDERS = {"remote", "intranet"}


def normalize_provider(value: Optional[str]) -> str:
    return (value or "simulated").lower()


def build_headers(api_key: Optional[str]) -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


class RemoteDiseasePredictor(DiseasePredictor):
    """
    Calls an HTTP inference service and falls back locally when it misbehaves.

    The service receives ``{"cropType", "imageRef"}`` and must answer with at
    least ``{"disease", "confidence"}``; ``affectedArea`` is optional.
    """

    name = "remote"

    def __init__(
        self,
        api_url: str,
        *,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        fallback: Optional[DiseasePredictor] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.fallback = fallback or SimulatedDiseasePredictor()
        self._client = client

    def _post(self, body: Dict[str, object]) -> object:
        if self._client is not None:
            response = self._client.post(
                self.api_url, json=body, headers=build_headers(self.api_key)
            )
            response.raise_for_status()
            return response.json()
        with httpx.Client(timeout=self.timeout, trust_env=False) as client:
            response = client.post(
                self.api_url, json=body, headers=build_headers(self.api_key)
            )
            response.raise_for_status()
            return response.json()

    def predict(
        self, crop_type: Optional[str], image_ref: Optional[str] = None
    ) -> DiseasePrediction:
        body = {"cropType": crop_type, "imageRef": image_ref}
        try:
            payload = self._post(body)
            if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
                payload = payload["data"]
            prediction = DiseasePrediction.model_validate(payload)
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            log_event(
                "disease_predictor_fallback",
                url=self.api_url,
                crop_type=crop_type,
                error=str(exc),
            )
            return self.fallback.predict(crop_type, image_ref)
        return prediction.model_copy(update={"source": self.name})


def build_disease_predictor(
    cfg: AppConfig, *, rng: Optional[random.Random] = None
) -> DiseasePredictor:
    """
    Map the configured provider to a predictor.

    Raises:
        ValueError: for an unknown provider, or a remote one without a URL.
    """
    provider = normalize_provider(cfg.disease_predictor)
    simulated = SimulatedDiseasePredictor(rng)
    if provider in LOCAL_PROVIDERS:
        return simulated
    if provider in REMOTE_PROVIDERS:
        if not cfg.disease_predictor_url:
            raise ValueError(
                "DISEASE_PREDICTOR_URL must be set when DISEASE_PREDICTOR=remote"
            )
        return RemoteDiseasePredictor(
            cfg.disease_predictor_url,
            api_key=cfg.disease_predictor_api_key,
            timeout=cfg.disease_predictor_timeout,
            fallback=simulated,
        )
    raise ValueError(f"unsupported disease predictor: {provider}")
