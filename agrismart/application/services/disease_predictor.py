from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

from ...domain.disease import candidate_diseases
from ...schemas.recommendation import DiseasePrediction


class DiseasePredictor(ABC):
    """Seam between the engine and whatever produces a diagnosis."""

    name = "base"

    @abstractmethod
    def predict(
        self, crop_type: Optional[str], image_ref: Optional[str] = None
    ) -> DiseasePrediction:
        raise NotImplementedError


class SimulatedDiseasePredictor(DiseasePredictor):
    """
    Stand-in for a real image model.

    Picks a disease from the crop's table and draws a confidence in [70, 95)
    and an affected area in [20, 80]. The image is ignored; none of these
    numbers reflect detection accuracy.
    """

    name = "simulated"

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def predict(
        self, crop_type: Optional[str], image_ref: Optional[str] = None
    ) -> DiseasePrediction:
        diseases = candidate_diseases(crop_type)
        return DiseasePrediction(
            disease=self._rng.choice(diseases),
            confidence=70 + self._rng.random() * 25,
            affected_area=20 + self._rng.random() * 60,
            source=self.name,
        )
