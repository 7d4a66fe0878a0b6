from __future__ import annotations

import logging

from haircare.application.ports.hair_classifier import HairClassifierPort
from haircare.domain.entities.classification import ClassificationResult
from haircare.domain.entities.image_upload import ImageUpload


class MockHairClassifier(HairClassifierPort):
    def __init__(self, hair_type: str = "wavy", confidence: float = 0.87) -> None:
        self._hair_type = hair_type
        self._confidence = confidence
        self._logger = logging.getLogger(__name__)

    def classify(self, image: ImageUpload) -> ClassificationResult:
        self._logger.info(
            "Mock classification", extra={"hair_type": self._hair_type, "image_name": image.filename}
        )
        return ClassificationResult(
            hair_type=self._hair_type,
            confidence=self._confidence,
            confidence_percentage=f"{self._confidence * 100:.2f}%",
        )
