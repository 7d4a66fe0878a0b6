from __future__ import annotations

from pydantic import BaseModel

from haircare.domain.entities.classification import ClassificationResult


class HairAnalysisResultDTO(BaseModel):
    predicted_hair_type: str
    confidence: float
    confidence_percentage: str


class ClassificationResponseDTO(BaseModel):
    success: bool = False
    result: HairAnalysisResultDTO | None = None
    timestamp: str | None = None

    def to_classification(self) -> ClassificationResult | None:
        if not self.success or self.result is None:
            return None
        return ClassificationResult(
            hair_type=self.result.predicted_hair_type.strip(),
            confidence=float(self.result.confidence),
            confidence_percentage=self.result.confidence_percentage.strip(),
        )
