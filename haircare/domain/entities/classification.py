from dataclasses import dataclass


@dataclass(frozen=True)
class ClassificationResult:
    hair_type: str
    confidence: float
    confidence_percentage: str
