from __future__ import annotations

from pydantic import BaseModel, Field

from haircare.domain.entities.recommendation import HairTip, OilRecommendation
from haircare.domain.entities.scan_result import ScanResult
from haircare.domain.entities.user_selections import DandruffLevel, HairLossStage


class RecommendationRequestSchema(BaseModel):
    hair_type: str
    dandruff_level: DandruffLevel = DandruffLevel.low
    hair_loss_stage: HairLossStage = HairLossStage.stage_1


class OilSchema(BaseModel):
    key: str
    name: str
    description: str
    price: str

    @staticmethod
    def from_entity(oil: OilRecommendation) -> "OilSchema":
        return OilSchema(key=oil.key, name=oil.name, description=oil.description, price=oil.price)


class TipSchema(BaseModel):
    title: str
    description: str

    @staticmethod
    def from_entity(tip: HairTip) -> "TipSchema":
        return TipSchema(title=tip.title, description=tip.description)


class RecommendationResponseSchema(BaseModel):
    oils: list[OilSchema]
    tips: list[TipSchema]


class ScanAnalysisResponseSchema(BaseModel):
    hair_type: str
    confidence: float
    confidence_percentage: str
    dandruff_level: str
    hair_loss_stage: str
    oils: list[OilSchema]
    tips: list[TipSchema]
    scan_id: str | None = None


class ScanResultSchema(BaseModel):
    scan_id: str
    user_id: str
    hair_type: str
    confidence: str
    dandruff_level: str
    hair_loss_stage: str
    recommended_oils: list[str] = Field(default_factory=list)
    timestamp: int
    formatted_date: str

    @staticmethod
    def from_entity(scan: ScanResult) -> "ScanResultSchema":
        return ScanResultSchema(
            scan_id=scan.scan_id,
            user_id=scan.user_id,
            hair_type=scan.hair_type,
            confidence=scan.confidence,
            dandruff_level=scan.dandruff_level,
            hair_loss_stage=scan.hair_loss_stage,
            recommended_oils=list(scan.recommended_oils),
            timestamp=scan.timestamp,
            formatted_date=scan.formatted_date(),
        )


class ScanCountSchema(BaseModel):
    count: int


class DeleteScanResponseSchema(BaseModel):
    deleted: bool
