from __future__ import annotations

import logging
from dataclasses import dataclass

from haircare.application.ports.hair_classifier import HairClassifierPort
from haircare.application.use_cases.recommend_care import RecommendCareUseCase
from haircare.application.use_cases.scan_history import ScanHistoryUseCase
from haircare.domain.entities.classification import ClassificationResult
from haircare.domain.entities.image_upload import ImageUpload
from haircare.domain.entities.recommendation import HairTip, OilRecommendation
from haircare.domain.entities.user_selections import UserSelections


@dataclass(frozen=True)
class ScanAnalysis:
    classification: ClassificationResult
    selections: UserSelections
    oils: tuple[OilRecommendation, ...]
    tips: tuple[HairTip, ...]
    scan_id: str | None = None


@dataclass
class AnalyzeHairUseCase:
    classifier: HairClassifierPort
    recommend_care: RecommendCareUseCase
    history: ScanHistoryUseCase
    auto_save: bool = True

    def execute(
        self,
        image: ImageUpload,
        selections: UserSelections | None = None,
        user_id: str | None = None,
    ) -> ScanAnalysis:
        if image.is_empty:
            raise ValueError("Image is empty.")

        selections = selections or UserSelections()
        classification = self.classifier.classify(image)
        plan = self.recommend_care.execute(classification.hair_type, selections)

        scan_id: str | None = None
        if self.auto_save and user_id:
            saved = self.history.save_scan_result(
                user_id=user_id,
                hair_type=classification.hair_type,
                confidence=classification.confidence_percentage,
                dandruff_level=selections.dandruff_level,
                hair_loss_stage=selections.hair_loss_stage,
                recommended_oils=[oil.name for oil in plan.oils],
            )
            scan_id = saved.scan_id if saved else None

        logging.getLogger(__name__).info(
            "Hair scan analyzed",
            extra={
                "hair_type": classification.hair_type,
                "confidence": classification.confidence_percentage,
                "scan_id": scan_id,
            },
        )
        return ScanAnalysis(
            classification=classification,
            selections=selections,
            oils=plan.oils,
            tips=plan.tips,
            scan_id=scan_id,
        )
