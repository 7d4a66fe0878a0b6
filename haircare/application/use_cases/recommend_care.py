from __future__ import annotations

import logging

from haircare.application.utils.care_rules import get_recommendations, get_tips
from haircare.domain.entities.oil_catalog import OIL_CATALOG
from haircare.domain.entities.recommendation import CarePlan, OilRecommendation
from haircare.domain.entities.user_selections import UserSelections


class RecommendCareUseCase:
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def execute(self, hair_type: str, selections: UserSelections) -> CarePlan:
        oils = get_recommendations(hair_type, selections.dandruff_level, selections.hair_loss_stage)
        tips = get_tips(hair_type, selections.dandruff_level, selections.hair_loss_stage)
        self._logger.debug(
            "Care plan derived",
            extra={"hair_type": hair_type, "reason": ",".join(o.key for o in oils)},
        )
        return CarePlan(oils=tuple(oils), tips=tuple(tips))

    def list_oils(self) -> list[OilRecommendation]:
        return list(OIL_CATALOG.values())
