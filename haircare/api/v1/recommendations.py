from fastapi import APIRouter, Depends

from haircare.api.v1.schemas import (
    OilSchema,
    RecommendationRequestSchema,
    RecommendationResponseSchema,
    TipSchema,
)
from haircare.application.use_cases.recommend_care import RecommendCareUseCase
from haircare.domain.entities.user_selections import UserSelections
from haircare.wiring.dependencies import get_recommend_care_use_case

router = APIRouter()


@router.post("/recommendations", response_model=RecommendationResponseSchema)
def recommend(
    req: RecommendationRequestSchema,
    uc: RecommendCareUseCase = Depends(get_recommend_care_use_case),
):
    selections = UserSelections.from_payload(req.dandruff_level, req.hair_loss_stage)
    plan = uc.execute(req.hair_type, selections)
    return RecommendationResponseSchema(
        oils=[OilSchema.from_entity(o) for o in plan.oils],
        tips=[TipSchema.from_entity(t) for t in plan.tips],
    )


@router.get("/oils", response_model=list[OilSchema])
def list_oils(uc: RecommendCareUseCase = Depends(get_recommend_care_use_case)):
    return [OilSchema.from_entity(o) for o in uc.list_oils()]
