import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from haircare.api.auth import get_current_user_id
from haircare.api.v1.schemas import (
    DeleteScanResponseSchema,
    OilSchema,
    ScanAnalysisResponseSchema,
    ScanCountSchema,
    ScanResultSchema,
    TipSchema,
)
from haircare.application.exceptions import ClassifierContractError, ClassifierUpstreamError
from haircare.application.use_cases.analyze_hair import AnalyzeHairUseCase
from haircare.application.use_cases.scan_history import ScanHistoryUseCase
from haircare.domain.entities.image_upload import ImageUpload
from haircare.domain.entities.user_selections import DandruffLevel, HairLossStage, UserSelections
from haircare.wiring.dependencies import get_analyze_hair_use_case, get_scan_history_use_case

router = APIRouter()
logger = logging.getLogger(__name__)

RETRY_MESSAGE = "Failed to process image. Please check your connection and try again."


@router.post("/scans", response_model=ScanAnalysisResponseSchema)
def create_scan(
    image: UploadFile = File(...),
    dandruff_level: DandruffLevel = Form(DandruffLevel.low),
    hair_loss_stage: HairLossStage = Form(HairLossStage.stage_1),
    user_id: str | None = Depends(get_current_user_id),
    uc: AnalyzeHairUseCase = Depends(get_analyze_hair_use_case),
):
    upload = ImageUpload.from_bytes(image.file.read(), filename=image.filename, content_type=image.content_type)
    selections = UserSelections.from_payload(dandruff_level, hair_loss_stage)
    try:
        analysis = uc.execute(upload, selections, user_id=user_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (ClassifierUpstreamError, ClassifierContractError) as e:
        logger.error("Hair classification failed", extra={"error": str(e), "user_id": user_id})
        raise HTTPException(status_code=502, detail=RETRY_MESSAGE)

    return ScanAnalysisResponseSchema(
        hair_type=analysis.classification.hair_type,
        confidence=analysis.classification.confidence,
        confidence_percentage=analysis.classification.confidence_percentage,
        dandruff_level=analysis.selections.dandruff_level,
        hair_loss_stage=analysis.selections.hair_loss_stage,
        oils=[OilSchema.from_entity(o) for o in analysis.oils],
        tips=[TipSchema.from_entity(t) for t in analysis.tips],
        scan_id=analysis.scan_id,
    )


@router.get("/scans", response_model=list[ScanResultSchema])
def list_scans(
    user_id: str | None = Depends(get_current_user_id),
    uc: ScanHistoryUseCase = Depends(get_scan_history_use_case),
):
    return [ScanResultSchema.from_entity(s) for s in uc.get_user_scan_history(user_id)]


@router.get("/scans/latest", response_model=ScanResultSchema)
def latest_scan(
    user_id: str | None = Depends(get_current_user_id),
    uc: ScanHistoryUseCase = Depends(get_scan_history_use_case),
):
    scan = uc.get_latest_scan_result(user_id)
    if scan is None:
        raise HTTPException(status_code=404, detail="No scans found")
    return ScanResultSchema.from_entity(scan)


@router.get("/scans/count", response_model=ScanCountSchema)
def count_scans(
    user_id: str | None = Depends(get_current_user_id),
    uc: ScanHistoryUseCase = Depends(get_scan_history_use_case),
):
    return ScanCountSchema(count=uc.get_user_scan_count(user_id))


@router.delete("/scans/{scan_id}", response_model=DeleteScanResponseSchema)
def delete_scan(
    scan_id: str,
    user_id: str | None = Depends(get_current_user_id),
    uc: ScanHistoryUseCase = Depends(get_scan_history_use_case),
):
    return DeleteScanResponseSchema(deleted=uc.delete_scan_result(user_id, scan_id))
