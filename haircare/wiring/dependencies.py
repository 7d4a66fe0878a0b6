from functools import lru_cache
import logging

from haircare.application.ports.hair_classifier import HairClassifierPort
from haircare.application.ports.scan_history_store import ScanHistoryStorePort
from haircare.application.use_cases.analyze_hair import AnalyzeHairUseCase
from haircare.application.use_cases.recommend_care import RecommendCareUseCase
from haircare.application.use_cases.scan_history import ScanHistoryUseCase
from haircare.core.config import settings
from haircare.infrastructure.classifier.http_classifier import HttpHairClassifier
from haircare.infrastructure.classifier.mock_classifier import MockHairClassifier
from haircare.infrastructure.store.json_store import JsonScanHistoryStore
from haircare.infrastructure.store.memory_store import MemoryScanHistoryStore


_scan_store: ScanHistoryStorePort | None = None


@lru_cache
def get_classifier() -> HairClassifierPort:
    logger = logging.getLogger(__name__)
    if settings.CLASSIFIER_BASE_URL and settings.CLASSIFIER_BASE_URL.strip():
        logger.info("Using HttpHairClassifier at %s", settings.CLASSIFIER_BASE_URL)
        return HttpHairClassifier()
    if settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using MockHairClassifier (CLASSIFIER_BASE_URL missing, ENV=dev/local)")
        return MockHairClassifier(hair_type=settings.MOCK_HAIR_TYPE)
    raise ValueError("CLASSIFIER_BASE_URL is required outside dev/local.")


def get_scan_store() -> ScanHistoryStorePort:
    global _scan_store
    if _scan_store is None:
        if settings.SCAN_STORE_PROVIDER.lower() == "json":
            _scan_store = JsonScanHistoryStore(data_dir=settings.SCAN_STORE_DATA_DIR)
        else:
            _scan_store = MemoryScanHistoryStore()
    return _scan_store


def get_recommend_care_use_case() -> RecommendCareUseCase:
    return RecommendCareUseCase()


def get_scan_history_use_case() -> ScanHistoryUseCase:
    return ScanHistoryUseCase(store=get_scan_store())


def get_analyze_hair_use_case() -> AnalyzeHairUseCase:
    return AnalyzeHairUseCase(
        classifier=get_classifier(),
        recommend_care=get_recommend_care_use_case(),
        history=get_scan_history_use_case(),
        auto_save=settings.AUTO_SAVE_SCANS,
    )


def get_container() -> dict[str, object]:
    return {
        "analyze": get_analyze_hair_use_case(),
        "history": get_scan_history_use_case(),
    }
