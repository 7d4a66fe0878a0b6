from __future__ import annotations

import logging

from haircare.application.ports.scan_history_store import ScanHistoryStorePort
from haircare.domain.entities.scan_result import ScanResult


class ScanHistoryUseCase:
    """
    Per-user scan history.

    Every operation needs an authenticated user id; without one it logs and
    returns the empty value (None, [], False or 0) instead of raising. Store
    failures are logged and degrade the same way.
    """

    def __init__(self, store: ScanHistoryStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def _require_user(self, user_id: str | None) -> bool:
        if not user_id or not user_id.strip():
            self._logger.error("No authenticated user found")
            return False
        return True

    def save_scan_result(
        self,
        user_id: str | None,
        hair_type: str,
        confidence: str,
        dandruff_level: str,
        hair_loss_stage: str,
        recommended_oils: list[str],
    ) -> ScanResult | None:
        if not self._require_user(user_id):
            return None
        scan = ScanResult(
            user_id=user_id,
            hair_type=hair_type,
            confidence=confidence,
            dandruff_level=dandruff_level,
            hair_loss_stage=hair_loss_stage,
            recommended_oils=tuple(recommended_oils),
        )
        try:
            self._store.save(scan)
        except Exception as e:
            self._logger.error("Error saving scan result", extra={"user_id": user_id, "error": str(e)})
            return None
        self._logger.info("Scan result saved", extra={"scan_id": scan.scan_id, "user_id": user_id})
        return scan

    def get_user_scan_history(self, user_id: str | None) -> list[ScanResult]:
        if not self._require_user(user_id):
            return []
        try:
            return self._store.list_for_user(user_id)
        except Exception as e:
            self._logger.error("Error fetching user scan history", extra={"user_id": user_id, "error": str(e)})
            return []

    def get_latest_scan_result(self, user_id: str | None) -> ScanResult | None:
        if not self._require_user(user_id):
            return None
        try:
            scans = self._store.list_for_user(user_id, limit=1)
        except Exception as e:
            self._logger.error("Error fetching latest scan result", extra={"user_id": user_id, "error": str(e)})
            return None
        return scans[0] if scans else None

    def delete_scan_result(self, user_id: str | None, scan_id: str) -> bool:
        if not self._require_user(user_id):
            return False
        try:
            scan = self._store.get(scan_id)
            if scan is None or scan.user_id != user_id:
                self._logger.error(
                    "Unauthorized: user does not own this scan result",
                    extra={"user_id": user_id, "scan_id": scan_id},
                )
                return False
            deleted = self._store.delete(scan_id)
        except Exception as e:
            self._logger.error("Error deleting scan result", extra={"scan_id": scan_id, "error": str(e)})
            return False
        if deleted:
            self._logger.info("Scan result deleted", extra={"scan_id": scan_id, "user_id": user_id})
        return deleted

    def get_user_scan_count(self, user_id: str | None) -> int:
        if not self._require_user(user_id):
            return 0
        try:
            return self._store.count_for_user(user_id)
        except Exception as e:
            self._logger.error("Error getting scan count", extra={"user_id": user_id, "error": str(e)})
            return 0
