from __future__ import annotations

from haircare.application.ports.scan_history_store import ScanHistoryStorePort
from haircare.domain.entities.scan_result import ScanResult


class MemoryScanHistoryStore(ScanHistoryStorePort):
    def __init__(self) -> None:
        self._scans: dict[str, ScanResult] = {}

    def save(self, scan: ScanResult) -> None:
        self._scans[scan.scan_id] = scan

    def get(self, scan_id: str) -> ScanResult | None:
        return self._scans.get(scan_id)

    def list_for_user(self, user_id: str, limit: int | None = None) -> list[ScanResult]:
        scans = [s for s in self._scans.values() if s.user_id == user_id]
        scans.sort(key=lambda s: s.timestamp, reverse=True)
        return scans[:limit] if limit is not None else scans

    def delete(self, scan_id: str) -> bool:
        return self._scans.pop(scan_id, None) is not None

    def count_for_user(self, user_id: str) -> int:
        return sum(1 for s in self._scans.values() if s.user_id == user_id)
