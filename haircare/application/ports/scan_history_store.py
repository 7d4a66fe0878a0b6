from __future__ import annotations

from abc import ABC, abstractmethod

from haircare.domain.entities.scan_result import ScanResult


class ScanHistoryStorePort(ABC):
    @abstractmethod
    def save(self, scan: ScanResult) -> None:
        """Insert or replace a scan keyed by its scan_id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, scan_id: str) -> ScanResult | None:
        raise NotImplementedError

    @abstractmethod
    def list_for_user(self, user_id: str, limit: int | None = None) -> list[ScanResult]:
        """Scans owned by user_id, newest first."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, scan_id: str) -> bool:
        """Delete a scan. Returns True if something was removed."""
        raise NotImplementedError

    @abstractmethod
    def count_for_user(self, user_id: str) -> int:
        raise NotImplementedError
