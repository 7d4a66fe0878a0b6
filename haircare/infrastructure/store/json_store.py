from __future__ import annotations

import hashlib
import json
import logging
import threading
from pathlib import Path
from typing import Any

from haircare.application.ports.scan_history_store import ScanHistoryStorePort
from haircare.domain.entities.scan_result import ScanResult


class JsonScanHistoryStore(ScanHistoryStorePort):
    """One JSON file per user holding that user's scan documents."""

    def __init__(self, data_dir: str = "./data/scans") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # guards the locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, user_id: str) -> threading.Lock:
        with self._lock_lock:
            if user_id not in self._locks:
                self._locks[user_id] = threading.Lock()
            return self._locks[user_id]

    def _get_file_path(self, user_id: str) -> Path:
        # User ids come from the identity provider and may hold path characters.
        digest = hashlib.sha256(user_id.encode("utf-8")).hexdigest()[:32]
        return self._data_dir / f"{digest}.json"

    def _load_documents(self, file_path: Path) -> list[dict[str, Any]]:
        if not file_path.exists():
            return []
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            self._logger.warning("Unreadable scan file, treating as empty", extra={"error": str(e), "reason": file_path.name})
            return []
        scans = data.get("scans") if isinstance(data, dict) else None
        return [d for d in scans if isinstance(d, dict)] if isinstance(scans, list) else []

    def _save_documents(self, file_path: Path, user_id: str, documents: list[dict[str, Any]]) -> None:
        """Write the user's documents atomically."""
        temp_path = file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump({"userId": user_id, "scans": documents, "version": 1}, f, indent=2, ensure_ascii=False)
            temp_path.replace(file_path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _serialize_scan(self, scan: ScanResult) -> dict[str, Any]:
        return {
            "userId": scan.user_id,
            "hairType": scan.hair_type,
            "confidence": scan.confidence,
            "dandruffLevel": scan.dandruff_level,
            "hairLossStage": scan.hair_loss_stage,
            "recommendedOils": list(scan.recommended_oils),
            "timestamp": scan.timestamp,
            "scanId": scan.scan_id,
        }

    def _deserialize_scan(self, data: dict[str, Any]) -> ScanResult | None:
        """Decode one document. Malformed documents yield None and are skipped by callers."""
        try:
            oils = data.get("recommendedOils") or []
            if not isinstance(oils, list):
                raise ValueError("recommendedOils must be a list")
            scan_id = data.get("scanId")
            if not scan_id:
                raise ValueError("scanId is missing")
            return ScanResult(
                user_id=str(data.get("userId") or ""),
                hair_type=str(data.get("hairType") or ""),
                confidence=str(data.get("confidence") or ""),
                dandruff_level=str(data.get("dandruffLevel") or ""),
                hair_loss_stage=str(data.get("hairLossStage") or ""),
                recommended_oils=tuple(str(o) for o in oils),
                timestamp=int(data.get("timestamp") or 0),
                scan_id=str(scan_id),
            )
        except (ValueError, TypeError) as e:
            self._logger.warning("Skipping malformed scan document", extra={"error": str(e), "scan_id": data.get("scanId")})
            return None

    def _decode_all(self, documents: list[dict[str, Any]]) -> list[ScanResult]:
        scans: list[ScanResult] = []
        for document in documents:
            scan = self._deserialize_scan(document)
            if scan is not None:
                scans.append(scan)
        return scans

    def save(self, scan: ScanResult) -> None:
        file_path = self._get_file_path(scan.user_id)
        with self._get_lock(scan.user_id):
            documents = [d for d in self._load_documents(file_path) if d.get("scanId") != scan.scan_id]
            documents.append(self._serialize_scan(scan))
            self._save_documents(file_path, scan.user_id, documents)

    def get(self, scan_id: str) -> ScanResult | None:
        for file_path in self._data_dir.glob("*.json"):
            for document in self._load_documents(file_path):
                if document.get("scanId") == scan_id:
                    return self._deserialize_scan(document)
        return None

    def list_for_user(self, user_id: str, limit: int | None = None) -> list[ScanResult]:
        with self._get_lock(user_id):
            documents = self._load_documents(self._get_file_path(user_id))
        scans = [s for s in self._decode_all(documents) if s.user_id == user_id]
        scans.sort(key=lambda s: s.timestamp, reverse=True)
        return scans[:limit] if limit is not None else scans

    def delete(self, scan_id: str) -> bool:
        scan = self.get(scan_id)
        if scan is None:
            return False
        file_path = self._get_file_path(scan.user_id)
        with self._get_lock(scan.user_id):
            documents = self._load_documents(file_path)
            remaining = [d for d in documents if d.get("scanId") != scan_id]
            if len(remaining) == len(documents):
                return False
            self._save_documents(file_path, scan.user_id, remaining)
        return True

    def count_for_user(self, user_id: str) -> int:
        return len(self.list_for_user(user_id))
