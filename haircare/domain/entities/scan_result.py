from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_scan_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ScanResult:
    user_id: str = ""
    hair_type: str = ""
    confidence: str = ""  # percentage string as returned by the classifier, e.g. "87.00%"
    dandruff_level: str = ""
    hair_loss_stage: str = ""
    recommended_oils: tuple[str, ...] = ()  # oil display names
    timestamp: int = field(default_factory=_now_ms)  # epoch milliseconds
    scan_id: str = field(default_factory=_new_scan_id)

    def formatted_date(self) -> str:
        return datetime.fromtimestamp(self.timestamp / 1000).strftime("%b %d, %Y at %I:%M %p")
