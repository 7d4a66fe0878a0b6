from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DandruffLevel(str, Enum):
    low = "Low"
    mid = "Mid"
    high = "High"


class HairLossStage(str, Enum):
    stage_1 = "Stage 1"
    stage_2 = "Stage 2"
    stage_3 = "Stage 3"
    stage_4 = "Stage 4"


@dataclass(frozen=True)
class UserSelections:
    dandruff_level: str = DandruffLevel.low.value
    hair_loss_stage: str = HairLossStage.stage_1.value

    @staticmethod
    def from_payload(dandruff_level: str | Enum | None, hair_loss_stage: str | Enum | None) -> "UserSelections":
        if isinstance(dandruff_level, Enum):
            dandruff_level = dandruff_level.value
        if isinstance(hair_loss_stage, Enum):
            hair_loss_stage = hair_loss_stage.value
        return UserSelections(
            dandruff_level=(dandruff_level or DandruffLevel.low.value).strip(),
            hair_loss_stage=(hair_loss_stage or HairLossStage.stage_1.value).strip(),
        )
