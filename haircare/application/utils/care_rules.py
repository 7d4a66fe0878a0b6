from __future__ import annotations

from typing import Mapping

from haircare.domain.entities.oil_catalog import OIL_CATALOG
from haircare.domain.entities.recommendation import HairTip, OilRecommendation

MAX_RECOMMENDATIONS = 3
MAX_TIPS = 4

CURLY_TYPES = ("wavy", "curly")
PADDING_KEYS = ("moroccanoil", "indulekha", "rosemary")

# Hair-loss stages are matched case-sensitively while hair type and dandruff
# level are lowercased first. "stage 3" therefore matches nothing. The mobile
# client always sends the exact "Stage N" literal, so this is kept as is.
ADVANCED_LOSS_STAGES = ("Stage 3", "Stage 4")
EARLY_LOSS_STAGE = "Stage 2"


def _hair_type_keys(hair_type: str) -> tuple[str, ...]:
    normalized = (hair_type or "").lower()
    if normalized in CURLY_TYPES:
        return ("thrive", "jojoba")
    if normalized == "straight":
        return ("moroccanoil", "jojoba")
    # "dry" and anything unrecognized
    return ("moroccanoil", "jojoba")


def _dandruff_keys(dandruff_level: str) -> tuple[str, ...]:
    normalized = (dandruff_level or "").lower()
    if normalized == "high":
        return ("rosemary", "jojoba")
    if normalized == "mid":
        return ("rosemary",)
    return ()


def _hair_loss_keys(hair_loss_stage: str) -> tuple[str, ...]:
    if hair_loss_stage in ADVANCED_LOSS_STAGES:
        return ("indulekha", "rosemary")
    if hair_loss_stage == EARLY_LOSS_STAGE:
        return ("indulekha",)
    return ()


def recommendation_keys(hair_type: str, dandruff_level: str, hair_loss_stage: str) -> list[str]:
    """
    Accumulate catalog keys from the hair-type, dandruff and hair-loss rules.

    Keys are deduplicated while keeping first-insertion order. When fewer than
    three distinct keys come out of the rules, the padding keys are added.
    The result is not truncated.
    """
    keys: dict[str, None] = {}
    for rule_keys in (
        _hair_type_keys(hair_type),
        _dandruff_keys(dandruff_level),
        _hair_loss_keys(hair_loss_stage),
    ):
        keys.update(dict.fromkeys(rule_keys))

    if len(keys) < MAX_RECOMMENDATIONS:
        keys.update(dict.fromkeys(PADDING_KEYS))

    return list(keys)


def get_recommendations(
    hair_type: str,
    dandruff_level: str,
    hair_loss_stage: str,
    catalog: Mapping[str, OilRecommendation] | None = None,
) -> list[OilRecommendation]:
    oils = OIL_CATALOG if catalog is None else catalog
    selected = recommendation_keys(hair_type, dandruff_level, hair_loss_stage)[:MAX_RECOMMENDATIONS]
    # Keys missing from the catalog are dropped.
    return [oils[key] for key in selected if key in oils]


def _hair_type_tips(hair_type: str) -> list[HairTip]:
    normalized = (hair_type or "").lower()
    if normalized in CURLY_TYPES:
        return [
            HairTip("Gentle Cleansing", "Use sulfate-free shampoo to maintain natural oils"),
            HairTip("Moisture Lock", "Apply leave-in conditioner while hair is damp"),
        ]
    if normalized == "straight":
        return [
            HairTip("Volume Boost", "Use volumizing products at the roots"),
            HairTip("Heat Protection", "Always use heat protectant before styling"),
        ]
    return [
        HairTip("Regular Oiling", "Massage scalp with oil 2-3 times per week"),
        HairTip("Gentle Handling", "Avoid harsh brushing when hair is wet"),
    ]


def _dandruff_tips(dandruff_level: str) -> list[HairTip]:
    normalized = (dandruff_level or "").lower()
    if normalized == "high":
        return [HairTip("Anti-Dandruff Care", "Use medicated shampoo twice a week")]
    if normalized == "mid":
        return [HairTip("Scalp Health", "Regular scalp massage to improve circulation")]
    return []


def _hair_loss_tips(hair_loss_stage: str) -> list[HairTip]:
    if hair_loss_stage in ADVANCED_LOSS_STAGES:
        return [HairTip("Professional Care", "Consider consulting a trichologist")]
    if hair_loss_stage == EARLY_LOSS_STAGE:
        return [HairTip("Early Intervention", "Use growth-promoting oils regularly")]
    return []


def get_tips(hair_type: str, dandruff_level: str, hair_loss_stage: str) -> list[HairTip]:
    tips: list[HairTip] = []
    tips.extend(_hair_type_tips(hair_type))
    tips.extend(_dandruff_tips(dandruff_level))
    tips.extend(_hair_loss_tips(hair_loss_stage))
    # Positional cut, later rules lose their slots first.
    return tips[:MAX_TIPS]
