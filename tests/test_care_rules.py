"""
Tests for the oil recommendation and care tip rules.
"""

from __future__ import annotations

import itertools

from haircare.application.utils.care_rules import get_recommendations, get_tips, recommendation_keys
from haircare.domain.entities.oil_catalog import OIL_CATALOG

HAIR_TYPES = ("wavy", "curly", "straight", "dry", "WAVY", "Curly", "StRaIgHt", "DRY")
DANDRUFF_LEVELS = ("Low", "Mid", "High")
HAIR_LOSS_STAGES = ("Stage 1", "Stage 2", "Stage 3", "Stage 4")


def _keys(oils) -> set[str]:
    return {o.key for o in oils}


def test_recommendations_are_one_to_three_distinct_catalog_oils():
    for hair_type, dandruff, stage in itertools.product(HAIR_TYPES, DANDRUFF_LEVELS, HAIR_LOSS_STAGES):
        oils = get_recommendations(hair_type, dandruff, stage)
        keys = [o.key for o in oils]
        assert 1 <= len(oils) <= 3, (hair_type, dandruff, stage)
        assert len(set(keys)) == len(keys)
        assert all(k in OIL_CATALOG for k in keys)


def test_dry_low_stage_one_is_padded_to_three():
    oils = get_recommendations("dry", "Low", "Stage 1")
    assert len(oils) == 3
    assert _keys(oils) <= {"moroccanoil", "jojoba", "indulekha", "rosemary"}


def test_curly_high_stage_four_no_padding():
    assert set(recommendation_keys("curly", "High", "Stage 4")) == {"thrive", "jojoba", "rosemary", "indulekha"}
    oils = get_recommendations("curly", "High", "Stage 4")
    assert len(oils) == 3
    assert _keys(oils) <= {"thrive", "jojoba", "rosemary", "indulekha"}


def test_unknown_hair_type_uses_default_branch():
    assert set(recommendation_keys("unknown", "Low", "Stage 1")) == set(recommendation_keys("dry", "Low", "Stage 1"))
    assert [t.title for t in get_tips("Unknown", "Low", "Stage 1")] == ["Regular Oiling", "Gentle Handling"]


def test_recommendations_resolve_full_catalog_entries():
    oils = get_recommendations("straight", "Mid", "Stage 1")
    assert _keys(oils) == {"moroccanoil", "jojoba", "rosemary"}
    jojoba = next(o for o in oils if o.key == "jojoba")
    assert jojoba.name == "Jojoba Oil"
    assert jojoba.price == "₹299"


def test_keys_missing_from_catalog_are_dropped():
    partial = {k: v for k, v in OIL_CATALOG.items() if k != "jojoba"}
    oils = get_recommendations("wavy", "Low", "Stage 1", catalog=partial)
    assert "jojoba" not in _keys(oils)
    assert len(oils) == 2


def test_straight_low_stage_one_tips():
    tips = get_tips("straight", "Low", "Stage 1")
    assert [t.title for t in tips] == ["Volume Boost", "Heat Protection"]


def test_curly_high_stage_three_tips():
    tips = get_tips("curly", "High", "Stage 3")
    assert [t.title for t in tips] == [
        "Gentle Cleansing",
        "Moisture Lock",
        "Anti-Dandruff Care",
        "Professional Care",
    ]


def test_tips_are_between_two_and_four():
    for hair_type, dandruff, stage in itertools.product(HAIR_TYPES, DANDRUFF_LEVELS, HAIR_LOSS_STAGES):
        assert 2 <= len(get_tips(hair_type, dandruff, stage)) <= 4


def test_mid_dandruff_stage_two_tips():
    tips = get_tips("dry", "mid", "Stage 2")
    assert [t.title for t in tips] == ["Regular Oiling", "Gentle Handling", "Scalp Health", "Early Intervention"]


def test_repeated_calls_are_stable():
    first_oils = _keys(get_recommendations("wavy", "Mid", "Stage 2"))
    first_tips = get_tips("wavy", "Mid", "Stage 2")
    for _ in range(5):
        assert _keys(get_recommendations("wavy", "Mid", "Stage 2")) == first_oils
        assert get_tips("wavy", "Mid", "Stage 2") == first_tips


def test_hair_type_and_dandruff_match_case_insensitively():
    assert _keys(get_recommendations("CURLY", "HIGH", "Stage 1")) == _keys(get_recommendations("curly", "high", "Stage 1"))
    assert get_tips("Straight", "hIgH", "Stage 1")[2].title == "Anti-Dandruff Care"


def test_lowercase_stage_does_not_match_stage_rules():
    # Stage literals are matched exactly; "stage 3" falls through to no rule.
    assert [t.title for t in get_tips("straight", "Low", "stage 3")] == ["Volume Boost", "Heat Protection"]
    assert "indulekha" not in recommendation_keys("curly", "High", "stage 3")
    assert "indulekha" in recommendation_keys("curly", "High", "Stage 3")
