from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from haircare.domain.entities.recommendation import OilRecommendation


OIL_CATALOG: Mapping[str, OilRecommendation] = MappingProxyType(
    {
        "moroccanoil": OilRecommendation(
            key="moroccanoil",
            name="Moroccanoil",
            description="Premium argan oil for all hair types",
        ),
        "indulekha": OilRecommendation(
            key="indulekha",
            name="Indulekha Bringha Oil",
            description="Ayurvedic blend for hair growth",
        ),
        "rosemary": OilRecommendation(
            key="rosemary",
            name="Rosemary Hair Oil",
            description="Natural stimulant for hair follicles",
        ),
        "jojoba": OilRecommendation(
            key="jojoba",
            name="Jojoba Oil",
            description="Lightweight moisturizer for scalp",
        ),
        "thrive": OilRecommendation(
            key="thrive",
            name="Thrive Frizz Free Oil",
            description="Anti-frizz formula for smooth hair",
        ),
    }
)
