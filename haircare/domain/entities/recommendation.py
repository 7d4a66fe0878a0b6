from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OilRecommendation:
    key: str
    name: str
    description: str
    price: str = "₹299"


@dataclass(frozen=True)
class HairTip:
    title: str
    description: str


@dataclass(frozen=True)
class CarePlan:
    oils: tuple[OilRecommendation, ...] = ()
    tips: tuple[HairTip, ...] = ()
