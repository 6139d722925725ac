from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from src.models.profile import Profile
from src.utils.constants import (
    BUSINESS_ASSET_TYPES,
    EDUCATION_POINTS,
    HOME_ASSET_TYPES,
    KNOWLEDGE_SCORE_CAP,
    LUXURY_ASSET_TYPES,
    VEHICLE_ASSET_TYPES,
    WEALTH_SCORE_CAP,
)
from src.utils.helper import as_number, education_key, normalize_type

_NON_ITEM_TYPES = HOME_ASSET_TYPES | VEHICLE_ASSET_TYPES | BUSINESS_ASSET_TYPES


@dataclass(frozen=True)
class ScoreBreakdown:
    wealth_score: float
    knowledge_score: float
    # Asset-derived share of wealth_score, reported separately
    asset_score: float
    total: float


@runtime_checkable
class ScoreEngine(Protocol):
    def compute(self, profile: Profile) -> ScoreBreakdown:
        pass


class LifeScoreEngine:
    '''Point-based LifeScore: wealth (max 20,000) plus knowledge (max 10,000).'''

    def compute(self, profile: Profile) -> ScoreBreakdown:
        wealth = profile.wealth
        income_points = min(as_number(wealth.salary) / 5, 4000)
        savings_points = min(as_number(wealth.savings) / 200, 3000)
        investment_points = min(as_number(wealth.investments) / 333, 3000)

        asset_points = self._asset_points(profile)
        wealth_score = min(
            income_points + savings_points + investment_points + asset_points,
            WEALTH_SCORE_CAP,
        )

        knowledge = profile.knowledge
        education_points = EDUCATION_POINTS.get(education_key(knowledge.education), 0)
        language_points = min(len(knowledge.languages) * 250, 2000)
        certificate_points = min(len(knowledge.certificates) * 1000, 3000)
        knowledge_score = min(
            education_points + language_points + certificate_points,
            KNOWLEDGE_SCORE_CAP,
        )

        return ScoreBreakdown(
            wealth_score=wealth_score,
            knowledge_score=knowledge_score,
            asset_score=min(asset_points, wealth_score),
            total=wealth_score + knowledge_score,
        )

    @staticmethod
    def _asset_points(profile: Profile) -> float:
        home_points = 2000 if profile.has_asset_type(HOME_ASSET_TYPES) else 0
        car_points = 500 if profile.has_asset_type(VEHICLE_ASSET_TYPES) else 0
        businesses = sum(
            1 for a in profile.assets if normalize_type(a.type) in BUSINESS_ASSET_TYPES
        )
        items_value = sum(
            as_number(a.value)
            for a in profile.assets
            if normalize_type(a.type) not in _NON_ITEM_TYPES
        )
        luxury_value = profile.asset_value(LUXURY_ASSET_TYPES)
        return (
            home_points
            + car_points
            + businesses * 2000
            + min(items_value / 100, 2000)
            + min(luxury_value / 200, 3000)
        )


def with_life_score(profile: Profile, engine: ScoreEngine | None = None) -> Profile:
    '''Return a copy of profile carrying its recomputed LifeScore.'''
    breakdown = (engine or LifeScoreEngine()).compute(profile)
    return dataclasses.replace(profile, life_score=breakdown.total)
