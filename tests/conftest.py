from dataclasses import dataclass
from typing import Any, Callable

import pendulum
import pytest

from src.achievements.factory import build_engine
from src.achievements.registry import AchievementRegistry
from src.achievements.rules.base import BaseAchievementRule
from src.models.profile import Asset, Knowledge, Profile, Wealth
from src.services.standing_estimator import Standing

# 14:00 keeps the time-of-day achievements out of the way
NOW = pendulum.datetime(2026, 3, 4, 14, 0, 0, tz='UTC')


def fixed_clock():
    return NOW


@dataclass
class FakeStandingEstimator:
    global_rank: int = 8_000_000_000
    country_rank: int = 50_000_000
    calls: int = 0

    def estimate(self, life_score: float, country: str) -> Standing:
        self.calls += 1
        return Standing(global_rank=self.global_rank, country_rank=self.country_rank)


class FailingStandingEstimator:
    def estimate(self, life_score: float, country: str) -> Standing:
        raise TimeoutError('standing service timed out')


class FailingScoreEngine:
    def compute(self, profile):
        raise RuntimeError('score engine down')


class FakeRule(BaseAchievementRule):
    def __init__(
        self, code: str, earned: bool = True, error: Exception | None = None
    ) -> None:
        self.code = code
        self.name = f'Rule {code}'
        self.description = 'Desc'
        self.reward_points = 10
        self._earned = earned
        self._error = error

    def evaluate(self, context) -> bool:
        if self._error is not None:
            raise self._error
        return self._earned


def make_profile(**overrides: Any) -> Profile:
    wealth = overrides.pop('wealth', {})
    knowledge = overrides.pop('knowledge', {})
    assets = overrides.pop('assets', [])
    return Profile(
        id=overrides.pop('id', 'user-1'),
        wealth=Wealth(**wealth),
        knowledge=Knowledge(**knowledge),
        assets=[Asset(**a) for a in assets],
        **overrides,
    )


@pytest.fixture()
def profile_factory() -> Callable[..., Profile]:
    return make_profile


@pytest.fixture()
def engine():
    return build_engine(clock=fixed_clock)


@pytest.fixture()
def standing_estimator() -> FakeStandingEstimator:
    return FakeStandingEstimator()


@pytest.fixture()
def ranked_engine(standing_estimator):
    return build_engine(clock=fixed_clock, standing_estimator=standing_estimator)


@pytest.fixture()
def clean_registry() -> AchievementRegistry:
    return AchievementRegistry()
