from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, runtime_checkable

from src.utils.constants import (
    COUNTRY_AVERAGE_SCORES,
    COUNTRY_POPULATIONS,
    DEFAULT_COUNTRY_POPULATION,
    MAX_LIFE_SCORE,
    STANDING_CURVE_EXPONENT,
    WORLD_POPULATION,
)


@dataclass(frozen=True)
class Standing:
    global_rank: int
    country_rank: int


@runtime_checkable
class StandingEstimator(Protocol):
    def estimate(self, life_score: float, country: str) -> Standing:
        pass


def score_percentile(life_score: float) -> float:
    '''Share of the world (0..1) a LifeScore is estimated to be ahead of.'''
    ratio = min(max(life_score, 0) / MAX_LIFE_SCORE, 1)
    return ratio**STANDING_CURVE_EXPONENT


class PopulationStandingEstimator:
    '''Percentile model against world and per-country populations.

    This is an estimate, not a ledger: ranks come from where a LifeScore falls
    on a fixed curve, not from comparing real users.
    '''

    def __init__(
        self,
        populations: Optional[Mapping[str, int]] = None,
        default_population: int = DEFAULT_COUNTRY_POPULATION,
    ) -> None:
        self.populations = dict(
            COUNTRY_POPULATIONS if populations is None else populations
        )
        self.default_population = default_population

    def estimate(self, life_score: float, country: str) -> Standing:
        percentile = score_percentile(life_score)
        people_ahead = math.floor(percentile * WORLD_POPULATION)
        global_rank = WORLD_POPULATION - people_ahead

        population = self.populations.get(country) or self.default_population
        whole_percentile = math.floor(percentile * 100)
        country_rank = math.floor(population * (1 - whole_percentile / 100))

        return Standing(global_rank=global_rank, country_rank=country_rank)


def countries_surpassed(life_score: float) -> int:
    '''How many countries' average citizen this LifeScore is above.'''
    return sum(1 for _, threshold in COUNTRY_AVERAGE_SCORES if life_score > threshold)
