from __future__ import annotations

import logging
from typing import Optional

from src.services.standing_estimator import (
    PopulationStandingEstimator,
    Standing,
    StandingEstimator,
)
from src.utils.exceptions import CollaboratorError, StandingUnavailableError

logger = logging.getLogger(__name__)


class StandingAdapter:
    '''Turns a LifeScore and country into ranks for the rank-gated rules.

    Ranks are estimates (see PopulationStandingEstimator) and are clamped to 1
    at best. There is no city-level ranking: city achievements compare against
    the country rank instead.
    '''

    def __init__(self, estimator: Optional[StandingEstimator] = None) -> None:
        self.estimator = estimator or PopulationStandingEstimator()

    def estimate_ranks(self, life_score: float, country: str) -> Standing:
        try:
            raw = self.estimator.estimate(life_score, country)
        except CollaboratorError:
            raise
        except Exception as e:
            logger.error(f'Standing estimate failed for score={life_score}: {e}')
            raise StandingUnavailableError(
                f'Could not estimate standing for LifeScore {life_score}'
            ) from e

        return Standing(
            global_rank=max(1, int(raw.global_rank)),
            country_rank=max(1, int(raw.country_rank)),
        )
