from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import pendulum

from src.models.achievement import UnlockedAchievement
from src.models.profile import Profile
from src.services.score_engine import ScoreBreakdown
from src.services.standing_estimator import Standing

Clock = Callable[[], datetime]


def system_clock(timezone: str = 'UTC') -> Clock:
    def _now() -> datetime:
        return pendulum.now(timezone)

    return _now


@dataclass(frozen=True)
class EvaluationContext:
    '''Everything a predicate may look at during one unlock pass.

    Built once per pass so every predicate sees the same scores, the same
    standing and the same instant. prior_unlocks is the achievement list as it
    stood before the pass began; unlocks found during the pass are never added.
    '''

    profile: Profile
    previous: Optional[Profile]
    scores: ScoreBreakdown
    standing: Optional[Standing]
    countries_surpassed: int
    prior_unlocks: tuple[UnlockedAchievement, ...]
    now: datetime

    @property
    def prior_unlocked_ids(self) -> frozenset[str]:
        return frozenset(a.id for a in self.prior_unlocks)
