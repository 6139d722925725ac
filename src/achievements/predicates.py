from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from src.achievements.context import Clock, EvaluationContext, system_clock
from src.achievements.standing import StandingAdapter
from src.models.profile import Profile
from src.services.score_engine import LifeScoreEngine, ScoreBreakdown, ScoreEngine
from src.services.standing_estimator import countries_surpassed
from src.utils.exceptions import CollaboratorError, ScoreEngineError

logger = logging.getLogger(__name__)

Predicate = Callable[[EvaluationContext], bool]


class PredicateLibrary:
    '''Maps achievement ids to their unlock predicates.

    Also owns the collaborators predicates depend on (score engine, standing
    adapter, clock) so that an EvaluationContext is assembled in exactly one
    place.
    '''

    def __init__(
        self,
        predicates: Mapping[str, Predicate],
        score_engine: Optional[ScoreEngine] = None,
        standing: Optional[StandingAdapter] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._predicates = MappingProxyType(dict(predicates))
        self.score_engine = score_engine or LifeScoreEngine()
        self.standing = standing or StandingAdapter()
        self.clock = clock or system_clock()

    def __contains__(self, achievement_id: object) -> bool:
        return achievement_id in self._predicates

    def get(self, achievement_id: str) -> Optional[Predicate]:
        return self._predicates.get(achievement_id)

    def compute_scores(self, profile: Profile) -> ScoreBreakdown:
        try:
            return self.score_engine.compute(profile)
        except CollaboratorError:
            raise
        except Exception as e:
            logger.error(f'Score engine failed for profile {profile.id!r}: {e}')
            raise ScoreEngineError(
                f'Could not compute scores for profile {profile.id!r}'
            ) from e

    def build_context(
        self,
        profile: Profile,
        previous: Optional[Profile] = None,
        include_standing: bool = True,
    ) -> EvaluationContext:
        '''Gather scores, standing and the pre-pass snapshot for one pass.

        Collaborator failures raise here, before any predicate runs.
        '''
        scores = self.compute_scores(profile)
        life_score = profile.life_score or 0
        standing = (
            self.standing.estimate_ranks(life_score, profile.country)
            if include_standing
            else None
        )
        return EvaluationContext(
            profile=profile,
            previous=previous,
            scores=scores,
            standing=standing,
            countries_surpassed=countries_surpassed(life_score),
            prior_unlocks=tuple(profile.achievements),
            now=self.clock(),
        )

    def evaluate(
        self,
        achievement_id: str,
        profile: Profile,
        previous: Optional[Profile] = None,
        context: Optional[EvaluationContext] = None,
    ) -> bool:
        '''
        Evaluate one achievement. A supplied context must have been built for
        the same profile and previous snapshot; it is how a pass shares one
        standing estimate across every predicate.
        '''
        predicate = self._predicates.get(achievement_id)
        if predicate is None:
            logger.warning(
                f'No predicate registered for achievement {achievement_id!r}'
            )
            return False
        if context is None:
            context = self.build_context(profile, previous)
        return bool(predicate(context))
