from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.achievements.catalog import AchievementCatalog
from src.achievements.context import Clock, system_clock
from src.achievements.engine import UnlockOrchestrator
from src.achievements.predicates import PredicateLibrary
from src.achievements.progress import Progress, ProgressCalculator
from src.achievements.registry import AchievementRegistry
from src.achievements.rules import (
    assets,
    community,
    hidden,
    knowledge,
    leaderboard,
    legendary,
    progress,
    wealth,
)
from src.achievements.standing import StandingAdapter
from src.achievements.starter import StarterGrantResolver
from src.models.achievement import UnlockedAchievement
from src.models.profile import Profile
from src.services.score_engine import ScoreEngine
from src.services.standing_estimator import StandingEstimator
from src.utils.env import Settings
from src.utils.tracing import configure_tracing

# Catalog order follows this order, then each module's RULES order
RULE_MODULES = (
    progress,
    wealth,
    knowledge,
    assets,
    community,
    leaderboard,
    legendary,
    hidden,
)


def build_registry() -> AchievementRegistry:
    registry = AchievementRegistry()
    for module in RULE_MODULES:
        registry.register_all(module.RULES)
    return registry


@dataclass(frozen=True)
class AchievementsEngine:
    '''The wired-up engine: one catalog shared by every component.'''

    catalog: AchievementCatalog
    predicates: PredicateLibrary
    orchestrator: UnlockOrchestrator
    starter: StarterGrantResolver
    progress_calculator: ProgressCalculator

    def resolve_new_unlocks(
        self, profile: Profile, previous: Optional[Profile] = None
    ) -> list[UnlockedAchievement]:
        return self.orchestrator.resolve_new_unlocks(profile, previous)

    def grant_starter_achievements(
        self, new_profile: Profile
    ) -> list[UnlockedAchievement]:
        return self.starter.grant_starter_achievements(new_profile)

    def progress(self, achievement_id: str, profile: Profile) -> Progress:
        return self.progress_calculator.progress(achievement_id, profile)


def build_engine(
    settings: Optional[Settings] = None,
    registry: Optional[AchievementRegistry] = None,
    score_engine: Optional[ScoreEngine] = None,
    standing_estimator: Optional[StandingEstimator] = None,
    clock: Optional[Clock] = None,
) -> AchievementsEngine:
    '''Build the engine once at process start and pass it to whoever needs it.'''
    settings = settings or Settings()
    configure_tracing(settings.tracing)
    registry = registry or build_registry()

    catalog = registry.catalog()
    predicates = PredicateLibrary(
        registry.predicates(),
        score_engine=score_engine,
        standing=StandingAdapter(standing_estimator),
        clock=clock or system_clock(settings.timezone),
    )
    return AchievementsEngine(
        catalog=catalog,
        predicates=predicates,
        orchestrator=UnlockOrchestrator(catalog, predicates),
        starter=StarterGrantResolver(catalog, predicates),
        progress_calculator=ProgressCalculator(
            registry.progress_functions(), predicates
        ),
    )
