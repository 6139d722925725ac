from __future__ import annotations

from typing import Literal

from src.achievements.context import EvaluationContext
from src.achievements.interface import AchievementRule
from src.models.achievement import AchievementDefinition, Category, Rarity


class BaseAchievementRule(AchievementRule):
    '''Catalog entry and predicate declared together.

    Subclasses set the class attributes and implement evaluate().
    '''

    code: str = ''
    name: str = ''
    description: str = ''
    category: Category = 'progress'
    rarity: Rarity = 'common'
    reward_points: int = 0
    unlock_criteria: str = ''
    is_hidden: bool = False
    icon: str = ''
    tracks_progress: bool = False

    @property
    def definition(self) -> AchievementDefinition:
        return AchievementDefinition(
            id=self.code,
            name=self.name,
            description=self.description,
            category=self.category,
            rarity=self.rarity,
            reward_points=self.reward_points,
            unlock_criteria=self.unlock_criteria,
            is_hidden=self.is_hidden,
            icon=self.icon,
        )

    def evaluate(self, context: EvaluationContext) -> bool:
        raise NotImplementedError

    def progress(self, context: EvaluationContext) -> tuple[float, float]:
        return 0, 1


class BaseThresholdRule(BaseAchievementRule):
    '''measure(context) >= threshold'''

    threshold: float = 0  # to be overridden in subclasses

    def measure(self, context: EvaluationContext) -> float:
        raise NotImplementedError

    def evaluate(self, context: EvaluationContext) -> bool:
        return self.measure(context) >= self.threshold

    def progress(self, context: EvaluationContext) -> tuple[float, float]:
        return self.measure(context), self.threshold


class BaseAssetTypeRule(BaseAchievementRule):
    asset_types: frozenset[str] = frozenset()

    def evaluate(self, context: EvaluationContext) -> bool:
        return context.profile.has_asset_type(self.asset_types)


class BaseEducationRule(BaseAchievementRule):
    '''Education text contains one of the markers, case-insensitively.'''

    markers: tuple[str, ...] = ()

    def evaluate(self, context: EvaluationContext) -> bool:
        education = (context.profile.knowledge.education or '').lower()
        return any(marker in education for marker in self.markers)


class BaseRankRule(BaseAchievementRule):
    '''Rank at or below the ceiling; a smaller rank number is better.'''

    scope: Literal['global', 'country'] = 'global'
    ceiling: int = 0

    def rank(self, context: EvaluationContext) -> int | None:
        if context.standing is None:
            return None
        if self.scope == 'country':
            return context.standing.country_rank
        return context.standing.global_rank

    def evaluate(self, context: EvaluationContext) -> bool:
        rank = self.rank(context)
        return rank is not None and rank <= self.ceiling


class BaseTimeOfDayRule(BaseAchievementRule):
    '''Evaluated at an hour in [start_hour, end_hour) of the pass clock.'''

    start_hour: int = 0
    end_hour: int = 0

    def evaluate(self, context: EvaluationContext) -> bool:
        return self.start_hour <= context.now.hour < self.end_hour
