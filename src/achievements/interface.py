from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from src.models.achievement import AchievementDefinition

if TYPE_CHECKING:
    from src.achievements.context import EvaluationContext


@runtime_checkable
class AchievementRule(Protocol):
    code: str
    name: str
    description: str
    reward_points: int
    tracks_progress: bool

    @property
    def definition(self) -> AchievementDefinition:
        pass

    def evaluate(self, context: EvaluationContext) -> bool:
        '''
        Return True when the profile in context currently qualifies. Must be pure
        and total: missing fields count as zero or empty, never as an error.
        '''
        pass

    def progress(self, context: EvaluationContext) -> tuple[float, float]:
        '''
        Return (current, total) for rules with a single numeric driver. Only
        consulted when tracks_progress is True.
        '''
        pass
