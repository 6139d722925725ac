from __future__ import annotations

from typing import Callable, Iterable, List

from src.achievements.catalog import AchievementCatalog
from src.achievements.context import EvaluationContext
from src.achievements.interface import AchievementRule
from src.achievements.predicates import Predicate
from src.utils.exceptions import DuplicateAchievementError

ProgressFn = Callable[[EvaluationContext], tuple[float, float]]


class AchievementRegistry:
    '''Collects rules while the application is being wired up.

    Each rule carries its catalog entry and its predicate together; the
    registry splits them into the immutable catalog and the predicate map.
    '''

    def __init__(self) -> None:
        self._rules: List[AchievementRule] = []

    def register(self, rule: AchievementRule) -> None:
        if any(r.code == rule.code for r in self._rules):
            raise DuplicateAchievementError(
                f'Achievement rule {rule.code!r} registered twice'
            )
        self._rules.append(rule)

    def register_all(self, rules: Iterable[AchievementRule]) -> None:
        for rule in rules:
            self.register(rule)

    def all(self) -> Iterable[AchievementRule]:
        return list(self._rules)

    def catalog(self) -> AchievementCatalog:
        return AchievementCatalog(rule.definition for rule in self._rules)

    def predicates(self) -> dict[str, Predicate]:
        return {rule.code: rule.evaluate for rule in self._rules}

    def progress_functions(self) -> dict[str, ProgressFn]:
        return {
            rule.code: rule.progress
            for rule in self._rules
            if getattr(rule, 'tracks_progress', False)
        }
