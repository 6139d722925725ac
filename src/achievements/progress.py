from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from src.achievements.predicates import PredicateLibrary
from src.achievements.registry import ProgressFn
from src.models.profile import Profile
from src.utils.helper import clamp_percentage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Progress:
    current: float
    total: float
    percentage: float


# "No meaningful partial progress", not "zero progress"
NO_PROGRESS = Progress(current=0, total=1, percentage=0)


class ProgressCalculator:
    def __init__(
        self,
        progress_functions: Mapping[str, ProgressFn],
        predicates: PredicateLibrary,
    ) -> None:
        self._functions = dict(progress_functions)
        self.predicates = predicates

    def progress(self, achievement_id: str, profile: Profile) -> Progress:
        fn = self._functions.get(achievement_id)
        if fn is None:
            logger.debug(f'No progress tracking for {achievement_id!r}')
            return NO_PROGRESS

        context = self.predicates.build_context(profile)
        current, total = fn(context)
        return Progress(
            current=current,
            total=total,
            percentage=clamp_percentage(current, total),
        )
