from __future__ import annotations

import logging
from typing import Sequence

from src.achievements.catalog import AchievementCatalog
from src.achievements.predicates import PredicateLibrary
from src.models.achievement import UnlockedAchievement
from src.models.profile import Profile
from src.utils.constants import STARTER_ACHIEVEMENT_IDS, WELCOME_ACHIEVEMENT_ID
from src.utils.exceptions import CollaboratorError

logger = logging.getLogger(__name__)


class StarterGrantResolver:
    '''Achievements handed out once, when an account is created.

    The welcome achievement is granted unconditionally, even though its own
    predicate asks for a LifeScore above zero: a brand-new profile may start
    at zero. Only the easy starter rules run here; rank, meta and legendary
    rules wait for the first regular unlock pass.
    '''

    def __init__(
        self,
        catalog: AchievementCatalog,
        predicates: PredicateLibrary,
        starter_ids: Sequence[str] = STARTER_ACHIEVEMENT_IDS,
        welcome_id: str = WELCOME_ACHIEVEMENT_ID,
    ) -> None:
        self.catalog = catalog
        self.predicates = predicates
        self.starter_ids = tuple(starter_ids)
        self.welcome_id = welcome_id

    def grant_starter_achievements(
        self, new_profile: Profile
    ) -> list[UnlockedAchievement]:
        context = self.predicates.build_context(
            new_profile, previous=None, include_standing=False
        )
        granted: list[UnlockedAchievement] = []

        welcome = self.catalog.get(self.welcome_id)
        if welcome is None:
            logger.error(
                f'Welcome achievement {self.welcome_id!r} missing from catalog'
            )
        else:
            granted.append(welcome.unlock(context.now))

        for achievement_id in self.starter_ids:
            definition = self.catalog.get(achievement_id)
            if definition is None:
                logger.warning(
                    f'Starter achievement {achievement_id!r} not in catalog'
                )
                continue
            try:
                earned = self.predicates.evaluate(
                    achievement_id, new_profile, context=context
                )
            except CollaboratorError:
                raise
            except Exception:
                logger.exception(
                    f'Starter predicate for {achievement_id!r} failed, skipping'
                )
                continue
            if earned:
                granted.append(definition.unlock(context.now))

        logger.info(
            f'Starter achievements for {new_profile.id!r}: {[a.id for a in granted]}'
        )
        return granted
