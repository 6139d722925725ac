from __future__ import annotations

import logging
from typing import Optional

from src.achievements.catalog import AchievementCatalog
from src.achievements.predicates import PredicateLibrary
from src.models.achievement import UnlockedAchievement
from src.models.profile import Profile
from src.utils.exceptions import CollaboratorError
from src.utils.tracing import add_span_metadata, trace_span

logger = logging.getLogger(__name__)


class UnlockOrchestrator:
    def __init__(self, catalog: AchievementCatalog, predicates: PredicateLibrary):
        self.catalog = catalog
        self.predicates = predicates

    def resolve_new_unlocks(
        self, profile: Profile, previous: Optional[Profile] = None
    ) -> list[UnlockedAchievement]:
        '''Return achievements the profile newly qualifies for, in catalog order.

        The profile is not modified; the caller appends the result to
        profile.achievements and persists it. Score or standing failures raise
        before any predicate runs, so a failed pass never yields a partial list.
        '''
        with trace_span(
            'achievements.resolve',
            {'profile_id': profile.id, 'has_previous': previous is not None},
        ):
            unlocked_ids = profile.unlocked_ids
            context = self.predicates.build_context(profile, previous)

            newly_unlocked: list[UnlockedAchievement] = []
            for definition in self.catalog.all():
                if definition.id in unlocked_ids:
                    continue

                with trace_span(
                    'achievements.rule_evaluation', {'code': definition.id}
                ):
                    try:
                        earned = self.predicates.evaluate(
                            definition.id, profile, previous, context=context
                        )
                    except CollaboratorError:
                        raise
                    except Exception:
                        # One broken rule must not block the rest of the catalog
                        logger.exception(
                            f'Predicate for {definition.id!r} failed, skipping'
                        )
                        continue

                if earned:
                    newly_unlocked.append(definition.unlock(context.now))

            add_span_metadata('unlocked', len(newly_unlocked))
            if newly_unlocked:
                logger.info(
                    f'Profile {profile.id!r} unlocked '
                    f'{[a.id for a in newly_unlocked]}'
                )
            return newly_unlocked
