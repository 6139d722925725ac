from __future__ import annotations

import copy
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

import pendulum

from src.achievements.events import AchievementUnlockedEvent, ProfileUpdatedEvent
from src.achievements.factory import AchievementsEngine
from src.models.achievement import UnlockedAchievement
from src.models.profile import Profile
from src.services.notifications import LoggingNotificationSink, NotificationSink
from src.services.profile_store import ProfileStore
from src.services.score_engine import ScoreEngine, with_life_score

logger = logging.getLogger(__name__)

Mutation = Callable[[Profile], None]


@dataclass
class _ProfileLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


class ProfileUpdateService:
    '''Runs profile edits through the achievements engine.

    Edits to one profile are serialized, and the store write is a
    compare-and-swap on the version read, so two passes can never both decide
    an achievement is still locked and grant it twice.
    '''

    def __init__(
        self,
        engine: AchievementsEngine,
        store: ProfileStore,
        sink: Optional[NotificationSink] = None,
        score_engine: Optional[ScoreEngine] = None,
    ) -> None:
        self.engine = engine
        self.store = store
        self.sink = sink or LoggingNotificationSink()
        self.score_engine = score_engine or engine.predicates.score_engine
        # profile id -> (lock, holders); entries go away when the last holder leaves
        self._locks: dict[str, _ProfileLock] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _lock_for(self, profile_id: str) -> Iterator[None]:
        with self._locks_guard:
            entry = self._locks.setdefault(profile_id, _ProfileLock())
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._locks_guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._locks[profile_id]

    def create_profile(self, profile: Profile) -> list[UnlockedAchievement]:
        '''Store a new profile with its starter achievements.'''
        new_profile = with_life_score(copy.deepcopy(profile), self.score_engine)
        if new_profile.created_at is None:
            new_profile.created_at = pendulum.now('UTC')

        granted = self.engine.grant_starter_achievements(new_profile)
        new_profile.achievements = list(new_profile.achievements) + granted
        with self._lock_for(new_profile.id):
            self.store.create(new_profile)
        self._notify(new_profile.id, granted)
        return granted

    def update_profile(
        self, profile_id: str, mutate: Mutation
    ) -> list[UnlockedAchievement]:
        '''Apply mutate to a copy of the stored profile and unlock what it earns.

        Returns the newly unlocked achievements. On a collaborator failure
        nothing is written and the error propagates.
        '''
        with self._lock_for(profile_id):
            previous, version = self.store.get(profile_id)
            candidate = copy.deepcopy(previous)
            mutate(candidate)
            candidate = with_life_score(candidate, self.score_engine)

            newly = self.engine.resolve_new_unlocks(candidate, previous)
            candidate.achievements = list(candidate.achievements) + newly
            self.store.save(candidate, expected_version=version)

        self.sink.publish(
            ProfileUpdatedEvent(
                profile_id=profile_id, previous=previous, current=candidate
            )
        )
        self._notify(profile_id, newly)
        return newly

    def record_score_share(self, profile_id: str) -> list[UnlockedAchievement]:
        def _share(profile: Profile) -> None:
            profile.score_shares += 1

        return self.update_profile(profile_id, _share)

    def _notify(self, profile_id: str, unlocked: list[UnlockedAchievement]) -> None:
        for achievement in unlocked:
            self.sink.publish(
                AchievementUnlockedEvent(profile_id=profile_id, achievement=achievement)
            )
