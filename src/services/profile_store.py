from __future__ import annotations

import copy
import logging
import threading
from typing import Protocol, runtime_checkable

from src.models.profile import Profile
from src.utils.exceptions import ConcurrentUpdateError, ProfileNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class ProfileStore(Protocol):
    def get(self, profile_id: str) -> tuple[Profile, int]:
        '''Return a private copy of the profile and its version.'''
        pass

    def create(self, profile: Profile) -> int:
        pass

    def save(self, profile: Profile, expected_version: int) -> int:
        '''Compare-and-swap write; raises ConcurrentUpdateError on a stale version.'''
        pass


class InMemoryProfileStore:
    def __init__(self) -> None:
        self._rows: dict[str, tuple[Profile, int]] = {}
        self._lock = threading.Lock()

    def get(self, profile_id: str) -> tuple[Profile, int]:
        with self._lock:
            row = self._rows.get(profile_id)
        if row is None:
            raise ProfileNotFoundError(f'Profile {profile_id!r} not found')
        profile, version = row
        return copy.deepcopy(profile), version

    def create(self, profile: Profile) -> int:
        with self._lock:
            if profile.id in self._rows:
                raise ConcurrentUpdateError(f'Profile {profile.id!r} already exists')
            self._rows[profile.id] = (copy.deepcopy(profile), 1)
        logger.debug(f'Created profile {profile.id!r}')
        return 1

    def save(self, profile: Profile, expected_version: int) -> int:
        with self._lock:
            row = self._rows.get(profile.id)
            if row is None:
                raise ProfileNotFoundError(f'Profile {profile.id!r} not found')
            _, version = row
            if version != expected_version:
                raise ConcurrentUpdateError(
                    f'Profile {profile.id!r} is at version {version}, '
                    f'expected {expected_version}'
                )
            self._rows[profile.id] = (copy.deepcopy(profile), version + 1)
            return version + 1
