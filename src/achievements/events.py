from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from src.models.achievement import UnlockedAchievement
from src.models.profile import Profile

EventType = Literal['profile_updated', 'achievement_unlocked']


@dataclass(frozen=True)
class ProfileUpdatedEvent:
    profile_id: str
    previous: Optional[Profile]
    current: Profile

    @property
    def type(self) -> EventType:
        return 'profile_updated'


@dataclass(frozen=True)
class AchievementUnlockedEvent:
    profile_id: str
    achievement: UnlockedAchievement

    @property
    def type(self) -> EventType:
        return 'achievement_unlocked'
