from __future__ import annotations

import logging
from typing import Protocol, Union, runtime_checkable

from src.achievements.events import AchievementUnlockedEvent, ProfileUpdatedEvent

logger = logging.getLogger(__name__)

FeedEvent = Union[ProfileUpdatedEvent, AchievementUnlockedEvent]


@runtime_checkable
class NotificationSink(Protocol):
    def publish(self, event: FeedEvent) -> None:
        pass


class LoggingNotificationSink:
    def publish(self, event: FeedEvent) -> None:
        if isinstance(event, AchievementUnlockedEvent):
            a = event.achievement
            logger.info(
                f'🎉 {event.profile_id} unlocked "{a.name}" '
                f'({a.rarity}, +{a.reward_points})'
            )
        else:
            logger.info(f'Profile {event.profile_id} updated')


class CollectingNotificationSink:
    '''Keeps every published event, for feeds rendered later and for tests.'''

    def __init__(self) -> None:
        self.events: list[FeedEvent] = []

    def publish(self, event: FeedEvent) -> None:
        self.events.append(event)

    def unlocked(self) -> list[AchievementUnlockedEvent]:
        return [e for e in self.events if isinstance(e, AchievementUnlockedEvent)]
