from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

import pendulum

from src.utils.helper import as_number

Category = Literal[
    'progress',
    'wealth',
    'knowledge',
    'assets',
    'community',
    'leaderboard',
    'legendary',
    'hidden-misc',
]

Rarity = Literal['common', 'uncommon', 'rare', 'epic', 'legendary']


@dataclass(frozen=True)
class AchievementDefinition:
    id: str
    name: str
    description: str
    category: Category
    rarity: Rarity
    reward_points: int
    unlock_criteria: str
    is_hidden: bool = False
    icon: str = ''

    def unlock(self, at: datetime) -> UnlockedAchievement:
        return UnlockedAchievement(
            id=self.id,
            name=self.name,
            description=self.description,
            category=self.category,
            rarity=self.rarity,
            reward_points=self.reward_points,
            unlocked_at=at,
            is_hidden=self.is_hidden,
            icon=self.icon,
        )


@dataclass(frozen=True)
class UnlockedAchievement:
    '''Snapshot of a definition at the moment it was unlocked. Never revoked.'''

    id: str
    name: str
    description: str
    category: Category
    rarity: Rarity
    reward_points: int
    unlocked_at: datetime
    is_hidden: bool = False
    icon: str = ''

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'rarity': self.rarity,
            'reward_points': self.reward_points,
            'unlocked_at': self.unlocked_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UnlockedAchievement:
        '''Rehydrate a stored unlock; raises ValueError when it has no id.'''
        if not data.get('id'):
            raise ValueError(f'Stored achievement without an id: {data!r}')
        unlocked_at = data.get('unlocked_at') or data.get('unlockedAt')
        if isinstance(unlocked_at, datetime):
            stamp = unlocked_at
        elif unlocked_at:
            stamp = pendulum.parse(str(unlocked_at), strict=False)
        else:
            stamp = pendulum.from_timestamp(0)
        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            description=data.get('description', ''),
            category=data.get('category', 'progress'),
            rarity=data.get('rarity', 'common'),
            reward_points=int(as_number(data.get('reward_points'))),
            unlocked_at=stamp,
            is_hidden=bool(data.get('is_hidden', False)),
            icon=data.get('icon', ''),
        )


def total_reward_points(unlocked: list[UnlockedAchievement]) -> int:
    return sum(int(a.reward_points) for a in unlocked)
