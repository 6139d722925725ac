from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

import pendulum

from src.models.achievement import UnlockedAchievement
from src.utils.helper import as_number, normalize_type

logger = logging.getLogger(__name__)


@dataclass
class Wealth:
    salary: float = 0
    savings: float = 0
    investments: float = 0
    currency: str = 'USD'
    total: float = 0

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Wealth:
        data = data or {}
        return cls(
            salary=as_number(data.get('salary')),
            savings=as_number(data.get('savings')),
            investments=as_number(data.get('investments')),
            currency=data.get('currency') or 'USD',
            total=as_number(data.get('total')),
        )


@dataclass
class Knowledge:
    education: str = ''
    certificates: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    total: float = 0

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Knowledge:
        data = data or {}
        return cls(
            education=data.get('education') or '',
            certificates=list(data.get('certificates') or []),
            languages=list(data.get('languages') or []),
            total=as_number(data.get('total')),
        )


@dataclass
class Asset:
    type: str
    value: float = 0
    name: str = ''
    id: str = ''

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Asset:
        return cls(
            type=normalize_type(data.get('type')),
            value=as_number(data.get('value')),
            name=data.get('name') or '',
            id=str(data.get('id') or ''),
        )


@dataclass
class Profile:
    id: str = ''
    name: str = ''
    email: str = ''
    age: Optional[int] = None
    gender: str = ''
    country: str = ''
    city: str = ''
    life_score: float = 0
    wealth: Wealth = field(default_factory=Wealth)
    knowledge: Knowledge = field(default_factory=Knowledge)
    assets: list[Asset] = field(default_factory=list)
    friends: list[str] = field(default_factory=list)
    achievements: list[UnlockedAchievement] = field(default_factory=list)
    score_shares: int = 0
    onboarding_seconds: Optional[float] = None
    created_at: Optional[datetime] = None

    @property
    def friend_count(self) -> int:
        return len(self.friends)

    @property
    def unlocked_ids(self) -> set[str]:
        return {a.id for a in self.achievements}

    def asset_types(self) -> set[str]:
        return {normalize_type(a.type) for a in self.assets}

    def has_asset_type(self, types: frozenset[str]) -> bool:
        return any(normalize_type(a.type) in types for a in self.assets)

    def asset_value(self, types: Optional[frozenset[str]] = None) -> float:
        return sum(
            as_number(a.value)
            for a in self.assets
            if types is None or normalize_type(a.type) in types
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Profile:
        created_at = data.get('created_at')
        onboarding = data.get('onboarding_seconds')
        age = int(as_number(data.get('age')))
        return cls(
            id=str(data.get('id') or ''),
            name=data.get('name') or '',
            email=data.get('email') or '',
            age=age or None,
            gender=data.get('gender') or '',
            country=data.get('country') or '',
            city=data.get('city') or '',
            life_score=as_number(data.get('life_score')),
            wealth=Wealth.from_dict(data.get('wealth')),
            knowledge=Knowledge.from_dict(data.get('knowledge')),
            assets=[Asset.from_dict(a) for a in data.get('assets') or []],
            friends=[str(f) for f in data.get('friends') or []],
            achievements=_load_achievements(data.get('achievements')),
            score_shares=int(as_number(data.get('score_shares'))),
            onboarding_seconds=(
                as_number(onboarding) if onboarding is not None else None
            ),
            created_at=(
                pendulum.parse(str(created_at), strict=False) if created_at else None
            ),
        )


def _load_achievements(raw: Optional[list[Any]]) -> list[UnlockedAchievement]:
    loaded = []
    for entry in raw or []:
        try:
            loaded.append(UnlockedAchievement.from_dict(entry))
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning(f'Skipping malformed stored achievement: {e}')
    return loaded
