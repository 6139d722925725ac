from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from src.models.achievement import AchievementDefinition
from src.utils.exceptions import DuplicateAchievementError


class AchievementCatalog:
    '''Immutable, ordered set of achievement definitions.

    Built once at process start and passed to whatever needs it. Iteration order
    is registration order and never changes for the life of the object.
    '''

    def __init__(self, definitions: Iterable[AchievementDefinition]) -> None:
        ordered = tuple(definitions)
        index: dict[str, AchievementDefinition] = {}
        for definition in ordered:
            if definition.id in index:
                raise DuplicateAchievementError(
                    f'Achievement id {definition.id!r} registered twice'
                )
            index[definition.id] = definition
        self._definitions = ordered
        self._by_id = MappingProxyType(index)

    def get(self, achievement_id: str) -> Optional[AchievementDefinition]:
        return self._by_id.get(achievement_id)

    def all(self) -> tuple[AchievementDefinition, ...]:
        return self._definitions

    def ids(self) -> tuple[str, ...]:
        return tuple(d.id for d in self._definitions)

    def by_category(self, category: str) -> tuple[AchievementDefinition, ...]:
        return tuple(d for d in self._definitions if d.category == category)

    def browse(
        self, unlocked_ids: Iterable[str] = ()
    ) -> tuple[AchievementDefinition, ...]:
        '''Definitions shown in "browse all"; hidden ones only once unlocked.'''
        unlocked = set(unlocked_ids)
        return tuple(
            d for d in self._definitions if not d.is_hidden or d.id in unlocked
        )

    def __contains__(self, achievement_id: object) -> bool:
        return achievement_id in self._by_id

    def __iter__(self) -> Iterator[AchievementDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)
