import re
from datetime import datetime, timezone
from typing import Any

from src.utils.constants import SCORE_LEVELS


def score_to_level(score: float) -> str:
    for th, name in SCORE_LEVELS:
        if score >= th:
            return name
    return SCORE_LEVELS[-1][1]


def as_number(value: Any) -> float:
    '''Coerce a possibly missing numeric field to a number, defaulting to 0.'''
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def education_key(education: str | None) -> str:
    # 'High-School' -> 'highschool'
    return re.sub(r'[^a-z]', '', (education or '').lower())


def normalize_type(value: str | None) -> str:
    return (value or '').strip().lower()


def clamp_percentage(current: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return max(0.0, min(current / total * 100, 100.0))


def as_aware(moment: datetime) -> datetime:
    '''Treat naive datetimes as UTC so they compare with aware ones.'''
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
