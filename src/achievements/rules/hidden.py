from __future__ import annotations

from datetime import timedelta

from src.achievements.context import EvaluationContext
from src.achievements.rules.base import BaseAchievementRule, BaseTimeOfDayRule
from src.utils.helper import as_aware


class NightOwl(BaseTimeOfDayRule):
    code = 'night-owl'
    name = 'Night Owl'
    description = 'Update profile between midnight and 6 AM'
    icon = '🦉'
    category = 'hidden-misc'
    rarity = 'uncommon'
    reward_points = 300
    unlock_criteria = 'Make profile updates during late night hours'
    is_hidden = True
    start_hour = 0
    end_hour = 6


class EarlyBird(BaseTimeOfDayRule):
    code = 'early-bird'
    name = 'Early Bird'
    description = 'Update profile between 5-7 AM'
    icon = '🐦'
    category = 'hidden-misc'
    rarity = 'uncommon'
    reward_points = 300
    unlock_criteria = 'Make profile updates during early morning hours'
    is_hidden = True
    start_hour = 5
    end_hour = 7


class Overachiever(BaseAchievementRule):
    code = 'overachiever'
    name = 'Overachiever'
    description = 'Unlock 10 badges in one day'
    icon = '🚀'
    category = 'hidden-misc'
    rarity = 'epic'
    reward_points = 2000
    unlock_criteria = 'Unlock 10 or more badges within 24 hours'
    is_hidden = True
    required_count = 10
    window = timedelta(hours=24)

    def evaluate(self, context: EvaluationContext) -> bool:
        # Only unlocks from earlier passes count
        since = as_aware(context.now) - self.window
        recent = sum(
            1 for a in context.prior_unlocks if as_aware(a.unlocked_at) >= since
        )
        return recent >= self.required_count


class Perfectionist(BaseAchievementRule):
    code = 'perfectionist'
    name = 'Perfectionist'
    description = 'Complete 100% of profile fields'
    icon = '✨'
    category = 'hidden-misc'
    rarity = 'rare'
    reward_points = 1000
    unlock_criteria = 'Fill out every possible profile field'
    is_hidden = True

    def evaluate(self, context: EvaluationContext) -> bool:
        p = context.profile
        return all(
            (
                p.name,
                p.age,
                p.gender,
                p.city,
                p.country,
                p.wealth.salary,
                p.wealth.savings,
                p.wealth.investments,
                p.knowledge.education,
                p.knowledge.languages,
                p.knowledge.certificates,
                p.assets,
            )
        )


class SpeedDemon(BaseAchievementRule):
    code = 'speed-demon'
    name = 'Speed Demon'
    description = 'Complete onboarding in under 5 minutes'
    icon = '⚡'
    category = 'hidden-misc'
    rarity = 'uncommon'
    reward_points = 500
    unlock_criteria = 'Complete entire onboarding process in under 5 minutes'
    is_hidden = True
    max_seconds = 300

    def evaluate(self, context: EvaluationContext) -> bool:
        seconds = context.profile.onboarding_seconds
        return seconds is not None and 0 <= seconds < self.max_seconds


class BadgeHunter(BaseAchievementRule):
    code = 'badge-hunter'
    name = 'Badge Hunter'
    description = 'Unlock 25+ badges'
    icon = '🎯'
    category = 'hidden-misc'
    rarity = 'epic'
    reward_points = 2500
    unlock_criteria = 'Unlock 25 or more badges total'
    is_hidden = True
    required_count = 25

    def evaluate(self, context: EvaluationContext) -> bool:
        return len(context.prior_unlocks) >= self.required_count


RULES = [
    NightOwl(),
    EarlyBird(),
    Overachiever(),
    Perfectionist(),
    SpeedDemon(),
    BadgeHunter(),
]
