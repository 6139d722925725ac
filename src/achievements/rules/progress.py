from __future__ import annotations

from src.achievements.context import EvaluationContext
from src.achievements.rules.base import BaseAchievementRule, BaseThresholdRule
from src.utils.constants import WELCOME_ACHIEVEMENT_ID


class WelcomeAboard(BaseAchievementRule):
    code = WELCOME_ACHIEVEMENT_ID
    name = 'Welcome Aboard'
    description = 'Complete your first LifeScore calculation'
    icon = '🎉'
    category = 'progress'
    rarity = 'common'
    reward_points = 100
    unlock_criteria = 'Complete onboarding and first score calculation'

    def evaluate(self, context: EvaluationContext) -> bool:
        # New accounts get this regardless, see StarterGrantResolver
        return (context.profile.life_score or 0) > 0


class ProfileComplete(BaseAchievementRule):
    code = 'profile-complete'
    name = 'Profile Complete'
    description = 'Fill out all basic profile information'
    icon = '✅'
    category = 'progress'
    rarity = 'common'
    reward_points = 200
    unlock_criteria = 'Complete name, location, and basic details'

    def evaluate(self, context: EvaluationContext) -> bool:
        profile = context.profile
        return bool(profile.name and profile.city and profile.country)


class FirstUpdate(BaseAchievementRule):
    code = 'first-update'
    name = 'First Update'
    description = 'Update your profile for the first time'
    icon = '🔄'
    category = 'progress'
    rarity = 'common'
    reward_points = 150
    unlock_criteria = 'Make your first profile update'

    def evaluate(self, context: EvaluationContext) -> bool:
        previous, current = context.previous, context.profile
        if previous is None:
            return False
        return (
            current.name != previous.name
            or current.city != previous.city
            or (current.wealth.total or 0) != (previous.wealth.total or 0)
        )


class XpMaster(BaseThresholdRule):
    code = 'xp-master'
    name = 'XP Master'
    description = 'Reach 10,000 total XP'
    icon = '⚡'
    category = 'progress'
    rarity = 'rare'
    reward_points = 1000
    unlock_criteria = 'Accumulate 10,000 total XP'
    threshold = 10_000

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.life_score or 0


class ScoreClimber(BaseAchievementRule):
    code = 'score-climber'
    name = 'Score Climber'
    description = 'Increase your LifeScore by 2,000 points'
    icon = '📈'
    category = 'progress'
    rarity = 'uncommon'
    reward_points = 500
    unlock_criteria = 'Improve LifeScore by 2,000 points from initial'
    required_increase = 2000

    def evaluate(self, context: EvaluationContext) -> bool:
        if context.previous is None:
            return False
        gained = (context.profile.life_score or 0) - (
            context.previous.life_score or 0
        )
        return gained >= self.required_increase


RULES = [
    WelcomeAboard(),
    ProfileComplete(),
    FirstUpdate(),
    XpMaster(),
    ScoreClimber(),
]
