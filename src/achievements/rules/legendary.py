from __future__ import annotations

from src.achievements.context import EvaluationContext
from src.achievements.rules.base import (
    BaseAchievementRule,
    BaseRankRule,
    BaseThresholdRule,
)
from src.utils.constants import MAX_LIFE_SCORE


class BaseLifeScoreRule(BaseThresholdRule):
    category = 'legendary'
    rarity = 'legendary'

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.life_score or 0


class LifeScoreLegend(BaseLifeScoreRule):
    code = 'lifescore-legend'
    name = 'LifeScore Legend'
    description = 'Reach 25,000+ total LifeScore'
    icon = '🌟'
    reward_points = 10_000
    unlock_criteria = 'Achieve 25,000+ total LifeScore points'
    threshold = 25_000


class PerfectScore(BaseLifeScoreRule):
    code = 'perfect-score'
    name = 'Perfect Score'
    description = 'Reach maximum possible LifeScore'
    icon = '💯'
    reward_points = 15_000
    unlock_criteria = 'Achieve the theoretical maximum LifeScore'
    threshold = MAX_LIFE_SCORE


class RenaissancePerson(BaseAchievementRule):
    code = 'renaissance-person'
    name = 'Renaissance Person'
    description = 'Excel in all categories (wealth, knowledge, assets)'
    icon = '🎭'
    category = 'legendary'
    rarity = 'legendary'
    reward_points = 7500
    unlock_criteria = 'Score in top 10% for wealth, knowledge, and assets'
    min_wealth_score = 15_000
    min_knowledge_score = 8000
    min_assets = 10

    def evaluate(self, context: EvaluationContext) -> bool:
        return (
            context.scores.wealth_score >= self.min_wealth_score
            and context.scores.knowledge_score >= self.min_knowledge_score
            and len(context.profile.assets) >= self.min_assets
        )


class GlobalOnePercent(BaseRankRule):
    code = 'global-one-percent'
    name = 'Global 1%'
    description = 'Join the top 1% of humanity'
    icon = '💎'
    category = 'legendary'
    rarity = 'legendary'
    reward_points = 8000
    unlock_criteria = 'Achieve top 1% global ranking'
    ceiling = 80_000_000  # 1% of 8 billion


RULES = [
    LifeScoreLegend(),
    PerfectScore(),
    RenaissancePerson(),
    GlobalOnePercent(),
]
