from __future__ import annotations

from src.achievements.context import EvaluationContext
from src.achievements.rules.base import BaseRankRule, BaseThresholdRule


class TopHundredThousandGlobal(BaseRankRule):
    code = 'top-100k-global'
    name = 'Global Elite'
    description = 'Reach top 100,000 globally'
    icon = '🌍'
    category = 'leaderboard'
    rarity = 'rare'
    reward_points = 1500
    unlock_criteria = 'Achieve global rank of 100,000 or better'
    ceiling = 100_000
    tracks_progress = True

    # Progress starts counting from rank 1,000,000
    progress_floor = 1_000_000

    def progress(self, context: EvaluationContext) -> tuple[float, float]:
        total = self.progress_floor - self.ceiling
        rank = self.rank(context)
        if rank is None:
            return 0, total
        return max(0, self.progress_floor - rank), total


class TopTenThousandGlobal(BaseRankRule):
    code = 'top-10k-global'
    name = 'Global Champion'
    description = 'Reach top 10,000 globally'
    icon = '🏆'
    category = 'leaderboard'
    rarity = 'epic'
    reward_points = 3000
    unlock_criteria = 'Achieve global rank of 10,000 or better'
    ceiling = 10_000


class TopThousandGlobal(BaseRankRule):
    code = 'top-1k-global'
    name = 'Global Legend'
    description = 'Reach top 1,000 globally'
    icon = '👑'
    category = 'leaderboard'
    rarity = 'legendary'
    reward_points = 5000
    unlock_criteria = 'Achieve global rank of 1,000 or better'
    ceiling = 1000


class CountryTopThousand(BaseRankRule):
    code = 'country-top-1000'
    name = 'National Elite'
    description = 'Reach top 1,000 in your country'
    icon = '🏅'
    category = 'leaderboard'
    rarity = 'rare'
    reward_points = 1200
    unlock_criteria = 'Achieve top 1,000 rank in your country'
    scope = 'country'
    ceiling = 1000


class CityChampion(BaseRankRule):
    code = 'city-champion'
    name = 'City Champion'
    description = 'Reach #1 in your city'
    icon = '🥇'
    category = 'leaderboard'
    rarity = 'epic'
    reward_points = 2500
    unlock_criteria = 'Achieve #1 rank in your city'
    # No city-level ranking exists; being #1 in the country stands in for it
    scope = 'country'
    ceiling = 1


class AboveNation(BaseThresholdRule):
    code = 'above-nation'
    name = 'Above a Nation'
    description = 'Surpass the average of 10+ countries'
    icon = '🗺️'
    category = 'leaderboard'
    rarity = 'rare'
    reward_points = 1000
    unlock_criteria = 'Score higher than average citizen of 10+ countries'
    threshold = 10

    def measure(self, context: EvaluationContext) -> float:
        return context.countries_surpassed


RULES = [
    TopHundredThousandGlobal(),
    TopTenThousandGlobal(),
    TopThousandGlobal(),
    CountryTopThousand(),
    CityChampion(),
    AboveNation(),
]
