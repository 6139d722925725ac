from __future__ import annotations

from src.achievements.context import EvaluationContext
from src.achievements.rules.base import BaseThresholdRule


class BaseWealthTotalRule(BaseThresholdRule):
    category = 'wealth'
    tracks_progress = True

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.wealth.total or 0


class WealthApprentice(BaseWealthTotalRule):
    code = 'wealth-apprentice'
    name = 'Wealth Apprentice'
    description = 'Reach $50,000 in total wealth'
    icon = '💰'
    rarity = 'common'
    reward_points = 500
    unlock_criteria = 'Accumulate $50,000 in total net worth'
    threshold = 50_000


class WealthWarrior(BaseWealthTotalRule):
    code = 'wealth-warrior'
    name = 'Wealth Warrior'
    description = 'Reach $100,000 in total wealth'
    icon = '⚔️'
    rarity = 'uncommon'
    reward_points = 750
    unlock_criteria = 'Accumulate $100,000 in total net worth'
    threshold = 100_000


class WealthChampion(BaseWealthTotalRule):
    code = 'wealth-champion'
    name = 'Wealth Champion'
    description = 'Reach $250,000 in total wealth'
    icon = '🏆'
    rarity = 'rare'
    reward_points = 1500
    unlock_criteria = 'Accumulate $250,000 in total net worth'
    threshold = 250_000


class HalfMillionaire(BaseWealthTotalRule):
    code = 'half-millionaire'
    name = 'Half Millionaire'
    description = 'Reach $500,000 in total wealth'
    icon = '💎'
    rarity = 'epic'
    reward_points = 2500
    unlock_criteria = 'Accumulate $500,000 in total net worth'
    threshold = 500_000


class Millionaire(BaseWealthTotalRule):
    code = 'millionaire'
    name = 'Millionaire'
    description = 'Reach $1,000,000 in total wealth'
    icon = '👑'
    rarity = 'legendary'
    reward_points = 5000
    unlock_criteria = 'Accumulate $1,000,000 in total net worth'
    threshold = 1_000_000


class InvestorPro(BaseThresholdRule):
    code = 'investor-pro'
    name = 'Investor Pro'
    description = 'Have $100,000+ in investments'
    icon = '📊'
    category = 'wealth'
    rarity = 'rare'
    reward_points = 1000
    unlock_criteria = 'Maintain $100,000+ in investment portfolio'
    threshold = 100_000

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.wealth.investments or 0


class SaverSupreme(BaseThresholdRule):
    code = 'saver-supreme'
    name = 'Saver Supreme'
    description = 'Have $50,000+ in savings'
    icon = '🏦'
    category = 'wealth'
    rarity = 'uncommon'
    reward_points = 600
    unlock_criteria = 'Maintain $50,000+ in savings account'
    threshold = 50_000

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.wealth.savings or 0


class HighEarner(BaseThresholdRule):
    code = 'high-earner'
    name = 'High Earner'
    description = 'Annual salary of $100,000+'
    icon = '💵'
    category = 'wealth'
    rarity = 'rare'
    reward_points = 800
    unlock_criteria = 'Report annual salary of $100,000 or more'
    threshold = 100_000

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.wealth.salary or 0


RULES = [
    WealthApprentice(),
    WealthWarrior(),
    WealthChampion(),
    HalfMillionaire(),
    Millionaire(),
    InvestorPro(),
    SaverSupreme(),
    HighEarner(),
]
