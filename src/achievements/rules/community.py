from __future__ import annotations

from src.achievements.context import EvaluationContext
from src.achievements.rules.base import BaseThresholdRule


class BaseFriendCountRule(BaseThresholdRule):
    category = 'community'
    tracks_progress = True

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.friend_count


class FirstFriend(BaseFriendCountRule):
    code = 'first-friend'
    name = 'First Friend'
    description = 'Add your first friend'
    icon = '👋'
    rarity = 'common'
    reward_points = 250
    unlock_criteria = 'Add your first friend to the platform'
    threshold = 1


class SquadUp(BaseFriendCountRule):
    code = 'squad-up'
    name = 'Squad Up'
    description = 'Have 5+ friends'
    icon = '👥'
    rarity = 'uncommon'
    reward_points = 500
    unlock_criteria = 'Have 5 or more friends on the platform'
    threshold = 5


class SocialButterfly(BaseFriendCountRule):
    code = 'social-butterfly'
    name = 'Social Butterfly'
    description = 'Have 20+ friends'
    icon = '🦋'
    rarity = 'rare'
    reward_points = 1000
    unlock_criteria = 'Have 20 or more friends on the platform'
    threshold = 20


class ScoreSharer(BaseThresholdRule):
    code = 'shared-score'
    name = 'Score Sharer'
    description = 'Share your LifeScore for the first time'
    icon = '📤'
    category = 'community'
    rarity = 'common'
    reward_points = 200
    unlock_criteria = 'Share your LifeScore on social media'
    threshold = 1

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.score_shares or 0


class Influencer(BaseFriendCountRule):
    code = 'influencer'
    name = 'Influencer'
    description = 'Have 50+ friends'
    icon = '⭐'
    rarity = 'epic'
    reward_points = 2000
    unlock_criteria = 'Have 50 or more friends on the platform'
    threshold = 50


RULES = [
    FirstFriend(),
    SquadUp(),
    SocialButterfly(),
    ScoreSharer(),
    Influencer(),
]
