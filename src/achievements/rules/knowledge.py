from __future__ import annotations

from src.achievements.context import EvaluationContext
from src.achievements.rules.base import (
    BaseAchievementRule,
    BaseEducationRule,
    BaseThresholdRule,
)


class BaseCertificateRule(BaseThresholdRule):
    category = 'knowledge'
    tracks_progress = True

    def measure(self, context: EvaluationContext) -> float:
        return len(context.profile.knowledge.certificates)


class BaseLanguageRule(BaseThresholdRule):
    category = 'knowledge'
    tracks_progress = True

    def measure(self, context: EvaluationContext) -> float:
        return len(context.profile.knowledge.languages)


class KnowledgeSeeker(BaseAchievementRule):
    code = 'knowledge-seeker'
    name = 'Knowledge Seeker'
    description = 'Add your first degree or education level'
    icon = '🎓'
    category = 'knowledge'
    rarity = 'common'
    reward_points = 300
    unlock_criteria = 'Add education level to profile'

    def evaluate(self, context: EvaluationContext) -> bool:
        education = (context.profile.knowledge.education or '').strip().lower()
        return education not in ('', 'none')


class SkillStacker(BaseCertificateRule):
    code = 'skill-stacker'
    name = 'Skill Stacker'
    description = 'Add 3+ professional certificates'
    icon = '📜'
    rarity = 'uncommon'
    reward_points = 600
    unlock_criteria = 'Add 3 or more professional certificates'
    threshold = 3


class Polyglot(BaseLanguageRule):
    code = 'polyglot'
    name = 'Polyglot'
    description = 'Speak 5+ languages fluently'
    icon = '🌍'
    rarity = 'epic'
    reward_points = 2000
    unlock_criteria = 'Add 5 or more languages to profile'
    threshold = 5


class Bookworm(BaseEducationRule):
    code = 'bookworm'
    name = 'Bookworm'
    description = 'Achieve Masters degree or higher'
    icon = '📚'
    category = 'knowledge'
    rarity = 'rare'
    reward_points = 1200
    unlock_criteria = 'Have Masters, Doctorate, or PhD education level'
    markers = ('masters', 'master', 'doctorate', 'phd')


class DoctorateHolder(BaseEducationRule):
    code = 'doctorate-holder'
    name = 'Doctorate Holder'
    description = 'Hold a Doctorate or PhD degree'
    icon = '🎖️'
    category = 'knowledge'
    rarity = 'epic'
    reward_points = 2500
    unlock_criteria = 'Have Doctorate or PhD education level'
    markers = ('doctorate', 'phd')


class CertifiedExpert(BaseCertificateRule):
    code = 'certified-expert'
    name = 'Certified Expert'
    description = 'Hold 5+ professional certifications'
    icon = '🏅'
    rarity = 'rare'
    reward_points = 1000
    unlock_criteria = 'Add 5 or more professional certificates'
    threshold = 5


class Trilingual(BaseLanguageRule):
    code = 'trilingual'
    name = 'Trilingual'
    description = 'Speak 3+ languages'
    icon = '🗣️'
    rarity = 'uncommon'
    reward_points = 500
    unlock_criteria = 'Add 3 or more languages to profile'
    threshold = 3


class KnowledgeMaster(BaseThresholdRule):
    code = 'knowledge-master'
    name = 'Knowledge Master'
    description = 'Reach 5,000+ knowledge points'
    icon = '🧠'
    category = 'knowledge'
    rarity = 'epic'
    reward_points = 2000
    unlock_criteria = 'Accumulate 5,000+ knowledge score points'
    threshold = 5000
    tracks_progress = True

    def measure(self, context: EvaluationContext) -> float:
        return context.scores.knowledge_score


RULES = [
    KnowledgeSeeker(),
    SkillStacker(),
    Polyglot(),
    Bookworm(),
    DoctorateHolder(),
    CertifiedExpert(),
    Trilingual(),
    KnowledgeMaster(),
]
