from __future__ import annotations

from src.achievements.context import EvaluationContext
from src.achievements.rules.base import BaseAssetTypeRule, BaseThresholdRule
from src.utils.constants import (
    BUSINESS_ASSET_TYPES,
    COLLECTIBLE_ASSET_TYPES,
    HOME_ASSET_TYPES,
    TECHNOLOGY_ASSET_TYPES,
    VEHICLE_ASSET_TYPES,
)


class Homeowner(BaseAssetTypeRule):
    code = 'homeowner'
    name = 'Homeowner'
    description = 'Own your first property'
    icon = '🏠'
    category = 'assets'
    rarity = 'uncommon'
    reward_points = 800
    unlock_criteria = 'Add a home or property to assets'
    asset_types = HOME_ASSET_TYPES


class CarOwner(BaseAssetTypeRule):
    code = 'car-owner'
    name = 'Car Owner'
    description = 'Own your first vehicle'
    icon = '🚗'
    category = 'assets'
    rarity = 'common'
    reward_points = 300
    unlock_criteria = 'Add a car or vehicle to assets'
    asset_types = VEHICLE_ASSET_TYPES


class AssetCollector(BaseThresholdRule):
    code = 'asset-collector'
    name = 'Asset Collector'
    description = 'Own 5+ different types of assets'
    icon = '🎯'
    category = 'assets'
    rarity = 'rare'
    reward_points = 1000
    unlock_criteria = 'Add 5 or more different asset types'
    threshold = 5
    tracks_progress = True

    def measure(self, context: EvaluationContext) -> float:
        return len(context.profile.asset_types())


class LuxuryOwner(BaseThresholdRule):
    code = 'luxury-owner'
    name = 'Luxury Owner'
    description = 'Own assets worth $500,000+'
    icon = '💎'
    category = 'assets'
    rarity = 'epic'
    reward_points = 2000
    unlock_criteria = 'Have total asset value of $500,000 or more'
    threshold = 500_000

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.asset_value()


class Entrepreneur(BaseAssetTypeRule):
    code = 'entrepreneur'
    name = 'Entrepreneur'
    description = 'Own a business'
    icon = '🏢'
    category = 'assets'
    rarity = 'rare'
    reward_points = 1500
    unlock_criteria = 'Add a business to your assets'
    asset_types = BUSINESS_ASSET_TYPES


class ArtCollector(BaseAssetTypeRule):
    code = 'art-collector'
    name = 'Art Collector'
    description = 'Own art or collectibles'
    icon = '🎨'
    category = 'assets'
    rarity = 'uncommon'
    reward_points = 600
    unlock_criteria = 'Add art or collectibles to assets'
    asset_types = COLLECTIBLE_ASSET_TYPES


class TechEnthusiast(BaseThresholdRule):
    code = 'tech-enthusiast'
    name = 'Tech Enthusiast'
    description = 'Own $50,000+ in technology assets'
    icon = '💻'
    category = 'assets'
    rarity = 'rare'
    reward_points = 800
    unlock_criteria = 'Have $50,000+ worth of technology assets'
    threshold = 50_000

    def measure(self, context: EvaluationContext) -> float:
        return context.profile.asset_value(TECHNOLOGY_ASSET_TYPES)


class FirstAsset(BaseThresholdRule):
    code = 'first-asset'
    name = 'First Asset'
    description = 'Add your first asset'
    icon = '📦'
    category = 'assets'
    rarity = 'common'
    reward_points = 200
    unlock_criteria = 'Add any asset to your profile'
    threshold = 1

    def measure(self, context: EvaluationContext) -> float:
        return len(context.profile.assets)


RULES = [
    Homeowner(),
    CarOwner(),
    AssetCollector(),
    LuxuryOwner(),
    Entrepreneur(),
    ArtCollector(),
    TechEnthusiast(),
    FirstAsset(),
]
