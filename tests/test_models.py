import pendulum

from src.models.achievement import UnlockedAchievement, total_reward_points
from src.models.profile import Profile


def test_profile_from_dict_tolerates_missing_fields():
    profile = Profile.from_dict(
        {
            'id': 7,
            'name': None,
            'wealth': {'salary': None, 'total': '1500'},
            'knowledge': None,
            'assets': [{'type': ' Home ', 'value': None}],
            'friends': None,
        }
    )

    assert profile.id == '7'
    assert profile.name == ''
    assert profile.wealth.salary == 0
    assert profile.wealth.total == 1500
    assert profile.knowledge.languages == []
    assert profile.assets[0].type == 'home'
    assert profile.assets[0].value == 0
    assert profile.friends == []
    assert profile.onboarding_seconds is None


def test_profile_from_dict_reads_achievements():
    profile = Profile.from_dict(
        {
            'id': 'u',
            'achievements': [
                {
                    'id': 'homeowner',
                    'name': 'Homeowner',
                    'reward_points': 800,
                    'unlocked_at': '2026-01-02T03:04:05+00:00',
                }
            ],
            'created_at': '2026-01-01',
        }
    )

    assert profile.unlocked_ids == {'homeowner'}
    assert profile.achievements[0].unlocked_at.year == 2026
    assert profile.created_at.month == 1


def test_asset_helpers():
    profile = Profile.from_dict(
        {
            'assets': [
                {'type': 'car', 'value': 10},
                {'type': 'Art', 'value': 5},
                {'type': 'car', 'value': 1},
            ]
        }
    )

    assert profile.asset_types() == {'car', 'art'}
    assert profile.has_asset_type(frozenset({'art'}))
    assert profile.asset_value() == 16
    assert profile.asset_value(frozenset({'car'})) == 11


def test_unlocked_to_dict_and_total():
    at = pendulum.datetime(2026, 3, 4, tz='UTC')
    unlocked = [
        UnlockedAchievement('a', 'A', 'd', 'wealth', 'rare', 1000, at),
        UnlockedAchievement('b', 'B', 'd', 'progress', 'common', 150, at),
    ]

    assert set(unlocked[0].to_dict()) == {
        'id',
        'name',
        'description',
        'category',
        'rarity',
        'reward_points',
        'unlocked_at',
    }
    assert unlocked[0].to_dict()['unlocked_at'].startswith('2026-03-04T00:00:00')
    assert total_reward_points(unlocked) == 1150
    assert total_reward_points([]) == 0


def test_profile_from_dict_skips_achievements_without_id(caplog):
    profile = Profile.from_dict(
        {
            'id': 'u',
            'achievements': [
                {'name': 'no id'},
                {'id': 'first-asset', 'reward_points': 'lots'},
                'garbage',
            ],
        }
    )

    assert profile.unlocked_ids == {'first-asset'}
    assert profile.achievements[0].reward_points == 0
    assert 'Skipping malformed stored achievement' in caplog.text


def test_profile_from_dict_ignores_non_numeric_age():
    assert Profile.from_dict({'age': 'thirty'}).age is None
    assert Profile.from_dict({'age': '31'}).age == 31
    assert Profile.from_dict({'age': 0}).age is None
