import threading

import pytest

from src.achievements.events import AchievementUnlockedEvent, ProfileUpdatedEvent
from src.achievements.factory import build_engine
from src.services.notifications import CollectingNotificationSink
from src.services.profile_store import InMemoryProfileStore
from src.services.profile_updates import ProfileUpdateService
from src.utils.exceptions import (
    ConcurrentUpdateError,
    ProfileNotFoundError,
    StandingUnavailableError,
)
from tests.conftest import FailingStandingEstimator, fixed_clock, make_profile


@pytest.fixture()
def store():
    return InMemoryProfileStore()


@pytest.fixture()
def sink():
    return CollectingNotificationSink()


@pytest.fixture()
def service(engine, store, sink):
    return ProfileUpdateService(engine, store, sink)


def _new_profile():
    return make_profile(id='ana', name='Ana', city='Tbilisi', country='Georgia')


def test_create_profile_grants_starter_achievements(service, store, sink):
    granted = service.create_profile(_new_profile())

    assert [a.id for a in granted] == ['welcome-aboard', 'profile-complete']
    stored, version = store.get('ana')
    assert version == 1
    assert stored.unlocked_ids == {'welcome-aboard', 'profile-complete'}
    assert stored.created_at is not None
    assert [e.achievement.id for e in sink.unlocked()] == [
        'welcome-aboard',
        'profile-complete',
    ]


def test_duplicate_create_is_rejected(service):
    service.create_profile(_new_profile())
    with pytest.raises(ConcurrentUpdateError):
        service.create_profile(_new_profile())


def test_update_unlocks_and_persists(service, store, sink):
    service.create_profile(_new_profile())
    sink.events.clear()

    def _raise_wealth(profile):
        profile.wealth.total = 60_000

    newly = service.update_profile('ana', _raise_wealth)

    assert [a.id for a in newly] == ['first-update', 'wealth-apprentice']
    stored, version = store.get('ana')
    assert version == 2
    assert {'first-update', 'wealth-apprentice'} <= stored.unlocked_ids
    assert isinstance(sink.events[0], ProfileUpdatedEvent)
    assert sink.events[0].previous.wealth.total == 0
    assert sink.events[0].current.wealth.total == 60_000
    assert all(isinstance(e, AchievementUnlockedEvent) for e in sink.events[1:])


def test_noop_update_unlocks_nothing(service):
    service.create_profile(_new_profile())
    assert service.update_profile('ana', lambda profile: None) == []


def test_update_recomputes_life_score(service, store):
    service.create_profile(_new_profile())

    def _add_degree(profile):
        profile.knowledge.education = 'Doctorate'

    service.update_profile('ana', _add_degree)
    assert store.get('ana')[0].life_score == 3000


def test_update_unknown_profile(service):
    with pytest.raises(ProfileNotFoundError):
        service.update_profile('nobody', lambda profile: None)


def test_stale_save_is_rejected(service, store):
    service.create_profile(_new_profile())
    profile, version = store.get('ana')
    store.save(profile, expected_version=version)

    with pytest.raises(ConcurrentUpdateError):
        store.save(profile, expected_version=version)


def test_failed_standing_leaves_store_untouched(store, sink):
    engine = build_engine(
        clock=fixed_clock, standing_estimator=FailingStandingEstimator()
    )
    service = ProfileUpdateService(engine, store, sink)
    service.create_profile(_new_profile())
    sink.events.clear()

    def _raise_wealth(profile):
        profile.wealth.total = 60_000

    with pytest.raises(StandingUnavailableError):
        service.update_profile('ana', _raise_wealth)

    stored, version = store.get('ana')
    assert version == 1
    assert stored.wealth.total == 0
    assert sink.events == []
    assert service._locks == {}


def test_score_share_unlocks_sharer(service, store):
    service.create_profile(_new_profile())

    newly = service.record_score_share('ana')

    assert [a.id for a in newly] == ['shared-score']
    assert store.get('ana')[0].score_shares == 1
    assert service.record_score_share('ana') == []


def test_concurrent_shares_grant_once(service, store):
    service.create_profile(_new_profile())
    errors = []

    def _share():
        try:
            service.record_score_share('ana')
        except Exception as e:  # pragma: no cover
            errors.append(e)

    threads = [threading.Thread(target=_share) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stored, _ = store.get('ana')
    assert errors == []
    assert stored.score_shares == 8
    assert [a.id for a in stored.achievements].count('shared-score') == 1
    assert service._locks == {}
