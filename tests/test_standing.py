import pytest

from src.achievements.standing import StandingAdapter
from src.services.standing_estimator import (
    PopulationStandingEstimator,
    Standing,
    countries_surpassed,
)
from src.utils.constants import COUNTRY_POPULATIONS, WORLD_POPULATION
from src.utils.exceptions import StandingUnavailableError
from tests.conftest import FailingStandingEstimator


def test_zero_score_ranks_last():
    standing = StandingAdapter().estimate_ranks(0, 'Germany')

    assert standing.global_rank == WORLD_POPULATION
    assert standing.country_rank == COUNTRY_POPULATIONS['Germany']


def test_unlisted_country_uses_default_population():
    standing = StandingAdapter().estimate_ranks(0, 'Atlantis')
    assert standing.country_rank == 50_000_000


def test_max_score_is_clamped_to_rank_one():
    standing = StandingAdapter().estimate_ranks(30_000, 'Japan')
    assert standing == Standing(global_rank=1, country_rank=1)

    beyond = StandingAdapter().estimate_ranks(45_000, 'Japan')
    assert beyond == Standing(global_rank=1, country_rank=1)


def test_negative_score_treated_as_zero():
    adapter = StandingAdapter()
    assert adapter.estimate_ranks(-500, 'India') == adapter.estimate_ranks(0, 'India')


@pytest.mark.parametrize('country', ['United States', 'Singapore', 'Nowhere'])
def test_ranks_are_monotonic(country):
    adapter = StandingAdapter()
    previous = None
    for score in range(0, 31_000, 250):
        standing = adapter.estimate_ranks(score, country)
        assert standing.global_rank >= 1
        assert standing.country_rank >= 1
        if previous is not None:
            assert standing.global_rank <= previous.global_rank
            assert standing.country_rank <= previous.country_rank
        previous = standing


def test_custom_population_table():
    estimator = PopulationStandingEstimator(populations={'Tiny': 1000})
    assert estimator.estimate(0, 'Tiny').country_rank == 1000


def test_estimator_failure_is_wrapped():
    with pytest.raises(StandingUnavailableError):
        StandingAdapter(FailingStandingEstimator()).estimate_ranks(100, 'Georgia')


def test_countries_surpassed_is_strict():
    assert countries_surpassed(0) == 0
    assert countries_surpassed(2000) == 0
    assert countries_surpassed(2001) == 1
    assert countries_surpassed(7000) == 9
    assert countries_surpassed(7200) == 10
    assert countries_surpassed(100_000) == 34
