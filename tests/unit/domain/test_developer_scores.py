"""Tests for availability and rating scores."""

import pytest

from devmatch.domain.entities.developer import Developer
from devmatch.domain.policies.developer_scores import score_availability, score_rating
from devmatch.domain.value_objects.weights import AvailabilityScores, RatingScale

# ─── score_availability ──────────────────────────────────────────────


def test_available_and_online():
    assert score_availability(Developer(id="d", availability=True, online=True)) == 100


def test_available_but_offline():
    assert score_availability(Developer(id="d", availability=True, online=False)) == 70


def test_unavailable_dominates_online():
    assert score_availability(Developer(id="d", availability=False, online=True)) == 0


def test_unavailable_and_offline():
    assert score_availability(Developer(id="d")) == 0


def test_custom_availability_scores():
    scores = AvailabilityScores(online=90, offline=40, unavailable=5)
    assert score_availability(Developer(id="d", availability=True), scores) == 40
    assert score_availability(Developer(id="d"), scores) == 5


# ─── score_rating ────────────────────────────────────────────────────


def test_missing_rating_is_neutral():
    assert score_rating(Developer(id="d", rating=None)) == 50


def test_zero_rating_is_not_missing():
    assert score_rating(Developer(id="d", rating=0.0)) == 0


@pytest.mark.parametrize(
    "rating, expected",
    [(5.0, 100), (4.5, 90), (4.2, 84), (3.33, 67), (2.5, 50), (1, 20)],
)
def test_rating_scaled_to_100(rating, expected):
    assert score_rating(Developer(id="d", rating=rating)) == expected


def test_rating_capped_at_100():
    assert score_rating(Developer(id="d", rating=6.0)) == 100


def test_negative_rating_floored_at_zero():
    assert score_rating(Developer(id="d", rating=-1.0)) == 0


def test_nan_rating_treated_as_missing():
    assert score_rating(Developer(id="d", rating=float("nan"))) == 50


def test_custom_rating_scale():
    scale = RatingScale(default_score=0, multiplier=10)
    assert score_rating(Developer(id="d"), scale) == 0
    assert score_rating(Developer(id="d", rating=5.0), scale) == 50
