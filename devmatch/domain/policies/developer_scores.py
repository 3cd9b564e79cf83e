"""Availability and rating scores for a single developer (0-100)."""

from __future__ import annotations

import math

from devmatch.domain.entities.developer import Developer
from devmatch.domain.value_objects.score import round_half_up
from devmatch.domain.value_objects.weights import AvailabilityScores, RatingScale

_DEFAULT_AVAILABILITY = AvailabilityScores()
_DEFAULT_RATING = RatingScale()


def score_availability(
    developer: Developer,
    scores: AvailabilityScores = _DEFAULT_AVAILABILITY,
) -> int:
    """Unavailable → 0, available and online → 100, available but offline → 70.

    The availability flag dominates: an unavailable developer scores 0 even
    when online.
    """
    if not developer.availability:
        return scores.unavailable
    if developer.online:
        return scores.online
    return scores.offline


def score_rating(developer: Developer, scale: RatingScale = _DEFAULT_RATING) -> int:
    """Map a 0-5 star rating to 0-100; no rating at all yields the neutral 50."""
    if developer.rating is None or not math.isfinite(developer.rating):
        return scale.default_score
    score = round_half_up(developer.rating * scale.multiplier)
    return max(0, min(scale.max_score, score))
