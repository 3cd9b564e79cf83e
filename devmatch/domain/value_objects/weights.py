"""Weight tables and thresholds used by the matching engine.

Every number the scoring policies rely on lives here so it can be asserted
on directly or overridden by building a custom ``MatchingConfig``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from devmatch.domain.value_objects.enums import BudgetBand, PriorityLevel, Urgency

# ─── Ticket priority ─────────────────────────────────────────────────

URGENCY_WEIGHTS: dict[Urgency, int] = {
    Urgency.CRITICAL: 40,
    Urgency.HIGH: 30,
    Urgency.MEDIUM: 20,
    Urgency.LOW: 10,
}
URGENCY_FLOOR = 10

# (minimum estimated minutes, points), checked top to bottom
COMPLEXITY_WEIGHTS: tuple[tuple[int, int], ...] = (
    (120, 25),
    (60, 20),
    (30, 15),
)
COMPLEXITY_FLOOR = 10

BUDGET_WEIGHTS: dict[BudgetBand, int] = {
    BudgetBand.OVER_500: 35,
    BudgetBand.FROM_200_TO_500: 25,
    BudgetBand.FROM_100_TO_200: 15,
    BudgetBand.FROM_50_TO_100: 10,
}
BUDGET_FLOOR = 5

# (minimum priority score, level), checked top to bottom
PRIORITY_LEVEL_THRESHOLDS: tuple[tuple[int, PriorityLevel], ...] = (
    (85, PriorityLevel.CRITICAL),
    (65, PriorityLevel.HIGH),
    (45, PriorityLevel.MEDIUM),
)

# ─── Developer match ─────────────────────────────────────────────────

SKILL_MATCH_WEIGHT = 0.5
AVAILABILITY_WEIGHT = 0.3
RATING_WEIGHT = 0.2

EXCELLENT_MATCH_THRESHOLD = 80
GOOD_MATCH_THRESHOLD = 60
FAIR_MATCH_THRESHOLD = 40
POOR_MATCH_THRESHOLD = 20

ONLINE_AVAILABILITY_SCORE = 100
OFFLINE_AVAILABILITY_SCORE = 70
UNAVAILABLE_AVAILABILITY_SCORE = 0

DEFAULT_RATING_SCORE = 50
RATING_MULTIPLIER = 20
MAX_RATING_SCORE = 100

STRONG_SKILL_MATCH_PERCENT = 75
GOOD_SKILL_MATCH_PERCENT = 50

HIGHLY_RATED_THRESHOLD = 4.5
WELL_RATED_THRESHOLD = 4.0


@dataclass(frozen=True)
class PriorityWeights:
    # (key, points) pairs; TicketPrioritizer turns them into lookup dicts
    urgency: tuple[tuple[Urgency, int], ...] = tuple(URGENCY_WEIGHTS.items())
    urgency_floor: int = URGENCY_FLOOR
    complexity: tuple[tuple[int, int], ...] = COMPLEXITY_WEIGHTS
    complexity_floor: int = COMPLEXITY_FLOOR
    budget: tuple[tuple[BudgetBand, int], ...] = tuple(BUDGET_WEIGHTS.items())
    budget_floor: int = BUDGET_FLOOR
    levels: tuple[tuple[int, PriorityLevel], ...] = PRIORITY_LEVEL_THRESHOLDS
    level_floor: PriorityLevel = PriorityLevel.LOW


@dataclass(frozen=True)
class MatchWeights:
    skill_match: float = SKILL_MATCH_WEIGHT
    availability: float = AVAILABILITY_WEIGHT
    rating: float = RATING_WEIGHT


@dataclass(frozen=True)
class MatchThresholds:
    excellent: int = EXCELLENT_MATCH_THRESHOLD
    good: int = GOOD_MATCH_THRESHOLD
    fair: int = FAIR_MATCH_THRESHOLD
    poor: int = POOR_MATCH_THRESHOLD


@dataclass(frozen=True)
class AvailabilityScores:
    online: int = ONLINE_AVAILABILITY_SCORE
    offline: int = OFFLINE_AVAILABILITY_SCORE
    unavailable: int = UNAVAILABLE_AVAILABILITY_SCORE


@dataclass(frozen=True)
class RatingScale:
    default_score: int = DEFAULT_RATING_SCORE
    multiplier: int = RATING_MULTIPLIER
    max_score: int = MAX_RATING_SCORE
    highly_rated: float = HIGHLY_RATED_THRESHOLD
    well_rated: float = WELL_RATED_THRESHOLD


@dataclass(frozen=True)
class MatchingConfig:
    """Everything the engine needs besides its inputs."""

    priority: PriorityWeights = field(default_factory=PriorityWeights)
    weights: MatchWeights = field(default_factory=MatchWeights)
    thresholds: MatchThresholds = field(default_factory=MatchThresholds)
    availability: AvailabilityScores = field(default_factory=AvailabilityScores)
    rating: RatingScale = field(default_factory=RatingScale)
    strong_skill_percent: int = STRONG_SKILL_MATCH_PERCENT
    good_skill_percent: int = GOOD_SKILL_MATCH_PERCENT


DEFAULT_CONFIG = MatchingConfig()
