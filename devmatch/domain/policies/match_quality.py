"""Match quality bands for a developer match score."""

from devmatch.domain.value_objects.enums import MatchQuality
from devmatch.domain.value_objects.weights import MatchThresholds

_DEFAULT_THRESHOLDS = MatchThresholds()


def classify_match(score: int, thresholds: MatchThresholds = _DEFAULT_THRESHOLDS) -> MatchQuality:
    if score >= thresholds.excellent:
        return MatchQuality.EXCELLENT
    if score >= thresholds.good:
        return MatchQuality.GOOD
    if score >= thresholds.fair:
        return MatchQuality.FAIR
    return MatchQuality.POOR


def is_qualifying(score: int, thresholds: MatchThresholds = _DEFAULT_THRESHOLDS) -> bool:
    """True when the score reaches the FAIR threshold."""
    return score >= thresholds.fair
