"""Domain enums — pure Python, no external dependencies."""

from __future__ import annotations

from enum import Enum


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> Urgency:
        """Map a raw urgency string onto the enum.

        Absent or blank values default to MEDIUM; anything unrecognized
        becomes UNKNOWN (weighted like LOW).
        """
        if value is None:
            return cls.MEDIUM
        key = str(value).strip().lower()
        if not key:
            return cls.MEDIUM
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


class BudgetBand(str, Enum):
    UNDER_50 = "<$50"
    FROM_50_TO_100 = "$50-$100"
    FROM_100_TO_200 = "$100-$200"
    FROM_200_TO_500 = "$200-$500"
    OVER_500 = "$500+"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> BudgetBand:
        """Exact match on the canonical band or the help-request form label."""
        if value is None:
            return cls.UNKNOWN
        return _BUDGET_LABELS.get(str(value), cls.UNKNOWN)


# Canonical values plus the labels shown on the help-request form
_BUDGET_LABELS: dict[str, BudgetBand] = {
    **{band.value: band for band in BudgetBand if band is not BudgetBand.UNKNOWN},
    "Under $50": BudgetBand.UNDER_50,
    "$50 - $100": BudgetBand.FROM_50_TO_100,
    "$100 - $200": BudgetBand.FROM_100_TO_200,
    "$200 - $500": BudgetBand.FROM_200_TO_500,
}


class PriorityLevel(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SkillMatchTier(str, Enum):
    STRONG = "strong"
    GOOD = "good"
    PARTIAL = "partial"
    NONE = "none"


class MatchQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
