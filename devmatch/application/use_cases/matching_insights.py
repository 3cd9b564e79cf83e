"""Summary figures over a batch of ranked tickets."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from devmatch.domain.entities.match import TicketWithMatches
from devmatch.domain.value_objects.enums import PriorityLevel
from devmatch.domain.value_objects.weights import MatchThresholds


@dataclass(frozen=True)
class MatchingInsights:
    total_tickets: int
    tickets_by_level: dict[PriorityLevel, int]
    tickets_with_good_matches: int
    critical_without_match: int
    critical_tickets: tuple[TicketWithMatches, ...] = field(default=())
    excellent_high_priority: tuple[TicketWithMatches, ...] = field(default=())


def summarize_matching(
    results: Sequence[TicketWithMatches],
    thresholds: MatchThresholds | None = None,
) -> MatchingInsights:
    """Count tickets per priority level and flag where good developers are missing.

    - a ticket has a good match when its top match reaches GOOD
    - a critical ticket is "without match" when it has no match at all or
      its top match is below GOOD
    - high/critical tickets whose top match reaches EXCELLENT are worth
      surfacing to the client right away
    """
    thresholds = thresholds or MatchThresholds()

    by_level = {level: 0 for level in PriorityLevel}
    for result in results:
        by_level[result.priority_level] += 1

    def top_score(result: TicketWithMatches) -> int | None:
        top = result.top_match
        return top.match_score if top else None

    good = [r for r in results if r.matches and top_score(r) >= thresholds.good]
    critical = sorted(
        (r for r in results if r.priority_level == PriorityLevel.CRITICAL),
        key=lambda r: r.priority_score,
        reverse=True,
    )
    critical_without = [
        r for r in critical if not r.matches or top_score(r) < thresholds.good
    ]
    excellent = [
        r for r in results
        if r.priority_level in (PriorityLevel.CRITICAL, PriorityLevel.HIGH)
        and r.matches
        and top_score(r) >= thresholds.excellent
    ]

    return MatchingInsights(
        total_tickets=len(results),
        tickets_by_level=by_level,
        tickets_with_good_matches=len(good),
        critical_without_match=len(critical_without),
        critical_tickets=tuple(critical),
        excellent_high_priority=tuple(excellent),
    )
