"""MatchRanker — ranks every developer against a single ticket."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.match import DeveloperMatch, TicketWithMatches
from devmatch.domain.entities.ticket import Ticket
from devmatch.domain.policies.developer_match import DeveloperTicketMatcher
from devmatch.domain.policies.match_quality import is_qualifying
from devmatch.domain.policies.ticket_priority import TicketPrioritizer
from devmatch.domain.value_objects.weights import MatchThresholds

logger = logging.getLogger(__name__)


def sort_matches(matches: Iterable[DeveloperMatch]) -> tuple[DeveloperMatch, ...]:
    """Highest score first; ties keep their input order (``sorted`` is stable)."""
    return tuple(sorted(matches, key=lambda m: m.match_score, reverse=True))


class MatchRanker:
    """Single-ticket entry point.

    Without ``expand_search`` developers scoring below the FAIR threshold are
    dropped. If that leaves nobody, the empty list is returned as is: unlike
    the batch orchestrator there is no fallback to the unfiltered list here.
    """

    def __init__(
        self,
        prioritizer: TicketPrioritizer | None = None,
        matcher: DeveloperTicketMatcher | None = None,
        thresholds: MatchThresholds | None = None,
    ):
        self._prioritizer = prioritizer or TicketPrioritizer()
        self._matcher = matcher or DeveloperTicketMatcher()
        self._thresholds = thresholds or self._matcher.config.thresholds

    def rank(
        self,
        ticket: Ticket,
        developers: Sequence[Developer],
        expand_search: bool = False,
    ) -> TicketWithMatches:
        priority = self._prioritizer.prioritize(ticket)
        matches = [self._matcher.match(dev, ticket) for dev in developers]

        if not expand_search:
            matches = [m for m in matches if is_qualifying(m.match_score, self._thresholds)]

        logger.debug(
            "Ticket %s: priority=%d (%s), %d/%d developers ranked (expand_search=%s)",
            ticket.id, priority.priority_score, priority.priority_level.value,
            len(matches), len(developers), expand_search,
        )

        return TicketWithMatches(
            ticket=ticket,
            priority_score=priority.priority_score,
            priority_level=priority.priority_level,
            matches=sort_matches(matches),
        )
