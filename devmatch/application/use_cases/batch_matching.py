"""BatchMatchingOrchestrator — prioritize many tickets and rank developers for each."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from devmatch.application.use_cases.rank_ticket import sort_matches
from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.match import TicketPriorityScore, TicketWithMatches
from devmatch.domain.entities.ticket import Ticket
from devmatch.domain.policies.developer_match import DeveloperTicketMatcher
from devmatch.domain.policies.match_quality import is_qualifying
from devmatch.domain.policies.ticket_priority import TicketPrioritizer
from devmatch.domain.value_objects.weights import MatchThresholds

logger = logging.getLogger(__name__)


class BatchMatchingOrchestrator:
    """Batch entry point.

    Pipeline:
    1. Prioritize every ticket
    2. Sort tickets by priority score (highest first, stable)
    3. Match every developer against each ticket
    4. Keep matches at or above FAIR; if none qualify, fall back to the
       full match list so the ticket still gets candidates
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

    def process_batch(
        self,
        tickets: Sequence[Ticket],
        developers: Sequence[Developer],
    ) -> list[TicketWithMatches]:
        prioritized = sorted(
            (self._prioritizer.prioritize(t) for t in tickets),
            key=lambda p: p.priority_score,
            reverse=True,
        )

        results = [self._match_ticket(p, developers) for p in prioritized]

        fallbacks = sum(
            1 for r in results
            if r.matches and not is_qualifying(r.matches[0].match_score, self._thresholds)
        )
        logger.info(
            "Batch matching complete: %d tickets x %d developers (%d fell back to unfiltered matches)",
            len(results), len(developers), fallbacks,
        )
        return results

    def _match_ticket(
        self,
        priority: TicketPriorityScore,
        developers: Sequence[Developer],
    ) -> TicketWithMatches:
        ticket = priority.ticket
        matches = [self._matcher.match(dev, ticket) for dev in developers]
        qualifying = [m for m in matches if is_qualifying(m.match_score, self._thresholds)]

        if qualifying:
            final = sort_matches(qualifying)
        else:
            if matches:
                logger.debug("Ticket %s: no match reaches FAIR, expanding search", ticket.id)
            final = sort_matches(matches)

        return TicketWithMatches(
            ticket=ticket,
            priority_score=priority.priority_score,
            priority_level=priority.priority_level,
            matches=final,
        )
