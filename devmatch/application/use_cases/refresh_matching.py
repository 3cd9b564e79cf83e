"""RefreshMatchingUseCase — load open tickets and developers, then batch-match."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from devmatch.application.ports.developer_source import DeveloperSource
from devmatch.application.ports.ticket_source import TicketSource
from devmatch.application.use_cases.batch_matching import BatchMatchingOrchestrator
from devmatch.application.use_cases.matching_insights import (
    MatchingInsights,
    summarize_matching,
)
from devmatch.domain.entities.match import TicketWithMatches
from devmatch.domain.value_objects.weights import MatchThresholds

logger = logging.getLogger(__name__)

NO_DEVELOPERS_ERROR = "No developers available for matching"


@dataclass
class RefreshResult:
    """Outcome of one refresh run."""

    results: list[TicketWithMatches] = field(default_factory=list)
    insights: MatchingInsights | None = None
    error: str | None = None


class RefreshMatchingUseCase:
    """Recompute matches for every open ticket."""

    def __init__(
        self,
        tickets: TicketSource,
        developers: DeveloperSource,
        orchestrator: BatchMatchingOrchestrator | None = None,
        thresholds: MatchThresholds | None = None,
    ):
        self._tickets = tickets
        self._developers = developers
        self._orchestrator = orchestrator or BatchMatchingOrchestrator()
        self._thresholds = thresholds or MatchThresholds()

    def execute(self) -> RefreshResult:
        """Run the batch matcher over the current open tickets.

        Pipeline:
        1. Load developers and open tickets from the sources
        2. Nothing open → empty result; no developers → empty result with error
        3. Batch-match, summarize, and log excellent matches on urgent tickets
        """
        developers = self._developers.get_all()
        tickets = self._tickets.get_open_tickets()
        logger.info("Refreshing matches: %d open tickets, %d developers", len(tickets), len(developers))

        if not tickets:
            return RefreshResult(insights=summarize_matching([], self._thresholds))

        if not developers:
            logger.warning("Ticket matching skipped: %s", NO_DEVELOPERS_ERROR)
            return RefreshResult(
                insights=summarize_matching([], self._thresholds),
                error=NO_DEVELOPERS_ERROR,
            )

        results = self._orchestrator.process_batch(tickets, developers)
        insights = summarize_matching(results, self._thresholds)

        for result in insights.excellent_high_priority:
            logger.info(
                "High priority ticket '%s' has an excellent developer match: %s (%d)",
                result.ticket.title or result.ticket.id,
                result.top_match.developer.name or result.top_match.developer.id,
                result.top_match.match_score,
            )
        if insights.critical_without_match:
            logger.warning(
                "%d critical ticket(s) have no suitable developer match",
                insights.critical_without_match,
            )

        return RefreshResult(results=results, insights=insights)
