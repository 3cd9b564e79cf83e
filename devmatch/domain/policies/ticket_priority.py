"""TicketPrioritizer — scores how urgently a ticket should be served."""

from __future__ import annotations

from devmatch.domain.entities.match import TicketPriorityScore
from devmatch.domain.entities.ticket import Ticket
from devmatch.domain.value_objects.enums import BudgetBand, PriorityLevel, Urgency
from devmatch.domain.value_objects.weights import PriorityWeights


class TicketPrioritizer:
    """Additive ticket priority from three independent factors.

    Business rules:
      1. Urgency      critical +40, high +30, medium +20, anything else +10.
      2. Complexity   estimated minutes >=120 +25, >=60 +20, >=30 +15, else +10.
      3. Budget       $500+ +35, $200-$500 +25, $100-$200 +15, $50-$100 +10,
                      anything else +5.

    The total therefore lies in [25, 100]. Missing or unknown values fall into
    the lowest bucket of their factor; nothing here raises.
    """

    def __init__(self, weights: PriorityWeights | None = None):
        self._weights = weights or PriorityWeights()
        self._urgency = dict(self._weights.urgency)
        self._budget = dict(self._weights.budget)

    def prioritize(self, ticket: Ticket) -> TicketPriorityScore:
        score = (
            self.urgency_points(ticket.urgency)
            + self.complexity_points(ticket.estimated_duration_minutes)
            + self.budget_points(ticket.budget_range)
        )
        return TicketPriorityScore(
            ticket=ticket,
            priority_score=score,
            priority_level=self.level_for(score),
        )

    def urgency_points(self, urgency: Urgency | None) -> int:
        return self._urgency.get(urgency, self._weights.urgency_floor)

    def complexity_points(self, minutes: int | None) -> int:
        if minutes is None:
            return self._weights.complexity_floor
        for min_minutes, points in self._weights.complexity:
            if minutes >= min_minutes:
                return points
        return self._weights.complexity_floor

    def budget_points(self, band: BudgetBand | None) -> int:
        return self._budget.get(band, self._weights.budget_floor)

    def level_for(self, score: int) -> PriorityLevel:
        for min_score, level in self._weights.levels:
            if score >= min_score:
                return level
        return self._weights.level_floor
