"""Ticket entity — a client's request for developer help."""

from dataclasses import dataclass

from devmatch.domain.value_objects.enums import BudgetBand, Urgency


@dataclass(frozen=True)
class Ticket:
    id: str
    title: str = ""
    description: str = ""
    technical_areas: tuple[str, ...] = ()
    urgency: Urgency = Urgency.MEDIUM
    estimated_duration_minutes: int = 0
    budget_range: BudgetBand = BudgetBand.UNKNOWN
    status: str | None = None
    client_id: str | None = None

    def is_open(self) -> bool:
        """Tickets still waiting for a developer (or with no status yet)."""
        return self.status is None or self.status in OPEN_STATUSES


OPEN_STATUSES = frozenset({"pending", "matching"})
