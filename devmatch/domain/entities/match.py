"""Match result value objects produced by the engine."""

from __future__ import annotations

from dataclasses import dataclass

from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.ticket import Ticket
from devmatch.domain.value_objects.enums import PriorityLevel


@dataclass(frozen=True)
class TicketPriorityScore:
    ticket: Ticket
    priority_score: int
    priority_level: PriorityLevel


@dataclass(frozen=True)
class DeveloperMatch:
    developer: Developer
    match_score: int
    match_reasons: tuple[str, ...]
    skill_match_percent: int
    availability_score: int
    rating_score: int
    matching_skills: tuple[str, ...] = ()


@dataclass(frozen=True)
class TicketWithMatches:
    ticket: Ticket
    priority_score: int
    priority_level: PriorityLevel
    matches: tuple[DeveloperMatch, ...] = ()

    @property
    def top_match(self) -> DeveloperMatch | None:
        return self.matches[0] if self.matches else None
