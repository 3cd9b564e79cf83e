"""Request bodies for the matching endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from devmatch.adapters.records.mapper import developer_from_record, ticket_from_record
from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.ticket import Ticket


class TicketIn(BaseModel):
    id: str | int
    title: str | None = ""
    description: str | None = ""
    technical_area: list[str] | None = None
    urgency: str | None = None
    estimated_duration: int | None = None
    budget_range: str | None = None
    status: str | None = None
    client_id: str | None = None

    def to_entity(self) -> Ticket:
        return ticket_from_record(self.model_dump())


class DeveloperIn(BaseModel):
    id: str | int
    name: str | None = ""
    skills: list[str] | None = None
    # Either a plain flag or a schedule object such as {"days": [...], "hours": "..."}
    availability: bool | dict[str, Any] | None = False
    online: bool | None = False
    # Out-of-range ratings are clamped when scored
    rating: float | None = None
    category: str | None = None

    def to_entity(self) -> Developer:
        return developer_from_record(self.model_dump())


class RankRequest(BaseModel):
    ticket: TicketIn
    developers: list[DeveloperIn] = Field(default_factory=list)
    expand_search: bool = False


class BatchRequest(BaseModel):
    tickets: list[TicketIn] = Field(default_factory=list)
    developers: list[DeveloperIn] = Field(default_factory=list)
