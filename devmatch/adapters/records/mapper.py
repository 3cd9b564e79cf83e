"""Map backend-style records (dict rows) onto domain entities.

Rows coming from the help-request store use snake_case keys
(``technical_area``, ``estimated_duration``, ``budget_range``...). Optional
fields may be missing; mapping never fails on them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from devmatch.adapters.csv_loader.normalizer import (
    clean_string,
    parse_bool,
    parse_int,
    parse_list,
    parse_optional_float,
)
from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.ticket import Ticket
from devmatch.domain.value_objects.enums import BudgetBand, Urgency


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    """Value of the first key present with a non-None value."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def ticket_from_record(record: Mapping[str, Any]) -> Ticket:
    duration = parse_int(_first(record, "estimated_duration", "estimated_duration_minutes"))
    return Ticket(
        id=clean_string(_first(record, "id", "ticket_id")) or "",
        title=clean_string(record.get("title")) or "",
        description=clean_string(record.get("description")) or "",
        technical_areas=parse_list(_first(record, "technical_area", "technical_areas")),
        urgency=Urgency.parse(clean_string(record.get("urgency"))),
        estimated_duration_minutes=max(0, duration),
        budget_range=BudgetBand.parse(clean_string(record.get("budget_range"))),
        status=clean_string(record.get("status")),
        client_id=clean_string(record.get("client_id")),
    )


def developer_from_record(record: Mapping[str, Any]) -> Developer:
    # Joined profile rows nest the display name under "profiles"
    profile = record.get("profiles") or {}
    name = clean_string(record.get("name"))
    if name is None and isinstance(profile, Mapping):
        name = clean_string(profile.get("name"))

    return Developer(
        id=clean_string(_first(record, "id", "developer_id")) or "",
        name=name or "",
        skills=parse_list(record.get("skills")),
        availability=parse_bool(record.get("availability")),
        online=parse_bool(record.get("online")),
        rating=parse_optional_float(record.get("rating")),
        category=clean_string(record.get("category")),
    )
