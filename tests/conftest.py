"""Pytest configuration and shared fixtures."""

import pytest

from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.ticket import Ticket
from devmatch.domain.value_objects.enums import BudgetBand, Urgency


@pytest.fixture
def alice():
    """Full-stack JS developer, online, highly rated."""
    return Developer(
        id="dev-alice", name="Alice", skills=("React", "Node.js", "TypeScript"),
        availability=True, online=True, rating=4.8, category="frontend",
    )


@pytest.fixture
def bob():
    """Python developer, available but offline, well rated."""
    return Developer(
        id="dev-bob", name="Bob", skills=("Python", "Django"),
        availability=True, online=False, rating=4.2, category="backend",
    )


@pytest.fixture
def carol():
    """React developer who is online but not taking work, never rated."""
    return Developer(
        id="dev-carol", name="Carol", skills=("React",),
        availability=False, online=True, rating=None,
    )


@pytest.fixture
def dave():
    """No skills, unavailable, rated zero."""
    return Developer(id="dev-dave", name="Dave", rating=0.0)


@pytest.fixture
def developers(alice, bob, carol, dave):
    return [alice, bob, carol, dave]


@pytest.fixture
def react_ticket():
    """High urgency React/Node ticket: 30 + 20 + 25 = 75 (HIGH)."""
    return Ticket(
        id="t-react", title="Fix hydration errors",
        technical_areas=("React", "Node.js"),
        urgency=Urgency.HIGH, estimated_duration_minutes=90,
        budget_range=BudgetBand.FROM_200_TO_500, status="pending",
    )
