"""FastAPI dependency injection — wires the engine into the endpoints."""

from __future__ import annotations

from fastapi import Depends

from devmatch.application.use_cases.batch_matching import BatchMatchingOrchestrator
from devmatch.application.use_cases.rank_ticket import MatchRanker
from devmatch.domain.policies.developer_match import DeveloperTicketMatcher
from devmatch.domain.policies.ticket_priority import TicketPrioritizer
from devmatch.domain.value_objects.weights import DEFAULT_CONFIG, MatchingConfig


def get_matching_config() -> MatchingConfig:
    return DEFAULT_CONFIG


def get_match_ranker(config: MatchingConfig = Depends(get_matching_config)) -> MatchRanker:
    return MatchRanker(
        prioritizer=TicketPrioritizer(config.priority),
        matcher=DeveloperTicketMatcher(config),
        thresholds=config.thresholds,
    )


def get_batch_orchestrator(
    config: MatchingConfig = Depends(get_matching_config),
) -> BatchMatchingOrchestrator:
    return BatchMatchingOrchestrator(
        prioritizer=TicketPrioritizer(config.priority),
        matcher=DeveloperTicketMatcher(config),
        thresholds=config.thresholds,
    )
