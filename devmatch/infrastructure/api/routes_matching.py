"""Matching endpoints — rank developers for one ticket or a whole batch."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from devmatch.application.use_cases.batch_matching import BatchMatchingOrchestrator
from devmatch.application.use_cases.matching_insights import (
    MatchingInsights,
    summarize_matching,
)
from devmatch.application.use_cases.rank_ticket import MatchRanker
from devmatch.domain.entities.match import DeveloperMatch, TicketWithMatches
from devmatch.domain.policies.match_quality import classify_match
from devmatch.domain.value_objects.weights import MatchingConfig
from devmatch.infrastructure.api.dependencies import (
    get_batch_orchestrator,
    get_match_ranker,
    get_matching_config,
)
from devmatch.infrastructure.api.schemas import BatchRequest, RankRequest

router = APIRouter(prefix="/matching", tags=["matching"])


# Plain ``def`` handlers: scoring is CPU-bound, FastAPI runs them in its threadpool.
@router.post("/rank")
def rank_ticket(
    body: RankRequest,
    ranker: MatchRanker = Depends(get_match_ranker),
    config: MatchingConfig = Depends(get_matching_config),
):
    """Rank developers for a single ticket (no fallback when nobody qualifies)."""
    result = ranker.rank(
        body.ticket.to_entity(),
        [d.to_entity() for d in body.developers],
        expand_search=body.expand_search,
    )
    return {"status": "ok", **_serialize_result(result, config)}


@router.post("/batch")
def match_batch(
    body: BatchRequest,
    orchestrator: BatchMatchingOrchestrator = Depends(get_batch_orchestrator),
    config: MatchingConfig = Depends(get_matching_config),
):
    """Prioritize all tickets and rank developers for each of them."""
    results = orchestrator.process_batch(
        [t.to_entity() for t in body.tickets],
        [d.to_entity() for d in body.developers],
    )
    insights = summarize_matching(results, config.thresholds)

    return {
        "status": "ok",
        "total": len(results),
        "results": [_serialize_result(r, config) for r in results],
        "insights": _serialize_insights(insights),
    }


def _serialize_match(m: DeveloperMatch, config: MatchingConfig) -> dict:
    return {
        "developer_id": m.developer.id,
        "developer_name": m.developer.name,
        "match_score": m.match_score,
        "match_quality": classify_match(m.match_score, config.thresholds).value,
        "match_reasons": list(m.match_reasons),
        "skill_match_percent": m.skill_match_percent,
        "availability_score": m.availability_score,
        "rating_score": m.rating_score,
        "matching_skills": list(m.matching_skills),
    }


def _serialize_result(r: TicketWithMatches, config: MatchingConfig) -> dict:
    return {
        "ticket_id": r.ticket.id,
        "title": r.ticket.title,
        "status": r.ticket.status,
        "priority_score": r.priority_score,
        "priority_level": r.priority_level.value,
        "matches": [_serialize_match(m, config) for m in r.matches],
    }


def _serialize_insights(i: MatchingInsights) -> dict:
    return {
        "total_tickets": i.total_tickets,
        "tickets_by_level": {level.value: count for level, count in i.tickets_by_level.items()},
        "tickets_with_good_matches": i.tickets_with_good_matches,
        "critical_without_match": i.critical_without_match,
        "critical_ticket_ids": [r.ticket.id for r in i.critical_tickets],
        "excellent_high_priority_ids": [r.ticket.id for r in i.excellent_high_priority],
    }
