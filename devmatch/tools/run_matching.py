"""Run the matching engine over CSV exports and print the results as JSON.

Usage:
    python -m devmatch.tools.run_matching
    python -m devmatch.tools.run_matching --tickets data/tickets.csv --developers data/developers.csv
    python -m devmatch.tools.run_matching --ticket-id 42 --expand-search
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from devmatch.adapters.csv_loader.sources import CsvDeveloperSource, CsvTicketSource
from devmatch.application.use_cases.rank_ticket import MatchRanker
from devmatch.application.use_cases.refresh_matching import RefreshMatchingUseCase
from devmatch.config import settings
from devmatch.domain.entities.match import TicketWithMatches

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def _result_to_dict(r: TicketWithMatches) -> dict:
    return {
        "ticket_id": r.ticket.id,
        "title": r.ticket.title,
        "priority_score": r.priority_score,
        "priority_level": r.priority_level.value,
        "matches": [
            {
                "developer_id": m.developer.id,
                "developer_name": m.developer.name,
                "match_score": m.match_score,
                "match_reasons": list(m.match_reasons),
            }
            for m in r.matches
        ],
    }


def run(tickets_path: Path, developers_path: Path, ticket_id: str | None, expand_search: bool) -> dict:
    ticket_source = CsvTicketSource(tickets_path)
    developer_source = CsvDeveloperSource(developers_path)

    if ticket_id is not None:
        ticket = next((t for t in ticket_source.get_all() if t.id == ticket_id), None)
        if ticket is None:
            raise LookupError(f"Ticket {ticket_id} not found in {tickets_path}")
        result = MatchRanker().rank(ticket, developer_source.get_all(), expand_search=expand_search)
        return {"status": "ok", "results": [_result_to_dict(result)]}

    outcome = RefreshMatchingUseCase(ticket_source, developer_source).execute()
    if outcome.error:
        return {"status": "error", "error": outcome.error, "results": []}
    return {"status": "ok", "results": [_result_to_dict(r) for r in outcome.results]}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank developers for open help-request tickets")
    parser.add_argument("--tickets", default=settings.tickets_csv_path, help="Tickets CSV path")
    parser.add_argument("--developers", default=settings.developers_csv_path, help="Developers CSV path")
    parser.add_argument("--ticket-id", default=None, help="Rank a single ticket instead of the batch")
    parser.add_argument(
        "--expand-search",
        action="store_true",
        help="Keep developers below the FAIR threshold (single ticket only)",
    )
    args = parser.parse_args(argv)
    if args.expand_search and args.ticket_id is None:
        parser.error("--expand-search only applies together with --ticket-id")

    tickets_path = Path(args.tickets)
    developers_path = Path(args.developers)
    for path in (tickets_path, developers_path):
        if not path.exists():
            logger.error("File not found: %s", path)
            return 1

    try:
        payload = run(tickets_path, developers_path, args.ticket_id, args.expand_search)
    except (LookupError, ValueError) as e:
        logger.error("%s", e)
        return 1

    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0 if payload["status"] == "ok" else 1


if __name__ == "__main__":
    sys.exit(main())
