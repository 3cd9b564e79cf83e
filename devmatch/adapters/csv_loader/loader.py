"""CSV loader — reads ticket and developer exports into domain entities."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from devmatch.adapters.csv_loader.normalizer import clean_string, normalize_column_name
from devmatch.adapters.records.mapper import developer_from_record, ticket_from_record
from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.ticket import Ticket

logger = logging.getLogger(__name__)

# Alternative headers seen in exports → canonical record keys
_TICKET_COLUMNS: dict[str, str] = {
    "ticket_id": "id",
    "technical_areas": "technical_area",
    "skills_required": "technical_area",
    "estimated_duration_minutes": "estimated_duration",
    "duration": "estimated_duration",
    "budget": "budget_range",
}

_DEVELOPER_COLUMNS: dict[str, str] = {
    "developer_id": "id",
    "available": "availability",
    "is_online": "online",
    "stars": "rating",
}


def _sniff_dialect(sample: str) -> type[csv.Dialect] | csv.Dialect:
    """Pick the delimiter (comma/semicolon/tab) that dominates the header line."""
    if not sample:
        return csv.get_dialect("excel")

    first_line = sample.splitlines()[0]
    delims = [";", ",", "\t"]
    counts = {d: first_line.count(d) for d in delims}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect

    return csv.get_dialect("excel")


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        List of dicts with normalized column names.

    Raises:
        ValueError: if the file has no header row.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = []
        for raw_row in reader:
            row = {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            rows.append(row)

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def _canonical(row: dict[str, str | None], aliases: dict[str, str]) -> dict[str, str | None]:
    record: dict[str, str | None] = {}
    for key, value in row.items():
        target = aliases.get(key, key)
        if record.get(target) is None:
            record[target] = value
    return record


def load_tickets(file_path: Path) -> list[Ticket]:
    """Load the tickets CSV.

    Expected columns (after normalization):
        id, title, description, technical_area (comma/semicolon/pipe list),
        urgency, estimated_duration, budget_range, status, client_id
    """
    tickets = [
        ticket_from_record(_canonical(row, _TICKET_COLUMNS))
        for row in _read_csv(Path(file_path))
    ]
    logger.info("Parsed %d tickets", len(tickets))
    return tickets


def load_developers(file_path: Path) -> list[Developer]:
    """Load the developers CSV.

    Expected columns (after normalization):
        id, name, skills, availability, online, rating (blank = not rated), category
    """
    developers = [
        developer_from_record(_canonical(row, _DEVELOPER_COLUMNS))
        for row in _read_csv(Path(file_path))
    ]
    logger.info("Parsed %d developers", len(developers))
    return developers
