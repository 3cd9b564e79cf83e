"""Tests for CSV loader functions and CSV-backed sources."""

import csv
import tempfile
from pathlib import Path

import pytest

from devmatch.adapters.csv_loader.loader import load_developers, load_tickets
from devmatch.adapters.csv_loader.sources import CsvDeveloperSource, CsvTicketSource
from devmatch.domain.value_objects.enums import BudgetBand, Urgency


def _write_csv(rows: list[dict], path: Path, delimiter: str = ",", encoding: str = "utf-8-sig") -> None:
    """Helper to write a test CSV file."""
    if not rows:
        return
    with open(path, "w", encoding=encoding, newline="") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys(), delimiter=delimiter)
        writer.writeheader()
        writer.writerows(rows)


def test_load_tickets_basic():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "tickets.csv"
        _write_csv([
            {
                "ID": "t-1", "Title": "Fix login", "Technical Area": "React, Node.js",
                "Urgency": "High", "Estimated Duration": "90",
                "Budget Range": "$200 - $500", "Status": "pending",
            },
            {
                "ID": "t-2", "Title": "Tune queries", "Technical Area": "Database",
                "Urgency": "", "Estimated Duration": "", "Budget Range": "", "Status": "",
            },
        ], csv_path)

        tickets = load_tickets(csv_path)
        assert len(tickets) == 2
        assert tickets[0].id == "t-1"
        assert tickets[0].technical_areas == ("React", "Node.js")
        assert tickets[0].urgency == Urgency.HIGH
        assert tickets[0].estimated_duration_minutes == 90
        assert tickets[0].budget_range == BudgetBand.FROM_200_TO_500
        assert tickets[1].urgency == Urgency.MEDIUM
        assert tickets[1].estimated_duration_minutes == 0
        assert tickets[1].budget_range == BudgetBand.UNKNOWN
        assert tickets[1].status is None


def test_load_tickets_alternative_headers():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "tickets.csv"
        _write_csv([
            {"Ticket ID": "42", "Technical Areas": "Python|Django", "Duration": "120", "Budget": "$500+"},
        ], csv_path)

        ticket = load_tickets(csv_path)[0]
        assert ticket.id == "42"
        assert ticket.technical_areas == ("Python", "Django")
        assert ticket.estimated_duration_minutes == 120
        assert ticket.budget_range == BudgetBand.OVER_500


def test_load_developers_semicolon_delimited():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "developers.csv"
        _write_csv([
            {"ID": "d-1", "Name": "Alice", "Skills": "React, Node.js", "Availability": "true",
             "Online": "yes", "Rating": "4.8"},
            {"ID": "d-2", "Name": "Bob", "Skills": "", "Availability": "false",
             "Online": "", "Rating": ""},
            {"ID": "d-3", "Name": "Dave", "Skills": "Go", "Availability": "1",
             "Online": "0", "Rating": "0"},
        ], csv_path, delimiter=";")

        devs = load_developers(csv_path)
        assert [d.id for d in devs] == ["d-1", "d-2", "d-3"]
        assert devs[0].skills == ("React", "Node.js")
        assert devs[0].availability is True
        assert devs[0].online is True
        assert devs[0].rating == 4.8
        assert devs[1].skills == ()
        assert devs[1].availability is False
        assert devs[1].rating is None  # blank cell → not rated
        assert devs[2].rating == 0.0  # explicit zero stays zero
        assert devs[2].online is False


def test_load_without_header_raises():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "empty.csv"
        csv_path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="no header row"):
            load_tickets(csv_path)


def test_csv_sources_read_files():
    with tempfile.TemporaryDirectory() as tmpdir:
        tickets_path = Path(tmpdir) / "tickets.csv"
        developers_path = Path(tmpdir) / "developers.csv"
        _write_csv([
            {"ID": "t-1", "Status": "pending"},
            {"ID": "t-2", "Status": "completed"},
        ], tickets_path)
        _write_csv([{"ID": "d-1", "Skills": "React"}], developers_path)

        assert [t.id for t in CsvTicketSource(tickets_path).get_open_tickets()] == ["t-1"]
        assert [d.id for d in CsvDeveloperSource(str(developers_path)).get_all()] == ["d-1"]
