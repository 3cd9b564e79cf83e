"""CSV-backed implementations of the ticket and developer source ports."""

from __future__ import annotations

from pathlib import Path

from devmatch.adapters.csv_loader.loader import load_developers, load_tickets
from devmatch.application.ports.developer_source import DeveloperSource
from devmatch.application.ports.ticket_source import TicketSource
from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.ticket import Ticket


class CsvTicketSource(TicketSource):
    def __init__(self, path: Path | str):
        self._path = Path(path)

    def get_all(self) -> list[Ticket]:
        return load_tickets(self._path)


class CsvDeveloperSource(DeveloperSource):
    def __init__(self, path: Path | str):
        self._path = Path(path)

    def get_all(self) -> list[Developer]:
        return load_developers(self._path)
