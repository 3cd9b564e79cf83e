"""Port interface for reading help-request tickets."""

from abc import ABC, abstractmethod

from devmatch.domain.entities.ticket import Ticket


class TicketSource(ABC):
    @abstractmethod
    def get_all(self) -> list[Ticket]:
        ...

    def get_open_tickets(self) -> list[Ticket]:
        """Tickets still looking for a developer."""
        return [t for t in self.get_all() if t.is_open()]
