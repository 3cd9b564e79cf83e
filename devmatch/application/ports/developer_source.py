"""Port interface for reading candidate developers."""

from abc import ABC, abstractmethod

from devmatch.domain.entities.developer import Developer


class DeveloperSource(ABC):
    @abstractmethod
    def get_all(self) -> list[Developer]:
        ...
