"""Developer entity — a candidate helper for tickets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Developer:
    id: str
    name: str = ""
    skills: tuple[str, ...] = ()
    availability: bool = False
    online: bool = False
    rating: float | None = None  # None = not rated yet, 0.0 = rated zero
    category: str | None = None

    def has_rating(self) -> bool:
        return self.rating is not None
