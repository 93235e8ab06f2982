"""Data classes for family tree entities."""

from dataclasses import dataclass, field

# Death year sentinel for a living person (or an unknown death year)
ALIVE = -1


@dataclass
class Person:
    name: str
    birth_year: int
    death_year: int = ALIVE
    children: list[int] = field(default_factory=list)  # store indices, display order

    @property
    def is_alive(self) -> bool:
        return self.death_year == ALIVE

    @property
    def lifespan(self) -> str:
        """Short life dates, e.g. 'b. 1819, d. 1901' or 'b. 1948'."""
        if self.is_alive:
            return f"b. {self.birth_year}"
        return f"b. {self.birth_year}, d. {self.death_year}"

    def add_child(self, child_index: int):
        self.children.append(child_index)

    def describe(self) -> str:
        return f"{self.name} ({self.lifespan})"
