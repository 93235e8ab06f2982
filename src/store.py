"""Index-addressed person store and parent/child linkage."""

import logging
from collections.abc import Iterator

from errors import OutOfRangeError
from models import ALIVE, Person

logger = logging.getLogger(__name__)


class EntityStore:
    """
    Append-only sequence of persons.

    A person's identity is its position in the store: indices are dense,
    zero-based, assigned on append and never reused. Parent/child links are
    plain integer indices held in each parent's ``children`` list.
    """

    def __init__(self):
        self._people: list[Person] = []

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def size(self) -> int:
        return len(self._people)

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._people)

    def append(self, name: str, birth_year: int, death_year: int = ALIVE) -> int:
        """Add a new person at the end of the store and return its index."""
        self._people.append(Person(name, birth_year, death_year))
        return len(self._people) - 1

    def get(self, index: int) -> Person:
        if not self.is_valid_index(index):
            raise OutOfRangeError(index, len(self._people))
        return self._people[index]

    def clear(self):
        self._people.clear()

    def connect(self, parent_index: int, child_index: int):
        """
        Make ``child_index`` a child of ``parent_index``.

        Does nothing when either index is outside the store. Duplicate links
        are not detected.
        """
        if not (self.is_valid_index(parent_index) and self.is_valid_index(child_index)):
            logger.debug(
                "Ignoring link %s -> %s (store holds %d persons)",
                parent_index,
                child_index,
                len(self._people),
            )
            return
        self._people[parent_index].add_child(child_index)
