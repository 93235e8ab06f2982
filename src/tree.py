"""Family tree controller: owns the store and tracks its persistence state."""

import logging
from enum import Enum
from pathlib import Path

import networkx as nx

from errors import FamilyTreeError, InvalidStateError, OutOfRangeError
from generations import compute_generations
from graph import build_graph, get_descendant_subgraph
from models import ALIVE, Person
from persistence import load_store, save_store
from rendering import render_tree
from seed import populate
from store import EntityStore

logger = logging.getLogger(__name__)


class TreeState(Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    SEEDED = "seeded"
    PERSISTED = "persisted"


# state -> states reachable from it
TRANSITIONS = {
    TreeState.UNINITIALIZED: {TreeState.LOADED, TreeState.SEEDED},
    TreeState.LOADED: {TreeState.SEEDED, TreeState.PERSISTED},
    TreeState.SEEDED: {TreeState.SEEDED, TreeState.PERSISTED},
    TreeState.PERSISTED: set(),
}


class FamilyTree:
    """
    The operations the menu layer works with.

    Every failure is raised to the caller; nothing here exits the process.
    """

    def __init__(self):
        self._store = EntityStore()
        self.state = TreeState.UNINITIALIZED

    @classmethod
    def open(cls, path: Path) -> "FamilyTree":
        """Load ``path``, falling back to the default data if that fails."""
        tree = cls()
        try:
            tree.load(path)
        except FamilyTreeError as exc:
            logger.warning("Could not load file: %s", exc)
            tree.reset_to_default()
        return tree

    def _transition(self, new_state: TreeState):
        if new_state not in TRANSITIONS[self.state]:
            raise InvalidStateError(f"Cannot move from {self.state.value} to {new_state.value}")
        self.state = new_state

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self, path: Path):
        """Replace the store with the contents of ``path``; unchanged on failure."""
        if TreeState.LOADED not in TRANSITIONS[self.state]:
            raise InvalidStateError(f"Cannot load in state {self.state.value}")
        store = load_store(path)
        self._store = store
        self._transition(TreeState.LOADED)

    def save(self, path: Path):
        if TreeState.PERSISTED not in TRANSITIONS[self.state]:
            raise InvalidStateError(f"Cannot save in state {self.state.value}")
        save_store(self._store, path)
        self._transition(TreeState.PERSISTED)

    def reset_to_default(self):
        """Discard every change and rebuild the default data."""
        self._transition(TreeState.SEEDED)
        self._store.clear()
        populate(self._store)
        logger.info("Restored default data (%d persons)", self._store.size())

    # ------------------------------------------------------------------
    # Store operations
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._store.size()

    def add_person(self, name: str, birth_year: int, death_year: int = ALIVE) -> int:
        return self._store.append(name, birth_year, death_year)

    def connect_parent_child(self, parent_index: int, child_index: int):
        self._store.connect(parent_index, child_index)

    def get_person(self, index: int) -> Person:
        return self._store.get(index)

    def compute_generations(self, root_index: int) -> list[list[int]]:
        return compute_generations(self._store, root_index)

    def render(self, root_index: int) -> str:
        return render_tree(self._store, root_index)

    def graph(self, root_index: int | None = None) -> nx.DiGraph:
        """The whole store as a graph, or only the tree below ``root_index``."""
        G = build_graph(self._store)
        if root_index is None:
            return G
        if not self._store.is_valid_index(root_index):
            raise OutOfRangeError(root_index, self._store.size())
        return get_descendant_subgraph(G, root_index)

    @property
    def store(self) -> EntityStore:
        return self._store
