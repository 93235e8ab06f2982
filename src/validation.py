"""Consistency checks for family tree data. Reports only, never repairs."""

from collections import Counter

import networkx as nx

from graph import PARENT_OF
from models import ALIVE
from store import EntityStore

# Youngest plausible age of a parent at a child's birth
MIN_PARENT_AGE = 12


def validate_graph(G: nx.DiGraph) -> list[str]:
    """
    Validate the family tree graph for:
    - Cycles in parent-child relationships
    - Impossible ages (child born before parent, very young parents)
    - Death before birth

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    parent_edges = [
        (u, v) for u, v, d in G.edges(data=True) if d.get("relationship_type") == PARENT_OF
    ]
    parent_graph = nx.DiGraph(parent_edges)

    try:
        cycle = nx.find_cycle(parent_graph, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for parent, child in parent_edges:
        parent_data = G.nodes[parent]
        child_data = G.nodes[child]

        parent_birth = parent_data.get("birth_year")
        child_birth = child_data.get("birth_year")
        if parent_birth is None or child_birth is None:
            continue

        if child_birth < parent_birth:
            warnings.append(
                f"Impossible: {child_data.get('person_name')} born before parent "
                f"{parent_data.get('person_name')}"
            )
        elif child_birth - parent_birth < MIN_PARENT_AGE:
            warnings.append(
                f"Suspicious: {parent_data.get('person_name')} was less than {MIN_PARENT_AGE} "
                f"years old when {child_data.get('person_name')} was born"
            )

    for _, data in G.nodes(data=True):
        birth = data.get("birth_year")
        death = data.get("death_year")

        if birth is not None and death is not None and death != ALIVE and death < birth:
            warnings.append(f"Impossible: {data.get('person_name')} died before being born")

    return warnings


def find_duplicate_links(store: EntityStore) -> list[tuple[int, int]]:
    """Return (parent, child) pairs linked more than once, in store order."""
    duplicates = []
    for parent_index, person in enumerate(store):
        counts = Counter(person.children)
        for child_index in dict.fromkeys(person.children):
            if counts[child_index] > 1:
                duplicates.append((parent_index, child_index))
    return duplicates
