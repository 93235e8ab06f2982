"""NetworkX graph building and operations."""

import networkx as nx

from store import EntityStore

PARENT_OF = "PARENT_OF"


def build_graph(store: EntityStore) -> nx.DiGraph:
    """Build a NetworkX directed graph from the store, one node per index."""
    G = nx.DiGraph()

    # Note: use 'person_name' instead of 'name' to avoid conflict with pydot
    for index, person in enumerate(store):
        G.add_node(
            index,
            person_name=person.name,
            birth_year=person.birth_year,
            death_year=person.death_year,
        )

    # Repeated links collapse into a single edge
    for index, person in enumerate(store):
        for child_index in person.children:
            G.add_edge(index, child_index, relationship_type=PARENT_OF)

    return G


def get_descendant_subgraph(G: nx.DiGraph, root: int) -> nx.DiGraph:
    """
    Extract the part of the tree that hangs below ``root``.

    Spouses who married into the line have no parent link from it and are
    left out, matching what the ASCII tree shows for the same root.

    Args:
        G: The full graph
        root: The person index to start from

    Returns:
        The induced subgraph on ``root`` and its descendants
    """
    if root not in G:
        raise ValueError(f"Person index {root} not found in graph")

    nodes = nx.descendants(G, root) | {root}
    return G.subgraph(nodes).copy()
