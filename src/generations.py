"""Breadth-first generation layering."""

from collections import deque

from store import EntityStore


def compute_generations(store: EntityStore, root_index: int) -> list[list[int]]:
    """
    Group the persons reachable from ``root_index`` by generation.

    Returns a list where ``result[g]`` holds the indices at BFS depth ``g``
    (the root alone is depth 0), in discovery order. A person reachable along
    two parent paths is placed only in the generation that reaches it first.
    An out-of-range root yields an empty list.
    """
    result: list[list[int]] = []
    if not store.is_valid_index(root_index):
        return result

    visited = [False] * store.size()
    queue = deque([(root_index, 0)])
    visited[root_index] = True

    while queue:
        current, generation = queue.popleft()
        if generation >= len(result):
            result.append([])
        result[generation].append(current)

        for child_index in store.get(current).children:
            if store.is_valid_index(child_index) and not visited[child_index]:
                visited[child_index] = True
                queue.append((child_index, generation + 1))

    return result


def describe_generations(layers: list[list[int]]) -> list[str]:
    # Generations are numbered from 1 for display
    return [
        f"Generation #{generation + 1} has {len(members)} person(s)."
        for generation, members in enumerate(layers)
    ]
