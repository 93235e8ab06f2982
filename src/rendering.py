"""ASCII rendering of a family tree."""

import logging

from store import EntityStore

logger = logging.getLogger(__name__)

LAST_BRANCH = "\\---"
BRANCH = "|---"
LAST_INDENT = "   "
INDENT = "|  "


def format_line(store: EntityStore, index: int, prefix: str, is_last: bool, generation: int) -> str:
    """Format one person line, e.g. '   |--- [Gen 2] King Edward VII (b. 1841, d. 1910)'."""
    person = store.get(index)
    branch = (LAST_BRANCH if is_last else BRANCH) if prefix else ""
    return f"{prefix}{branch} [Gen {generation}] {person.describe()}"


def iter_tree_lines(store: EntityStore, root_index: int):
    """
    Yield the lines of the tree rooted at ``root_index``, depth first.

    The root is generation 1. Children are visited in the order they were
    linked. A child that is already on the path from the root is skipped, so
    cyclic data still terminates.
    """
    # (index, prefix, is_last, generation, path from the root)
    stack = [(root_index, "", True, 1, (root_index,))]
    while stack:
        index, prefix, is_last, generation, path = stack.pop()
        yield format_line(store, index, prefix, is_last, generation)

        children = store.get(index).children
        child_prefix = prefix + (LAST_INDENT if is_last else INDENT)
        pending = []
        for position, child_index in enumerate(children):
            if not store.is_valid_index(child_index):
                continue
            if child_index in path:
                logger.warning(
                    "Skipping cyclic link %d -> %d while rendering", index, child_index
                )
                continue
            child_is_last = position == len(children) - 1
            pending.append(
                (child_index, child_prefix, child_is_last, generation + 1, path + (child_index,))
            )
        stack.extend(reversed(pending))


def render_tree(store: EntityStore, root_index: int) -> str:
    """Render the tree below ``root_index``; an invalid root yields a diagnostic line."""
    if not store.is_valid_index(root_index):
        logger.warning("Cannot render tree from invalid root index %d", root_index)
        return f"[Invalid root index: {root_index}]"
    return "\n".join(iter_tree_lines(store, root_index))
