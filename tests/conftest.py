"""Shared fixtures.

The default dataset (seed.py) is four generations of Queen Victoria's line;
index 0 is the root.
"""

import pytest

from seed import build_default_store
from store import EntityStore
from tree import FamilyTree


@pytest.fixture
def seed_store():
    """A fresh copy of the default dataset."""
    return build_default_store()


@pytest.fixture
def small_store():
    """
    A three-generation store:

        0 Grandparent -> 1 Parent -> 3 Child
                      -> 2 Aunt
    """
    store = EntityStore()
    store.append("Grandparent", 1900, 1980)
    store.append("Parent", 1930)
    store.append("Aunt", 1932, 2001)
    store.append("Child", 1960)
    store.connect(0, 1)
    store.connect(0, 2)
    store.connect(1, 3)
    return store


@pytest.fixture
def seeded_tree():
    tree = FamilyTree()
    tree.reset_to_default()
    return tree
