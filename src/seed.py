"""Built-in starting data: four generations of Queen Victoria's line."""

from store import EntityStore

# (name, birth year, death year) in store order; index 0 is the root
DEFAULT_PEOPLE = [
    ("Queen Victoria", 1819, 1901),
    ("Prince Albert of Saxe-Coburg and Gotha", 1819, 1861),
    ("King Edward VII", 1841, 1910),
    ("Alexandra of Denmark", 1844, 1925),
    ("Victoria, Princess Royal", 1840, 1901),
    ("Frederick III, German Emperor", 1831, 1888),
    ("King George V", 1865, 1936),
    ("Queen Mary of Teck", 1867, 1953),
    ("Wilhelm II, German Emperor", 1859, 1941),
    ("Augusta Victoria of Schleswig-Holstein", 1858, 1921),
    ("King Edward VIII (Duke of Windsor)", 1894, 1972),
    ("King George VI", 1895, 1952),
    ("Mary, Princess Royal", 1897, 1965),
    ("Prince Henry, Duke of Gloucester", 1900, 1974),
    ("Wilhelm, German Crown Prince", 1882, 1951),
    ("Prince Eitel Friedrich of Prussia", 1883, 1942),
    ("Augusta of Saxe-Weimar-Eisenach, German Empress", 1811, 1890),
]

# (parent, child) links; both parents are linked to each child
DEFAULT_LINKS = [
    (0, 2), (1, 2),
    (0, 4), (1, 4),
    (2, 6), (3, 6),
    (4, 8), (5, 8),
    (6, 10), (7, 10),
    (6, 11), (7, 11),
    (6, 12), (7, 12),
    (6, 13), (7, 13),
    (8, 14), (9, 14),
    (8, 15), (9, 15),
    (16, 5),  # Frederick III's mother, outside the root's line
]

ROOT_INDEX = 0


def build_default_store() -> EntityStore:
    """Build a fresh store holding the default dataset."""
    store = EntityStore()
    populate(store)
    return store


def populate(store: EntityStore):
    for name, birth, death in DEFAULT_PEOPLE:
        store.append(name, birth, death)
    for parent, child in DEFAULT_LINKS:
        store.connect(parent, child)
