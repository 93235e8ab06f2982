"""Text serialization of the person store.

File layout, one field per line::

    N
    <name>
    <birth year>
    <death year>          (-1 when alive)
    <child count>
    <child index> <child index> ...   (each index followed by a space)
    <name>
    ...
"""

import logging
from pathlib import Path
from typing import TextIO

from errors import FileAccessError, FormatError
from store import EntityStore

logger = logging.getLogger(__name__)


def sanitize_name(name: str) -> str:
    """Replace line breaks so a name always occupies exactly one line."""
    return name.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


# ============================================================================
# Writing
# ============================================================================


def dumps(store: EntityStore) -> str:
    """Serialize the whole store to text."""
    lines = [str(store.size())]
    for person in store:
        lines.append(sanitize_name(person.name))
        lines.append(str(person.birth_year))
        lines.append(str(person.death_year))
        lines.append(str(len(person.children)))
        lines.append("".join(f"{child} " for child in person.children))
    return "\n".join(lines) + "\n"


def dump(store: EntityStore, fp: TextIO):
    fp.write(dumps(store))


def save_store(store: EntityStore, path: Path):
    """Write the store to ``path``, raising FileAccessError if it cannot be written."""
    path = Path(path)
    text = dumps(store)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as exc:
        raise FileAccessError(path, "Failed to open file for saving") from exc
    logger.info("Saved %d persons to %s", store.size(), path)


# ============================================================================
# Reading
# ============================================================================


class _LineReader:
    """Cursor over the lines of a data file."""

    def __init__(self, text: str):
        lines = text.split("\n")
        # A trailing newline leaves one empty element behind
        if lines and lines[-1] == "":
            lines.pop()
        self.lines = [line.rstrip("\r") for line in lines]
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.lines)

    def next_line(self, field_name: str, record: int | None) -> str:
        if self.at_end():
            raise FormatError(f"unexpected end of data, expected {field_name}", record)
        line = self.lines[self.position]
        self.position += 1
        return line

    def next_int(self, field_name: str, record: int | None) -> int:
        line = self.next_line(field_name, record)
        try:
            return int(line.strip())
        except ValueError:
            raise FormatError(f"cannot read {field_name} from {line!r}", record) from None


def parse_child_indices(line: str, count: int, record: int) -> list[int]:
    """Read ``count`` space-separated child indices; surplus tokens are ignored."""
    tokens = line.split()
    if len(tokens) < count:
        raise FormatError(f"expected {count} child indices, found {len(tokens)}", record)
    if len(tokens) > count:
        logger.debug("Person #%d: ignoring %d surplus child tokens", record, len(tokens) - count)

    indices = []
    for token in tokens[:count]:
        try:
            indices.append(int(token))
        except ValueError:
            raise FormatError(f"cannot read child index from {token!r}", record) from None
    return indices


def loads(text: str) -> EntityStore:
    """
    Parse a store from text.

    Raises FormatError when the count or any numeric field is unreadable or
    the text ends mid-record. Child indices outside the declared record range
    are dropped.
    """
    reader = _LineReader(text)
    count = reader.next_int("count", None)
    if count < 0:
        raise FormatError(f"negative person count {count}")

    store = EntityStore()
    pending_children: list[list[int]] = []

    for record in range(count):
        name = reader.next_line("name", record)
        birth = reader.next_int("birth year", record)
        death = reader.next_int("death year", record)
        child_count = reader.next_int("child count", record)
        if child_count < 0:
            raise FormatError(f"negative child count {child_count}", record)

        # The last record may omit its empty child line
        if child_count == 0 and reader.at_end():
            children = []
        else:
            children = parse_child_indices(reader.next_line("child indices", record), child_count, record)

        store.append(name, birth, death)
        pending_children.append(children)

    # Links are resolved only once every record exists
    for parent_index, children in enumerate(pending_children):
        for child_index in children:
            if 0 <= child_index < count:
                store.connect(parent_index, child_index)
            else:
                logger.warning(
                    "Dropping out-of-range child index %d of Person #%d", child_index, parent_index
                )

    return store


def load(fp: TextIO) -> EntityStore:
    return loads(fp.read())


def load_store(path: Path) -> EntityStore:
    """Read a store from ``path``; the file is closed on every exit path."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except OSError as exc:
        raise FileAccessError(path, "File not found or cannot open") from exc
    except UnicodeDecodeError as exc:
        raise FormatError(f"file is not valid UTF-8 text: {exc.reason}") from exc

    store = loads(text)
    logger.info("Loaded %d persons from %s", store.size(), path)
    return store
