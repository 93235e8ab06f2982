"""Tests for the text persistence format."""

import io
import logging

import pytest

from errors import FileAccessError, FormatError
from persistence import dump, dumps, load, load_store, loads, sanitize_name, save_store
from store import EntityStore


def snapshot(store):
    return [(p.name, p.birth_year, p.death_year, list(p.children)) for p in store]


# ============================================================================
# Writing
# ============================================================================


class TestDumps:
    def test_exact_layout(self, small_store):
        assert dumps(small_store) == (
            "4\n"
            "Grandparent\n1900\n1980\n2\n1 2 \n"
            "Parent\n1930\n-1\n1\n3 \n"
            "Aunt\n1932\n2001\n0\n\n"
            "Child\n1960\n-1\n0\n\n"
        )

    def test_empty_store(self):
        assert dumps(EntityStore()) == "0\n"

    def test_newlines_in_names_are_replaced(self):
        store = EntityStore()
        store.append("Anne\nPrincess Royal", 1950)
        text = dumps(store)
        assert text.splitlines()[1] == "Anne Princess Royal"
        assert loads(text).get(0).name == "Anne Princess Royal"

    def test_sanitize_name(self):
        assert sanitize_name("a\r\nb\nc\rd") == "a b c d"

    def test_dump_to_stream(self, small_store):
        buffer = io.StringIO()
        dump(small_store, buffer)
        assert buffer.getvalue() == dumps(small_store)


class TestSaveStore:
    def test_save_writes_file(self, small_store, tmp_path):
        path = tmp_path / "family_tree.dat"
        save_store(small_store, path)
        assert path.read_text(encoding="utf-8") == dumps(small_store)

    def test_unwritable_destination(self, small_store, tmp_path):
        path = tmp_path / "missing-dir" / "family_tree.dat"
        with pytest.raises(FileAccessError) as excinfo:
            save_store(small_store, path)
        assert excinfo.value.path == path
        assert str(path) in str(excinfo.value)
        assert isinstance(excinfo.value, OSError)


# ============================================================================
# Reading
# ============================================================================


class TestLoads:
    def test_round_trip(self, seed_store):
        assert snapshot(loads(dumps(seed_store))) == snapshot(seed_store)

    def test_round_trip_preserves_child_order_and_duplicates(self, small_store):
        small_store.connect(0, 3)
        small_store.connect(0, 1)
        restored = loads(dumps(small_store))
        assert restored.get(0).children == [1, 2, 3, 1]

    def test_round_trip_through_file(self, seed_store, tmp_path):
        path = tmp_path / "tree.dat"
        save_store(seed_store, path)
        assert snapshot(load_store(path)) == snapshot(seed_store)

    def test_load_from_stream(self, small_store):
        assert snapshot(load(io.StringIO(dumps(small_store)))) == snapshot(small_store)

    def test_windows_line_endings(self, small_store):
        text = dumps(small_store).replace("\n", "\r\n")
        assert snapshot(loads(text)) == snapshot(small_store)

    def test_empty_name_allowed(self):
        store = loads("1\n\n1900\n-1\n0\n\n")
        assert store.get(0).name == ""

    def test_final_empty_child_line_may_be_omitted(self):
        store = loads("1\nSolo\n1900\n-1\n0")
        assert store.size() == 1
        assert store.get(0).children == []

    def test_surplus_child_tokens_ignored(self):
        store = loads("2\nA\n1900\n-1\n1\n1 0 1\nB\n1930\n-1\n0\n\n")
        assert store.get(0).children == [1]

    def test_out_of_range_children_dropped(self, caplog):
        text = "2\nA\n1900\n-1\n3\n1 5 -2 \nB\n1930\n-1\n0\n\n"
        with caplog.at_level(logging.WARNING):
            store = loads(text)
        assert store.get(0).children == [1]
        assert "Dropping out-of-range child index 5" in caplog.text

    def test_forward_references_resolved(self):
        store = loads("2\nChild first\n1950\n-1\n0\n\nParent second\n1920\n-1\n1\n0 \n")
        assert store.get(1).children == [0]

    def test_trailing_content_ignored(self):
        store = loads("1\nA\n1900\n-1\n0\n\nleftover\nlines\n")
        assert store.size() == 1


class TestLoadsErrors:
    def test_non_numeric_count(self):
        with pytest.raises(FormatError) as excinfo:
            loads("Queen Victoria\n1819\n")
        assert excinfo.value.record is None
        assert "count" in str(excinfo.value)

    def test_empty_text(self):
        with pytest.raises(FormatError):
            loads("")

    def test_negative_count(self):
        with pytest.raises(FormatError):
            loads("-3\n")

    @pytest.mark.parametrize(
        "record, field",
        [
            ("A\nabc\n-1\n0\n\n", "birth year"),
            ("A\n1900\nnever\n0\n\n", "death year"),
            ("A\n1900\n-1\nmany\n\n", "child count"),
        ],
    )
    def test_unreadable_field_reports_record(self, record, field):
        text = "2\nFirst\n1800\n-1\n0\n\n" + record
        with pytest.raises(FormatError) as excinfo:
            loads(text)
        assert excinfo.value.record == 1
        assert field in str(excinfo.value)
        assert "Person #1" in str(excinfo.value)

    def test_negative_child_count(self):
        with pytest.raises(FormatError) as excinfo:
            loads("1\nA\n1900\n-1\n-2\n\n")
        assert excinfo.value.record == 0

    def test_unreadable_child_index(self):
        with pytest.raises(FormatError) as excinfo:
            loads("2\nA\n1900\n-1\n1\nx \nB\n1930\n-1\n0\n\n")
        assert excinfo.value.record == 0

    def test_missing_child_indices(self):
        with pytest.raises(FormatError):
            loads("2\nA\n1900\n-1\n2\n1 \nB\n1930\n-1\n0\n\n")

    @pytest.mark.parametrize("cut", [1, 2, 3])
    def test_ends_mid_record(self, cut):
        lines = ["2", "A", "1900", "-1", "0", "", "B", "1930", "-1", "0", ""]
        text = "\n".join(lines[: 6 + cut])
        with pytest.raises(FormatError) as excinfo:
            loads(text)
        assert excinfo.value.record == 1
        assert "end of data" in str(excinfo.value)

    def test_missing_records(self):
        with pytest.raises(FormatError) as excinfo:
            loads("3\nA\n1900\n-1\n0\n\n")
        assert excinfo.value.record == 1


class TestLoadStore:
    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope.dat"
        with pytest.raises(FileAccessError) as excinfo:
            load_store(path)
        assert excinfo.value.path == path

    def test_binary_garbage(self, tmp_path):
        path = tmp_path / "garbage.dat"
        path.write_bytes(b"\xff\xfe\x00\x81")
        with pytest.raises(FormatError):
            load_store(path)
