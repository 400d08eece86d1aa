"""Tests for the index-arena DisjointSet."""

import pytest

from qdedupe.utils.union_find import DisjointSet


class TestDisjointSet:
    def test_singletons(self):
        ds = DisjointSet(["a", "b", "c"])

        assert len(ds) == 3
        assert ds.get_set_count() == 3
        assert ds.find("a") == "a"
        assert ds.get_size("b") == 1

    def test_make_set_is_idempotent(self):
        ds = DisjointSet()
        assert ds.make_set("a") == 0
        assert ds.make_set("b") == 1
        assert ds.make_set("a") == 0
        assert len(ds) == 2

    def test_union_merges_and_reports(self):
        ds = DisjointSet(["a", "b", "c"])

        assert ds.union("a", "b") is True
        assert ds.union("b", "a") is False
        assert ds.is_same_set("a", "b")
        assert not ds.is_same_set("a", "c")
        assert ds.get_set_count() == 2
        assert ds.get_size("a") == 2

    def test_union_by_size_keeps_larger_root(self):
        ds = DisjointSet(["a", "b", "c", "d"])
        ds.union("a", "b")
        ds.union("a", "c")
        root = ds.find("a")

        ds.union("d", "a")

        assert ds.find("d") == root
        assert ds.get_size("d") == 4

    def test_long_chain_compresses(self):
        ids = [f"q{i}" for i in range(2000)]
        ds = DisjointSet(ids)
        for left, right in zip(ids, ids[1:]):
            ds.union(left, right)

        assert ds.get_set_count() == 1
        assert ds.get_size("q1999") == 2000
        assert ds.is_same_set("q0", "q1999")

    def test_groups_are_deterministic(self):
        ds = DisjointSet(["c", "a", "b", "d"])
        ds.union("a", "d")
        ds.union("c", "b")

        assert ds.groups() == [["c", "b"], ["a", "d"]]

    def test_unknown_element(self):
        ds = DisjointSet(["a"])
        assert "z" not in ds
        with pytest.raises(ValueError, match="not found"):
            ds.find("z")
