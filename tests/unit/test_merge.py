"""Tests for merging a computed order into the full value list."""

from __future__ import annotations

from pivotorder.sorting.merge import merge_sorted_values


class TestMergeSortedValues:
    def test_ascending_puts_unordered_values_first(self) -> None:
        assert merge_sorted_values(["b"], ["a", "b", "c"], asc=True) == ["a", "c", "b"]

    def test_descending_puts_ordered_values_first(self) -> None:
        assert merge_sorted_values(["b"], ["a", "b", "c"], asc=False) == ["b", "a", "c"]

    def test_full_order_is_kept(self) -> None:
        assert merge_sorted_values(["c", "a", "b"], ["a", "b", "c"], asc=True) == ["c", "a", "b"]
        assert merge_sorted_values(["c", "a", "b"], ["a", "b", "c"], asc=False) == ["c", "a", "b"]

    def test_unknown_values_are_dropped(self) -> None:
        assert merge_sorted_values(["x", "b"], ["a", "b"], asc=False) == ["b", "a"]

    def test_duplicates_keep_first_position(self) -> None:
        assert merge_sorted_values(["b", "a", "b"], ["a", "b", "c"], asc=False) == ["b", "a", "c"]

    def test_empty_order_returns_originals(self) -> None:
        assert merge_sorted_values([], ["a", "b"], asc=True) == ["a", "b"]
        assert merge_sorted_values([], ["a", "b"], asc=False) == ["a", "b"]

    def test_repeated_originals_collapse_to_first_occurrence(self) -> None:
        assert merge_sorted_values(["b"], ["a", "b", "a"], asc=True) == ["a", "b"]
        assert merge_sorted_values(["b"], ["a", "b", "a"], asc=False) == ["b", "a"]
