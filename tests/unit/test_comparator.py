"""Tests for the value comparator."""

from __future__ import annotations

import pytest

from pivotorder.models.sort import SortMethod
from pivotorder.sorting.comparator import (
    collation_key,
    compare_values,
    direction_sign,
    is_placeholder,
    sort_values,
    to_number,
)


class TestToNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("10", 10.0), (" 2.5 ", 2.5), (3, 3.0), (-1.5, -1.5), ("1e3", 1000.0)],
    )
    def test_numeric(self, raw: object, expected: float) -> None:
        assert to_number(raw) == expected

    @pytest.mark.parametrize("raw", ["-", "", "abc", None, "nan", True, [1]])
    def test_not_numeric(self, raw: object) -> None:
        assert to_number(raw) is None


class TestDirection:
    def test_asc_is_positive(self) -> None:
        assert direction_sign(SortMethod.ASC) == 1
        assert direction_sign("asc") == 1

    def test_desc_and_missing_are_negative(self) -> None:
        assert direction_sign(SortMethod.DESC) == -1
        assert direction_sign(None) == -1
        assert direction_sign("sideways") == -1


class TestPlaceholder:
    def test_dash_and_none(self) -> None:
        assert is_placeholder("-")
        assert is_placeholder(None)
        assert is_placeholder("")
        assert not is_placeholder("0")
        assert not is_placeholder(0)


class TestCollation:
    def test_chinese_by_pinyin(self) -> None:
        # chengdu < hangzhou < ningbo
        assert collation_key("成都") < collation_key("杭州") < collation_key("宁波")

    def test_case_insensitive_primary(self) -> None:
        assert collation_key("apple", "en") < collation_key("Banana", "en")

    def test_raw_text_breaks_ties(self) -> None:
        assert collation_key("B", "en") != collation_key("b", "en")

    def test_lowercase_before_uppercase(self) -> None:
        assert collation_key("b", "en") < collation_key("B", "en")
        assert sort_values(["B", "b", "a"], SortMethod.ASC, locale="zh") == ["a", "b", "B"]

    def test_latin_before_han(self) -> None:
        # 阿 reads "a" but still sorts after Latin letters
        assert collation_key("b") < collation_key("阿")
        assert sort_values(["阿", "b", "1"], SortMethod.ASC) == ["1", "b", "阿"]


class TestCompareValues:
    def test_without_key_compares_as_text(self) -> None:
        assert sort_values(["10", "9", "-"], SortMethod.ASC) == ["-", "10", "9"]

    def test_with_key_compares_numbers_and_pushes_placeholder_last(self) -> None:
        rows = [{"v": "10"}, {"v": "9"}, {"v": "-"}]
        assert sort_values(rows, SortMethod.ASC, key="v") == [{"v": "9"}, {"v": "10"}, {"v": "-"}]

    def test_with_key_descending_puts_placeholder_first(self) -> None:
        rows = [{"v": 1}, {"v": "-"}, {"v": 3}]
        assert sort_values(rows, SortMethod.DESC, key="v") == [{"v": "-"}, {"v": 3}, {"v": 1}]

    def test_empty_string_is_placeholder(self) -> None:
        rows = [{"v": ""}, {"v": "2"}, {"v": "1"}]
        assert sort_values(rows, SortMethod.ASC, key="v") == [{"v": "1"}, {"v": "2"}, {"v": ""}]
        assert sort_values(rows, SortMethod.DESC, key="v")[0] == {"v": ""}

    def test_missing_key_is_placeholder(self) -> None:
        rows = [{}, {"v": 2}, {"v": 1}]
        assert sort_values(rows, SortMethod.ASC, key="v") == [{"v": 1}, {"v": 2}, {}]

    def test_with_key_non_numeric_falls_back_to_text(self) -> None:
        rows = [{"v": "杭州"}, {"v": "成都"}]
        assert sort_values(rows, SortMethod.ASC, key="v") == [{"v": "成都"}, {"v": "杭州"}]

    def test_absent_sorts_after_present_when_ascending(self) -> None:
        assert compare_values("a", None, SortMethod.ASC) < 0
        assert compare_values(None, "a", SortMethod.ASC) > 0
        assert compare_values(None, None, SortMethod.ASC) == 0

    def test_direction_flips_sign(self) -> None:
        assert compare_values("a", "b", SortMethod.ASC) < 0
        assert compare_values("a", "b", SortMethod.DESC) > 0

    def test_objects_are_projected_by_attribute(self) -> None:
        class Cell:
            def __init__(self, value: int) -> None:
                self.value = value

        cells = [Cell(3), Cell(1), Cell(2)]
        assert [c.value for c in sort_values(cells, "asc", key="value")] == [1, 2, 3]

    def test_input_is_not_mutated(self) -> None:
        values = ["c", "a", "b"]
        assert sort_values(values, SortMethod.ASC) == ["a", "b", "c"]
        assert values == ["c", "a", "b"]
