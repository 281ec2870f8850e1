"""Shared test fixtures for pivotorder.

The sample pivot has rows ``province, city``, columns ``type, sub_type``
and one measure ``price``. City totals over all columns: 杭州 30,
宁波 45, 成都 31, 绵阳 5. Province totals: 浙江 75, 四川 36.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from pivotorder.constants import EXTRA_FIELD
from pivotorder.dataset.base import DataRow, PivotDataSet
from pivotorder.dataset.memory import InMemoryDataSet
from pivotorder.models.layout import FieldLayout

SAMPLE_DATA: list[dict[str, Any]] = [
    {"province": "浙江", "city": "杭州", "type": "家具", "sub_type": "桌子", "price": 10},
    {"province": "浙江", "city": "杭州", "type": "家具", "sub_type": "沙发", "price": 20},
    {"province": "浙江", "city": "宁波", "type": "家具", "sub_type": "桌子", "price": 5},
    {"province": "浙江", "city": "宁波", "type": "家具", "sub_type": "沙发", "price": 40},
    {"province": "四川", "city": "成都", "type": "家具", "sub_type": "桌子", "price": 30},
    {"province": "四川", "city": "成都", "type": "家具", "sub_type": "沙发", "price": 1},
    {"province": "四川", "city": "绵阳", "type": "家具", "sub_type": "桌子", "price": 2},
    {"province": "四川", "city": "绵阳", "type": "家具", "sub_type": "沙发", "price": 3},
]

CITY_VALUES = ["浙江[&]杭州", "浙江[&]宁波", "四川[&]成都", "四川[&]绵阳"]
PROVINCE_VALUES = ["浙江", "四川"]
SUB_TYPE_VALUES = ["家具[&]桌子", "家具[&]沙发"]

PRICE_QUERY = {EXTRA_FIELD: "price"}


class StubDataSet(PivotDataSet):
    """Data set returning canned rows and per-value totals, recording every call."""

    def __init__(
        self,
        fields: FieldLayout,
        rows: list[DataRow] | None = None,
        totals: dict[str, float] | None = None,
        total_field: str = "city",
    ) -> None:
        self._fields = fields
        self._rows = rows or []
        self._totals = totals or {}
        self._total_field = total_field
        self.queries: list[tuple[dict[str, Any], bool]] = []
        self.total_calls: list[dict[str, Any]] = []

    @property
    def fields(self) -> FieldLayout:
        return self._fields

    def query_rows(
        self, query: Mapping[str, Any], include_descendants: bool = False
    ) -> list[DataRow]:
        self.queries.append((dict(query), include_descendants))
        return [dict(r) for r in self._rows]

    def compute_total(self, params: Mapping[str, Any]) -> float | None:
        self.total_calls.append(dict(params))
        return self._totals.get(params.get(self._total_field))


@pytest.fixture
def layout() -> FieldLayout:
    return FieldLayout(rows=["province", "city"], columns=["type", "sub_type"], values=["price"])


@pytest.fixture
def dataset(layout: FieldLayout) -> InMemoryDataSet:
    """Sample data with materialised subtotals and grand totals."""
    return InMemoryDataSet(layout, SAMPLE_DATA)


@pytest.fixture
def dataset_without_totals(layout: FieldLayout) -> InMemoryDataSet:
    """Sample data holding detail rows only."""
    return InMemoryDataSet(layout, SAMPLE_DATA, with_totals=False)
