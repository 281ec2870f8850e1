"""In-memory pivot data set with precomputed subtotals and grand totals."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum
from itertools import product
from typing import Any

from pivotorder.constants import EXTRA_FIELD
from pivotorder.dataset.base import DataRow, PivotDataSet, UnknownFieldError
from pivotorder.models.layout import FieldLayout
from pivotorder.sorting.comparator import to_number

logger = logging.getLogger("pivotorder.dataset")


class Aggregation(StrEnum):
    SUM = "sum"
    COUNT = "count"
    AVG = "avg"
    MIN = "min"
    MAX = "max"


def aggregate(values: Iterable[Any], aggregation: Aggregation = Aggregation.SUM) -> float | None:
    """Aggregate the numeric entries of ``values``; None when there are none."""
    numbers = [n for n in (to_number(v) for v in values) if n is not None]
    if aggregation == Aggregation.COUNT:
        return float(len(numbers))
    if not numbers:
        return None
    if aggregation == Aggregation.AVG:
        return sum(numbers) / len(numbers)
    if aggregation == Aggregation.MIN:
        return min(numbers)
    if aggregation == Aggregation.MAX:
        return max(numbers)
    return sum(numbers)


class InMemoryDataSet(PivotDataSet):
    """Pivot data set over a list of detail records.

    With ``with_totals`` the data set also holds one aggregate row per
    group of every row-field prefix crossed with every column-field
    prefix, the way a pivot engine materialises subtotals and grand totals.
    """

    def __init__(
        self,
        fields: FieldLayout,
        data: Iterable[Mapping[str, Any]],
        *,
        with_totals: bool = True,
        aggregation: Aggregation = Aggregation.SUM,
    ) -> None:
        self._fields = fields
        self._aggregation = aggregation
        self._rows_dims = [f for f in fields.rows if f != EXTRA_FIELD]
        self._col_dims = [f for f in fields.leaf_columns() if f != EXTRA_FIELD]
        self._details: list[DataRow] = [dict(record) for record in data]
        self._rows: list[DataRow] = list(self._details)
        if with_totals:
            self._rows.extend(self._build_totals())
        logger.debug(
            "Data set ready: %d detail rows, %d total rows",
            len(self._details), len(self._rows) - len(self._details),
        )

    @property
    def fields(self) -> FieldLayout:
        return self._fields

    @property
    def dimensions(self) -> list[str]:
        return [*self._rows_dims, *self._col_dims]

    def _build_totals(self) -> list[DataRow]:
        totals: list[DataRow] = []
        full = (len(self._rows_dims), len(self._col_dims))
        for depth in product(range(full[0] + 1), range(full[1] + 1)):
            if depth == full:
                continue
            group_fields = self._rows_dims[: depth[0]] + self._col_dims[: depth[1]]
            groups: dict[tuple[Any, ...], list[DataRow]] = {}
            for record in self._details:
                groups.setdefault(tuple(record.get(f) for f in group_fields), []).append(record)
            for key, members in groups.items():
                row: DataRow = dict(zip(group_fields, key, strict=True))
                for measure in self._fields.values:
                    row[measure] = aggregate((m.get(measure) for m in members), self._aggregation)
                totals.append(row)
        return totals

    def _dimension_filter(self, query: Mapping[str, Any]) -> dict[str, Any]:
        conditions = {k: v for k, v in query.items() if k != EXTRA_FIELD}
        dimensions = self.dimensions
        for name in conditions:
            if name not in dimensions:
                raise UnknownFieldError(name, available=dimensions)
        return conditions

    def _dimension_keys(self, row: Mapping[str, Any]) -> set[str]:
        return {f for f in self.dimensions if f in row}

    def query_rows(
        self, query: Mapping[str, Any], include_descendants: bool = False
    ) -> list[DataRow]:
        conditions = self._dimension_filter(query)
        result = []
        for row in self._rows:
            if not all(k in row and row[k] == v for k, v in conditions.items()):
                continue
            if not include_descendants and self._dimension_keys(row) != set(conditions):
                continue
            result.append(dict(row))
        return result

    def compute_total(self, params: Mapping[str, Any]) -> float | None:
        measure = params.get(EXTRA_FIELD)
        if measure is None and len(self._fields.values) == 1:
            measure = self._fields.values[0]
        if measure is None:
            return None
        conditions = self._dimension_filter(params)
        members = [
            r for r in self._details if all(r.get(k) == v for k, v in conditions.items())
        ]
        if not members:
            return None
        return aggregate((m.get(measure) for m in members), self._aggregation)
