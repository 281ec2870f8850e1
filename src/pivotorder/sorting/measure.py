"""Collect the measure rows that drive a "sort by measure" request.

Consider a pivot with rows ``province, city``, columns ``type, sub_type``
and values ``price``. Sorting ``city`` by the ``price`` of one column
(``query={type, sub_type, $$extra$$}``) needs the detail rows of that
column. Sorting ``city`` by the column total (``TOTAL_VALUE``,
``query={$$extra$$: price}``) needs the rows aggregated over ``type`` and
``sub_type`` but still broken down by ``province, city``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pivotorder.constants import EXTRA_FIELD, ID_SEPARATOR, TOTAL_VALUE
from pivotorder.dataset.base import DataRow, PivotDataSet
from pivotorder.models.layout import FieldLayout
from pivotorder.models.sort import SortParam

logger = logging.getLogger("pivotorder.sorting")


def _without_extra(fields: Sequence[str]) -> list[str]:
    return [f for f in fields if f != EXTRA_FIELD]


def measure_key(sort_param: SortParam) -> str | None:
    """Row key holding the value to sort by."""
    if sort_param.sort_by_measure == TOTAL_VALUE:
        return sort_param.query.get(EXTRA_FIELD)
    return sort_param.sort_by_measure


def build_total_params(
    original_value: str, layout: FieldLayout, sort_field_id: str
) -> dict[str, Any]:
    """Map each field from the axis root down to ``sort_field_id`` to its value.

    ``"浙江[&]杭州"`` sorted on ``city`` gives ``{province: 浙江, city: 杭州}``.
    """
    if ID_SEPARATOR not in original_value:
        return {sort_field_id: original_value}
    segments = original_value.split(ID_SEPARATOR)
    keys = layout.axis_fields(sort_field_id)
    depth = keys.index(sort_field_id) if sort_field_id in keys else len(keys) - 1
    return {keys[i]: segments[i] for i in range(min(depth + 1, len(segments)))}


def dimensions_with_parent_path(
    sort_field_id: str, fields: Sequence[str], rows: Sequence[DataRow]
) -> list[str]:
    """Turn rows into composite identifiers ending at ``sort_field_id``.

    Rows missing any field of the path are skipped.
    """
    if sort_field_id in fields:
        path = list(fields[: fields.index(sort_field_id) + 1])
    else:
        path = [sort_field_id]
    identifiers = []
    for row in rows:
        values = [row.get(f) for f in path]
        if any(v is None for v in values):
            continue
        identifiers.append(ID_SEPARATOR.join(str(v) for v in values))
    return identifiers


def _detail_rows(rows: list[DataRow], layout: FieldLayout) -> list[DataRow]:
    row_col_fields = _without_extra(layout.all_fields())
    return [row for row in rows if all(f in row for f in row_col_fields)]


def _total_rows(rows: list[DataRow], layout: FieldLayout, sort_param: SortParam) -> list[DataRow]:
    sort_field_id = sort_param.sort_field_id
    sort_fields = _without_extra(layout.axis_fields(sort_field_id))
    opposite_fields = _without_extra(layout.opposite_axis_fields(sort_field_id))

    position = sort_fields.index(sort_field_id) if sort_field_id in sort_fields else -1
    next_field = sort_fields[position + 1] if 0 <= position < len(sort_fields) - 1 else None
    missed_opposite = [f for f in opposite_fields if f not in sort_param.query]

    result = []
    for row in rows:
        # Totals of the other axis that do not break down the sorted field
        if sort_field_id not in row:
            continue
        # Finer than the sorted level
        if next_field is not None and next_field in row:
            continue
        if all(f not in row for f in missed_opposite):
            result.append(row)
    return result


def get_sort_by_measure_values(
    sort_param: SortParam,
    layout: FieldLayout,
    dataset: PivotDataSet,
    original_values: Sequence[str],
) -> list[DataRow]:
    """Return the rows whose measure values order ``sort_param.sort_field_id``."""
    rows = dataset.query_rows(sort_param.query, include_descendants=True)

    if sort_param.sort_by_measure != TOTAL_VALUE:
        details = _detail_rows(rows, layout)
        logger.debug("Measure sort on %s: %d of %d rows are detail rows",
                     sort_param.sort_field_id, len(details), len(rows))
        return details

    totals = _total_rows(rows, layout, sort_param)
    if totals:
        logger.debug("Total sort on %s: %d aggregate rows", sort_param.sort_field_id, len(totals))
        return totals

    # No materialised subtotal at this level: compute one per value
    key = measure_key(sort_param)
    computed: list[DataRow] = []
    for original_value in original_values:
        params = {
            **sort_param.query,
            **build_total_params(original_value, layout, sort_param.sort_field_id),
        }
        value = dataset.compute_total(params)
        if value is None:
            continue
        row = dict(params)
        if key is not None:
            row[key] = value
        computed.append(row)
    logger.debug(
        "Total sort on %s: computed %d of %d totals",
        sort_param.sort_field_id, len(computed), len(original_values),
    )
    return computed
