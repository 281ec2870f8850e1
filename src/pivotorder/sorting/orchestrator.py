"""Orchestrates one sort request: strategy → candidate order → merge."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pivotorder.constants import ID_SEPARATOR
from pivotorder.dataset.base import PivotDataSet
from pivotorder.models.layout import FieldLayout
from pivotorder.models.sort import SortFuncResult, SortParam, SortScope
from pivotorder.sorting.comparator import DEFAULT_LOCALE, sort_values
from pivotorder.sorting.custom import group_by_parent, sort_by_custom
from pivotorder.sorting.measure import (
    dimensions_with_parent_path,
    get_sort_by_measure_values,
    measure_key,
)
from pivotorder.sorting.merge import merge_sorted_values

logger = logging.getLogger("pivotorder.sorting")


class SortStrategy(StrEnum):
    FUNCTION = "function"
    CUSTOM = "custom"
    MEASURE = "measure"
    METHOD = "method"
    NONE = "none"


@dataclass
class SortResult:
    """Ordered values plus the strategy that produced them."""

    values: list[str]
    strategy: SortStrategy


def choose_strategy(sort_param: SortParam) -> SortStrategy:
    if sort_param.sort_func is not None:
        return SortStrategy.FUNCTION
    if sort_param.sort_by is not None:
        return SortStrategy.CUSTOM
    if sort_param.has_direction:
        return SortStrategy.MEASURE if sort_param.sort_by_measure else SortStrategy.METHOD
    return SortStrategy.NONE


def tag_sort_func_result(
    raw: Any, sort_param: SortParam, layout: FieldLayout
) -> SortFuncResult | None:
    """Normalise what a sort function returned; None when it returned nothing.

    Untagged lists are leaf-scoped when the sorted field is nested on its
    axis and the first entry carries no path separator, e.g. ``["成都",
    "杭州"]`` for ``city`` under ``province``.
    """
    if isinstance(raw, SortFuncResult):
        return raw if raw.values else None
    if not raw:
        return None
    values = [str(v) for v in raw]
    if layout.is_nested(sort_param.sort_field_id) and ID_SEPARATOR not in values[0]:
        return SortFuncResult(values=values, scope=SortScope.LEAF)
    return SortFuncResult(values=values, scope=SortScope.PATH)


class SortOrchestrator:
    """Resolves the display order of one dimension field."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self._locale = locale

    def resolve(
        self,
        sort_param: SortParam,
        original_values: Sequence[str],
        dataset: PivotDataSet | None = None,
        layout: FieldLayout | None = None,
    ) -> SortResult:
        """Return ``original_values`` reordered according to ``sort_param``."""
        if layout is None:
            layout = dataset.fields if dataset is not None else FieldLayout()
        originals = list(original_values)
        strategy = choose_strategy(sort_param)
        logger.debug("Sorting %s with strategy %s (%d values)",
                     sort_param.sort_field_id, strategy, len(originals))

        if strategy == SortStrategy.FUNCTION:
            values = self._sort_by_func(sort_param, originals, dataset, layout)
        elif strategy == SortStrategy.CUSTOM:
            values = sort_by_custom(sort_param.sort_by or [], originals)
        elif strategy == SortStrategy.MEASURE:
            values = self._sort_by_measure(sort_param, originals, dataset, layout)
        elif strategy == SortStrategy.METHOD:
            sorted_values = sort_values(originals, sort_param.sort_method, locale=self._locale)
            values = merge_sorted_values(sorted_values, originals, sort_param.is_asc)
        else:
            values = originals
        return SortResult(values=values, strategy=strategy)

    def _measure_rows(
        self,
        sort_param: SortParam,
        originals: list[str],
        dataset: PivotDataSet | None,
        layout: FieldLayout,
    ) -> list[dict[str, Any]]:
        if dataset is None:
            logger.warning("Measure sort on %s without a data set", sort_param.sort_field_id)
            return []
        return get_sort_by_measure_values(sort_param, layout, dataset, originals)

    def _sort_by_func(
        self,
        sort_param: SortParam,
        originals: list[str],
        dataset: PivotDataSet | None,
        layout: FieldLayout,
    ) -> list[str]:
        sort_func = sort_param.sort_func
        if sort_func is None:
            return originals
        data: list[Any] = (
            self._measure_rows(sort_param, originals, dataset, layout)
            if sort_param.sort_by_measure
            else list(originals)
        )
        result = tag_sort_func_result(sort_func(data, sort_param), sort_param, layout)
        if result is None:
            return originals
        if result.scope == SortScope.LEAF:
            return sort_by_custom(result.values, originals)
        # Sort functions may return a partial order
        return merge_sorted_values(result.values, originals, sort_param.is_asc)

    def _sort_by_measure(
        self,
        sort_param: SortParam,
        originals: list[str],
        dataset: PivotDataSet | None,
        layout: FieldLayout,
    ) -> list[str]:
        rows = self._measure_rows(sort_param, originals, dataset, layout)
        ranked = sort_values(
            rows, sort_param.sort_method, key=measure_key(sort_param), locale=self._locale
        )
        field = sort_param.sort_field_id
        identifiers = dimensions_with_parent_path(field, layout.axis_fields(field), ranked)
        if layout.is_nested(field):
            identifiers = group_by_parent(list(dict.fromkeys(identifiers)), originals)
        return merge_sorted_values(identifiers, originals, sort_param.is_asc)


def resolve_order(
    sort_param: SortParam,
    original_values: Sequence[str],
    dataset: PivotDataSet | None = None,
    layout: FieldLayout | None = None,
    locale: str | None = None,
) -> list[str]:
    """Order ``original_values`` for display; always a permutation of them."""
    orchestrator = SortOrchestrator(locale=locale or DEFAULT_LOCALE)
    return orchestrator.resolve(sort_param, original_values, dataset, layout).values
