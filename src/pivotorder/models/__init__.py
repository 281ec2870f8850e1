"""Pydantic models for pivot sorting."""

from pivotorder.models.layout import ColumnNode, FieldLayout
from pivotorder.models.sort import SortFuncResult, SortMethod, SortParam, SortScope

__all__ = [
    "ColumnNode",
    "FieldLayout",
    "SortFuncResult",
    "SortMethod",
    "SortParam",
    "SortScope",
]
