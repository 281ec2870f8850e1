"""Pivot data set contract and the in-memory implementation."""

from pivotorder.dataset.base import DataRow, PivotDataSet, UnknownFieldError
from pivotorder.dataset.memory import Aggregation, InMemoryDataSet

__all__ = [
    "Aggregation",
    "DataRow",
    "InMemoryDataSet",
    "PivotDataSet",
    "UnknownFieldError",
]
