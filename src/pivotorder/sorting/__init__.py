"""Dimension value sorting for pivot views."""

from pivotorder.sorting.orchestrator import (
    SortOrchestrator,
    SortResult,
    SortStrategy,
    resolve_order,
)

__all__ = [
    "SortOrchestrator",
    "SortResult",
    "SortStrategy",
    "resolve_order",
]
