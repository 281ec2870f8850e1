"""Abstract pivot data set consumed by the sorter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pivotorder.models.layout import FieldLayout

DataRow = dict[str, Any]


class UnknownFieldError(ValueError):
    """Raised when a query references a field absent from the layout."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.field_name = name
        self.available = available
        super().__init__(f"Unknown field '{name}'. Available: {', '.join(available)}")


class PivotDataSet(ABC):
    """Read-only access to the rows behind a pivot view.

    Rows are plain dicts keyed by dimension fields and measure names. A row
    lacking some dimension fields is an aggregate over those fields.
    """

    @property
    @abstractmethod
    def fields(self) -> FieldLayout: ...

    @abstractmethod
    def query_rows(
        self, query: Mapping[str, Any], include_descendants: bool = False
    ) -> list[DataRow]:
        """Return rows matching every dimension in ``query``.

        With ``include_descendants`` the result also holds rows broken down
        by fields finer than the query, down to the detail records.
        """

    @abstractmethod
    def compute_total(self, params: Mapping[str, Any]) -> Any | None:
        """Aggregate the measure named by ``EXTRA_FIELD`` over rows matching ``params``."""
