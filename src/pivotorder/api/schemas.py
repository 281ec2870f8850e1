"""API request/response Pydantic schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pivotorder.dataset.memory import Aggregation
from pivotorder.models.layout import FieldLayout
from pivotorder.models.sort import SortMethod, SortParam


class SortParamBody(BaseModel):
    """Sort parameters accepted over HTTP (no sort function)."""

    sort_field_id: str = Field(alias="sortFieldId")
    sort_method: str | None = Field(None, alias="sortMethod")
    sort_by: list[str] | None = Field(None, alias="sortBy")
    sort_by_measure: str | None = Field(None, alias="sortByMeasure")
    query: dict[str, Any] = {}

    model_config = {"populate_by_name": True}

    def to_sort_param(self) -> SortParam:
        return SortParam(
            sort_field_id=self.sort_field_id,
            sort_method=self.sort_method,
            sort_by=self.sort_by,
            sort_by_measure=self.sort_by_measure,
            query=self.query,
        )


class SortRequest(BaseModel):
    """Request body for POST /sort."""

    fields: FieldLayout
    data: list[dict[str, Any]] = []
    sort_param: SortParamBody = Field(alias="sortParam")
    original_values: list[str] = Field(alias="originalValues")
    with_totals: bool = Field(True, alias="withTotals")
    aggregation: Aggregation = Aggregation.SUM
    locale: str | None = Field(None, description="Collation locale; defaults to the server setting")

    model_config = {"populate_by_name": True}


class SortResponse(BaseModel):
    """Response body for POST /sort."""

    values: list[str]
    strategy: str
    sort_method: SortMethod | None = Field(None, alias="sortMethod")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    path: str | None = None


class HealthResponse(BaseModel):
    """Response body for GET /health."""

    status: str
    version: str
