"""Sort request models: direction, sort parameters and external sort results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class SortMethod(StrEnum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def _missing_(cls, value: object) -> SortMethod | None:
        # Accept "asc", "Desc", ...
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


class SortScope(StrEnum):
    """How the values returned by an external sort function are addressed."""

    LEAF = "leaf"  # bare leaf segments, e.g. "杭州"
    PATH = "path"  # full composite identifiers, e.g. "浙江[&]杭州"


@dataclass
class SortFuncResult:
    """Tagged result of an external sort function."""

    values: list[str] = field(default_factory=list)
    scope: SortScope = SortScope.PATH


SortFunc = Callable[..., Any]


class SortParam(BaseModel):
    """A sort request for one dimension field of a pivot view.

    Exactly one strategy applies, in this priority: ``sort_func``,
    ``sort_by``, ``sort_by_measure`` with a direction, a bare direction.
    """

    sort_field_id: str = Field(alias="sortFieldId")
    sort_method: SortMethod | None = Field(None, alias="sortMethod")
    sort_by: list[str] | None = Field(None, alias="sortBy")
    sort_by_measure: str | None = Field(None, alias="sortByMeasure")
    sort_func: SortFunc | None = Field(None, alias="sortFunc", exclude=True)
    query: dict[str, Any] = {}

    model_config = {"populate_by_name": True}

    @property
    def is_asc(self) -> bool:
        return self.sort_method == SortMethod.ASC

    @property
    def is_desc(self) -> bool:
        return self.sort_method == SortMethod.DESC

    @property
    def has_direction(self) -> bool:
        return self.is_asc or self.is_desc

    @field_validator("sort_method", mode="before")
    @classmethod
    def _normalise_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            upper = value.strip().upper()
            return None if upper in ("", "NONE") else upper
        return value
