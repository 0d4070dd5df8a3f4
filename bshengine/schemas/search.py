from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ComparisonOperator = Literal[
    "eq", "ne",
    "gt", "gte",
    "lt", "lte",
    "like", "ilike",
    "contains", "icontains",
    "starts", "istarts",
    "in", "nin",
    "between",
    "isnull", "notnull",
]
LogicalOperator = Literal["and", "or"]
AggregateFunction = Literal["COUNT", "SUM", "AVG", "MIN", "MAX"]


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Filter(_WireModel):
    # Operators are case-insensitive on the server, so any casing is accepted here.
    operator: str | None = None
    field: str | None = None
    value: Any = None
    type: str | None = None
    filters: list[Filter] | None = None


class Aggregate(_WireModel):
    function: AggregateFunction | None = None
    field: str | None = None
    alias: str | None = None


class GroupBy(_WireModel):
    fields: list[str] | None = None
    aggregate: list[Aggregate] | None = None


class Sort(_WireModel):
    field: str | None = None
    direction: Literal[-1, 1] | None = None


class Pagination(_WireModel):
    page: int | None = None
    size: int | None = None


class BshSearch(_WireModel):
    entity: str | None = None
    alias: str | None = None
    fields: list[str] | None = None
    filters: list[Filter] | None = None
    group_by: GroupBy | None = Field(default=None, alias="groupBy")
    sort: list[Sort] | None = None
    pagination: Pagination | None = None
    from_: BshSearch | None = Field(default=None, alias="from")
