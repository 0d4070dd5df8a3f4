from __future__ import annotations

import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _now_ms() -> int:
    return int(time.time() * 1000)


class ResponseMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    sql: str | None = None
    error: str | None = None
    tips: dict[str, Any] | None = None


# Server diagnostics, every field optional.
class Pagination(BaseModel):
    model_config = ConfigDict(extra="allow")

    current: int | None = None
    total: int | None = None
    pages: int | None = None
    first: bool | None = None
    last: bool | None = None


class FieldValidation(BaseModel):
    model_config = ConfigDict(extra="allow")

    field: str | None = None
    error: str | None = None


class BshResponse(BaseModel):
    """Envelope every BSH Engine endpoint answers with.

    ``data`` is always a list, even for single-entity results.
    """

    model_config = ConfigDict(extra="allow")

    data: list[Any] = Field(default_factory=list)
    code: int = 0
    status: str = ""
    error: str = ""
    timestamp: int | float = Field(default_factory=_now_ms)
    meta: ResponseMeta | None = None
    pagination: Pagination | None = None
    endpoint: str | None = None
    api: str | None = None
    validations: list[FieldValidation] | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _data_never_null(cls, value: Any) -> Any:
        if value is None:
            return []
        return value

    @field_validator("error", "status", mode="before")
    @classmethod
    def _text_never_null(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value


def is_ok(response: BshResponse | None) -> bool:
    if response is None:
        return False
    return 200 <= response.code < 300
