from __future__ import annotations

from datetime import date
from typing import Any, Literal
from urllib.parse import urlencode

from bshengine.client.bsh_client import BshClient
from bshengine.schemas.response import BshResponse
from bshengine.schemas.search import BshSearch
from bshengine.services.base import BaseService, OnDownload, OnError, OnSuccess, list_query

ExportFormat = Literal["csv", "json", "excel"]

_EXPORT_EXTENSIONS = {"csv": "csv", "json": "json", "excel": "xlsx"}


def default_export_filename(entity: str, export_format: ExportFormat, *, today: date | None = None) -> str:
    day = (today or date.today()).isoformat()
    return f"{entity}_export_{day}.{_EXPORT_EXTENSIONS[export_format]}"


class EntityService(BaseService):
    """Generic CRUD, search and export for one named entity."""

    def __init__(self, client: BshClient, entity: str) -> None:
        super().__init__(client)
        self.entity = entity
        self.base_endpoint = f"/api/entities/{entity}"
        self.api_prefix = f"entities.{entity}"

    async def find_by_id(
        self,
        *,
        id: str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request(f"/{id}", operation="findById", on_success=on_success, on_error=on_error, entity=self.entity)
        )

    async def create(
        self,
        *,
        payload: Any,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(operation="create", payload=payload, on_success=on_success, on_error=on_error, entity=self.entity)
        )

    async def create_many(
        self,
        *,
        payload: list[Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/batch",
                operation="createMany",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
                entity=self.entity,
            )
        )

    async def update(
        self,
        *,
        payload: Any,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.put(
            self._request(operation="update", payload=payload, on_success=on_success, on_error=on_error, entity=self.entity)
        )

    async def update_many(
        self,
        *,
        payload: list[Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.put(
            self._request(
                "/batch",
                operation="updateMany",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
                entity=self.entity,
            )
        )

    async def search(
        self,
        *,
        payload: BshSearch | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/search",
                operation="search",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
                entity=self.entity,
            )
        )

    async def delete(
        self,
        *,
        payload: BshSearch | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/delete",
                operation="delete",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
                entity=self.entity,
            )
        )

    async def delete_by_id(
        self,
        *,
        id: str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.delete(
            self._request(f"/{id}", operation="deleteById", on_success=on_success, on_error=on_error, entity=self.entity)
        )

    async def columns(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request("/columns", operation="columns", on_success=on_success, on_error=on_error, entity=self.entity)
        )

    async def count(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request("/count", operation="count", on_success=on_success, on_error=on_error, entity=self.entity)
        )

    async def count_filtered(
        self,
        *,
        payload: BshSearch | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/count",
                operation="countFiltered",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
                entity=self.entity,
            )
        )

    async def list(
        self,
        *,
        page: int | str | None = None,
        size: int | str | None = None,
        sort: str | None = None,
        filter: str | None = None,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        query = list_query(page=page, size=size, sort=sort, filter=filter)
        return await self.client.get(
            self._request(query, operation="list", on_success=on_success, on_error=on_error, entity=self.entity)
        )

    async def export(
        self,
        *,
        format: ExportFormat,  # noqa: A002
        payload: BshSearch | dict[str, Any] | None = None,
        filename: str | None = None,
        on_download: OnDownload | None = None,
        on_error: OnError | None = None,
    ) -> bytes | None:
        if format not in _EXPORT_EXTENSIONS:
            raise ValueError(f"Unsupported export format: {format!r}")
        query = urlencode({"format": format, "filename": filename or default_export_filename(self.entity, format)})
        return await self.client.download(
            self._request(
                f"/export?{query}",
                operation="export",
                payload=payload,
                on_download=on_download,
                on_error=on_error,
                entity=self.entity,
                method="POST" if payload is not None else "GET",
                response_type="blob",
            )
        )
