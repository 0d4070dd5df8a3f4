from __future__ import annotations

from typing import Any

from bshengine.schemas.response import BshResponse
from bshengine.schemas.search import BshSearch
from bshengine.schemas.status import ApiKeyForm
from bshengine.services.base import BaseService, OnError, OnSuccess, list_query
from bshengine.services.core import CoreEntities

_ENTITY = CoreEntities.BshApiKeys.value


class ApiKeyService(BaseService):
    base_endpoint = "/api/api-keys"
    api_prefix = "api-key"

    async def create(
        self,
        *,
        payload: ApiKeyForm | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(operation="create", payload=payload, on_success=on_success, on_error=on_error, entity=_ENTITY)
        )

    async def details(
        self,
        *,
        id: int | str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request(f"/{id}", operation="details", on_success=on_success, on_error=on_error, entity=_ENTITY)
        )

    async def revoke(
        self,
        *,
        id: int | str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.delete(
            self._request(f"/{id}/revoke", operation="revoke", on_success=on_success, on_error=on_error, entity=_ENTITY)
        )

    async def get_by_id(
        self,
        *,
        id: int | str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request(f"/{id}", operation="getById", on_success=on_success, on_error=on_error, entity=_ENTITY)
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
                entity=_ENTITY,
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
            self._request(query, operation="list", on_success=on_success, on_error=on_error, entity=_ENTITY)
        )

    async def delete_by_id(
        self,
        *,
        id: int | str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.delete(
            self._request(f"/{id}", operation="deleteById", on_success=on_success, on_error=on_error, entity=_ENTITY)
        )

    async def count(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request("/count", operation="count", on_success=on_success, on_error=on_error, entity=_ENTITY)
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
                entity=_ENTITY,
            )
        )
