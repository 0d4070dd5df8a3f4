from __future__ import annotations

from typing import Any

from bshengine.schemas.response import BshResponse
from bshengine.schemas.search import BshSearch
from bshengine.services.base import BaseService, OnError, OnSuccess


class CachingService(BaseService):
    base_endpoint = "/api/caching"
    api_prefix = "caching"

    async def find_by_id(
        self,
        *,
        id: str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(self._request(f"/{id}", operation="findById", on_success=on_success, on_error=on_error))

    async def search(
        self,
        *,
        payload: BshSearch | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request("/search", operation="search", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def names(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(self._request("/names", operation="names", on_success=on_success, on_error=on_error))

    async def clear_by_id(
        self,
        *,
        id: str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.delete(
            self._request(f"/{id}", operation="clearById", on_success=on_success, on_error=on_error)
        )

    async def clear_all(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.delete(self._request("/all", operation="clearAll", on_success=on_success, on_error=on_error))
