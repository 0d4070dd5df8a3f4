from __future__ import annotations

from bshengine.schemas.response import BshResponse
from bshengine.services.base import BaseService, OnError, OnSuccess


class StatusService(BaseService):
    base_endpoint = "/api/status"
    api_prefix = "status"

    async def load(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(self._request(operation="load", on_success=on_success, on_error=on_error))

    async def health(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(self._request("/health", operation="health", on_success=on_success, on_error=on_error))
