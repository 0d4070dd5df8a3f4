from __future__ import annotations

from bshengine.schemas.response import BshResponse
from bshengine.services.base import BaseService, OnError, OnSuccess


class UtilsService(BaseService):
    base_endpoint = "/api/utils"
    api_prefix = "utils"

    async def trigger_functions(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request("/triggers/functions", operation="triggerFunctions", on_success=on_success, on_error=on_error)
        )

    async def trigger_actions(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request("/triggers/actions", operation="triggerActions", on_success=on_success, on_error=on_error)
        )

    async def secrets(
        self,
        *,
        source: str = "env",
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(
            self._request(f"/secrets/{source or 'env'}", operation="secrets", on_success=on_success, on_error=on_error)
        )
