from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from bshengine.schemas.response import BshResponse
from bshengine.services.base import BaseService, OnError, OnSuccess

SETTINGS_NAME = "BshEngine"


class SettingsService(BaseService):
    base_endpoint = "/api/settings"
    api_prefix = "settings"

    async def load(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(self._request(operation="load", on_success=on_success, on_error=on_error))

    async def update(
        self,
        *,
        payload: BaseModel | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        # The engine keeps a single settings document under this name.
        body = {**payload, "name": SETTINGS_NAME}
        return await self.client.put(
            self._request(operation="update", payload=body, on_success=on_success, on_error=on_error)
        )
