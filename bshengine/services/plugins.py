from __future__ import annotations

from typing import Any

from bshengine.client.types import FormData
from bshengine.schemas.response import BshResponse
from bshengine.services.base import BaseService, OnError, OnSuccess
from bshengine.services.core import CoreEntities


class PluginService(BaseService):
    base_endpoint = "/api/plugins"
    api_prefix = "plugins"

    async def install_zip(
        self,
        *,
        file: Any,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        form = FormData()
        form.set("file", file)
        return await self.client.post(
            self._request(
                "/install/zip",
                operation="installZip",
                payload=form,
                on_success=on_success,
                on_error=on_error,
                entity=CoreEntities.BshPlugins.value,
            )
        )

    async def install_core(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/install/core",
                operation="installCore",
                on_success=on_success,
                on_error=on_error,
                entity=CoreEntities.BshPlugins.value,
            )
        )
