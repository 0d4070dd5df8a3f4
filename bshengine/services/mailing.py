from __future__ import annotations

from typing import Any

from bshengine.schemas.response import BshResponse
from bshengine.schemas.storage import MailingPayload
from bshengine.services.base import BaseService, OnError, OnSuccess


class MailingService(BaseService):
    base_endpoint = "/api/mailing"
    api_prefix = "mailing"

    async def send(
        self,
        *,
        payload: MailingPayload | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request("/send", operation="send", payload=payload, on_success=on_success, on_error=on_error)
        )
