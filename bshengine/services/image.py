from __future__ import annotations

import json
from typing import Any

from bshengine.client.types import FormData
from bshengine.schemas.response import BshResponse
from bshengine.schemas.storage import UploadOptions
from bshengine.services.base import BaseService, OnError, OnSuccess
from bshengine.services.core import CoreEntities


class ImageService(BaseService):
    base_endpoint = "/api/images"
    api_prefix = "image"

    async def upload(
        self,
        *,
        file: Any,
        folder: str | None = None,
        filename: str | None = None,
        options: UploadOptions | dict[str, Any] | None = None,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        form = FormData()
        form.set("file", file)
        if folder:
            form.set("folder", folder)
        if filename:
            form.set("filename", filename)
        if options is not None:
            if isinstance(options, UploadOptions):
                options = options.model_dump(mode="json")
            form.set("options", json.dumps(options))
        return await self.client.post(
            self._request(
                "/upload",
                operation="upload",
                payload=form,
                on_success=on_success,
                on_error=on_error,
                entity=CoreEntities.BshFiles.value,
            )
        )
